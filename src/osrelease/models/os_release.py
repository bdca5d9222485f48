"""
OsRelease model for operating system identification data.

Represents the contents of an os-release(5) file: the well-known keys as
named fields, everything else in an overflow mapping.
"""

from types import MappingProxyType
from typing import Mapping

from pydantic import Field, field_serializer, field_validator

from osrelease.enums import OsReleaseKey
from osrelease.models.base import RecordModel


class OsRelease(RecordModel):
    """
    Parsed os-release record.

    Every well-known field defaults to an empty string when the key is
    absent from the source. Keys outside the well-known set land in
    ``extra`` with their raw value.

    Attributes:
        name: Operating system name as shown to the user
        pretty_name: Name suitable for presentation, usually with version
        id: Lower-case identifier of the operating system
        id_like: Space-separated identifiers of related (parent) systems
        build_id: Build identifier of the image, "rolling" on rolling releases
        version: Operating system version, including release codename
        version_id: Lower-case version identifier
        version_codename: Lower-case release codename
        home_url: Homepage of the operating system
        support_url: Main support page
        bug_report_url: Main bug reporting page
        documentation_url: Main documentation page
        privacy_policy_url: Privacy policy page
        ansi_color: Suggested ANSI color code for the name
        logo: Icon name of the operating system logo
        extra: Any other KEY=value assignment, sorted by key
    """

    name: str = Field(
        default="",
        alias="NAME",
        description="Operating system name, e.g. 'Arch Linux'",
    )

    pretty_name: str = Field(
        default="",
        alias="PRETTY_NAME",
        description="Pretty operating system name for presentation",
    )

    id: str = Field(
        default="",
        alias="ID",
        description="Operating system identifier, e.g. 'arch'",
    )

    id_like: str = Field(
        default="",
        alias="ID_LIKE",
        description="Identifiers of closely related operating systems",
    )

    build_id: str = Field(
        default="",
        alias="BUILD_ID",
        description="Build identifier, 'rolling' on rolling releases",
    )

    version: str = Field(default="", alias="VERSION")

    version_id: str = Field(default="", alias="VERSION_ID")

    version_codename: str = Field(default="", alias="VERSION_CODENAME")

    # Links
    home_url: str = Field(default="", alias="HOME_URL")

    support_url: str = Field(default="", alias="SUPPORT_URL")

    bug_report_url: str = Field(default="", alias="BUG_REPORT_URL")

    documentation_url: str = Field(default="", alias="DOCUMENTATION_URL")

    privacy_policy_url: str = Field(default="", alias="PRIVACY_POLICY_URL")

    # Presentation hints
    ansi_color: str = Field(
        default="",
        alias="ANSI_COLOR",
        description="ANSI color code, e.g. '38;2;23;147;209'",
    )

    logo: str = Field(
        default="",
        alias="LOGO",
        description="Logo icon name, e.g. 'archlinux-logo'",
    )

    extra: Mapping[str, str] = Field(
        default_factory=dict,
        validate_default=True,
        description="Assignments whose key is not a well-known key",
    )

    @field_validator("extra")
    @classmethod
    def _freeze_extra(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        # Read-only view, sorted by key
        return MappingProxyType(dict(sorted(value.items())))

    @field_serializer("extra")
    def _dump_extra(self, value: Mapping[str, str]) -> dict[str, str]:
        return dict(value)

    @property
    def id_like_list(self) -> list[str]:
        """Related operating system identifiers as a list."""
        return self.id_like.split()

    def get(self, key: str, default: str = "") -> str:
        """
        Look up a value by its os-release key.

        Well-known keys are read from their fields, anything else from
        ``extra``. Empty well-known fields count as unset.

        Args:
            key: Key as written in the file, e.g. "VERSION_ID"
            default: Value returned when the key is unset

        Returns:
            The stored value or ``default``
        """
        if key in OsReleaseKey.__members__:
            return getattr(self, OsReleaseKey(key).field_name) or default
        return self.extra.get(key, default)

    def __hash__(self) -> int:
        """Hash over every field, including extra."""
        values = tuple(getattr(self, key.field_name) for key in OsReleaseKey)
        return hash((values, tuple(self.extra.items())))

    def __str__(self) -> str:
        """String representation."""
        return self.pretty_name or self.name or self.id
