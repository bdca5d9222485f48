"""
Enums for os-release keys.

These enums define the well-known keys of the os-release(5) format that map
onto dedicated record fields.
"""

from enum import Enum


class OsReleaseKey(str, Enum):
    """
    Well-known os-release keys, in matching order.

    Each member's value is the key exactly as it appears in the file.
    """

    NAME = "NAME"
    PRETTY_NAME = "PRETTY_NAME"
    ID = "ID"
    ID_LIKE = "ID_LIKE"
    BUILD_ID = "BUILD_ID"
    VERSION = "VERSION"
    VERSION_ID = "VERSION_ID"
    VERSION_CODENAME = "VERSION_CODENAME"
    HOME_URL = "HOME_URL"
    SUPPORT_URL = "SUPPORT_URL"
    BUG_REPORT_URL = "BUG_REPORT_URL"
    DOCUMENTATION_URL = "DOCUMENTATION_URL"
    PRIVACY_POLICY_URL = "PRIVACY_POLICY_URL"
    ANSI_COLOR = "ANSI_COLOR"
    LOGO = "LOGO"

    @property
    def prefix(self) -> str:
        """Literal line prefix for this key, e.g. ``NAME=``."""
        return f"{self.value}="

    @property
    def field_name(self) -> str:
        """Name of the OsRelease attribute holding this key's value."""
        return self.value.lower()
