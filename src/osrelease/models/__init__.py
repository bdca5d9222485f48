"""
Pydantic models for parsed os-release data.
"""

from osrelease.enums import OsReleaseKey
from osrelease.models.base import RecordModel
from osrelease.models.os_release import OsRelease

__all__ = [
    "RecordModel",
    "OsRelease",
    "OsReleaseKey",
]
