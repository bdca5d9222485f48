"""
osrelease - Operating system identification from os-release files.

This package reads os-release(5) files (/etc/os-release,
/usr/lib/os-release) into an immutable, structured record.
"""

__version__ = "0.1.0"

from osrelease.enums import OsReleaseKey
from osrelease.loader import (
    DEFAULT_PATHS,
    OsReleaseOpenError,
    load_default,
    load_from,
    read_lines,
)
from osrelease.models import OsRelease
from osrelease.parsers import OsReleaseParser, extract_value, parse_lines

__all__ = [
    # Model
    "OsRelease",
    "OsReleaseKey",
    # Parsing
    "OsReleaseParser",
    "parse_lines",
    "extract_value",
    # Loading
    "DEFAULT_PATHS",
    "OsReleaseOpenError",
    "load_default",
    "load_from",
    "read_lines",
]
