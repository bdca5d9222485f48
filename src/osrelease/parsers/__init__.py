"""
File parsers for os-release data.
"""

from osrelease.parsers.os_release_parser import (
    OsReleaseParser,
    extract_value,
    parse_lines,
    split_assignment,
)

__all__ = [
    "OsReleaseParser",
    "extract_value",
    "parse_lines",
    "split_assignment",
]
