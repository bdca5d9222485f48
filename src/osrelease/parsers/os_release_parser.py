"""
Parser for os-release files.

Turns the KEY=value lines of an os-release(5) file into an OsRelease
record. Parsing is tolerant: malformed lines are skipped, never rejected.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from osrelease.enums import OsReleaseKey
from osrelease.models.os_release import OsRelease

logger = logging.getLogger(__name__)

QUOTE_CHARS = ('"', "'")


def extract_value(raw: str) -> str:
    """
    Extract a well-known key's value from the text after ``KEY=``.

    Surrounding whitespace is trimmed and one layer of matching single or
    double quotes is removed. Interior content is not unescaped.

    Example:
        >>> extract_value(' "Arch Linux" ')
        'Arch Linux'
        >>> extract_value("archlinux-logo")
        'archlinux-logo'
    """
    value = raw.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in QUOTE_CHARS:
        return value[1:-1]
    return value


def split_assignment(line: str) -> Optional[tuple[str, str]]:
    """
    Split a line at its first ``=`` into key and raw value.

    Returns None when there is no ``=`` or nothing follows it.
    """
    key, sep, value = line.partition("=")
    if not sep or not value:
        return None
    return key, value


class OsReleaseParser:
    """
    Parser for os-release files.

    Each line is trimmed, then matched against the well-known ``KEY=``
    prefixes in OsReleaseKey order. Matching lines set their field, later
    lines overwriting earlier ones. Other assignments go to the overflow
    mapping with their value untouched.

    Usage:
        parser = OsReleaseParser()
        release = parser.parse("/etc/os-release")

        print(f"{release.pretty_name} ({release.id})")
    """

    # (prefix, field) pairs, checked in declared order
    PREFIXES = tuple((key.prefix, key.field_name) for key in OsReleaseKey)

    def parse(self, file_path: str | Path) -> OsRelease:
        """
        Parse an os-release file.

        Args:
            file_path: Path to the file

        Returns:
            OsRelease built from the file's lines

        Raises:
            OsReleaseOpenError: If the file cannot be opened
        """
        from osrelease.loader import read_lines

        return self.parse_lines(read_lines(file_path))

    def parse_content(self, content: str) -> OsRelease:
        """
        Parse os-release data from string content.

        Args:
            content: File content as string

        Returns:
            OsRelease built from the content's lines
        """
        return self.parse_lines(content.splitlines())

    def parse_lines(self, lines: Iterable[str]) -> OsRelease:
        """
        Build an OsRelease from a sequence of lines.

        Args:
            lines: Lines with terminators already stripped

        Returns:
            OsRelease with every recognized value filled in
        """
        fields: dict[str, str] = {}
        extra: dict[str, str] = {}

        for line_number, raw_line in enumerate(lines, start=1):
            line = raw_line.strip()

            if self._match_field(line, fields) is not None:
                continue

            assignment = split_assignment(line)
            if assignment is None:
                if line:
                    logger.debug(f"Ignoring line {line_number}: {line!r}")
                continue

            key, value = assignment
            extra[key] = value

        return OsRelease(**fields, extra=extra)

    def _match_field(self, line: str, fields: dict[str, str]) -> Optional[str]:
        """Store the value of a well-known key line, returning its field."""
        for prefix, field_name in self.PREFIXES:
            if line.startswith(prefix):
                fields[field_name] = extract_value(line[len(prefix) :])
                return field_name
        return None


def parse_lines(lines: Iterable[str]) -> OsRelease:
    """Build an OsRelease from lines using a default parser."""
    return OsReleaseParser().parse_lines(lines)
