"""
Loading of os-release files from the filesystem.

Reads the lines of an os-release file and hands them to the parser. The
default lookup follows os-release(5): /etc/os-release first, then
/usr/lib/os-release.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from osrelease.models.os_release import OsRelease
from osrelease.parsers.os_release_parser import parse_lines

logger = logging.getLogger(__name__)

# Primary and fallback locations, as per os-release(5)
DEFAULT_PATHS = (
    Path("/etc/os-release"),
    Path("/usr/lib/os-release"),
)


class OsReleaseOpenError(OSError):
    """
    Raised when an os-release file cannot be opened.

    Attributes:
        path: The path that was attempted
        cause: The underlying OSError
    """

    def __init__(self, path: str | Path, cause: OSError):
        self.message = f"unable to open file at {str(path)!r}: {cause}"
        super().__init__(self.message)
        self.path = Path(path)
        self.cause = cause
        self.errno = cause.errno
        self.strerror = cause.strerror

    def __str__(self) -> str:
        return self.message


def read_lines(file_path: str | Path) -> list[str]:
    """
    Read the decoded lines of a file.

    Lines end at LF; a CR right before it is stripped, a bare CR is kept.
    Lines that are not valid UTF-8 are left out.

    Args:
        file_path: Path to the file

    Returns:
        List of decoded lines

    Raises:
        OsReleaseOpenError: If the file cannot be opened
    """
    try:
        with open(file_path, "rb") as f:
            data = f.read()
    except OSError as e:
        raise OsReleaseOpenError(file_path, e) from e

    raw_lines = data.split(b"\n")
    # Trailing newline leaves an empty last piece
    if raw_lines[-1] == b"":
        raw_lines.pop()

    lines = []
    for line_number, raw_line in enumerate(raw_lines, start=1):
        raw_line = raw_line.removesuffix(b"\r")
        try:
            lines.append(raw_line.decode("utf-8"))
        except UnicodeDecodeError as e:
            logger.debug(f"Skipping undecodable line {line_number} in {file_path}: {e}")

    return lines


def load_from(file_path: str | Path) -> OsRelease:
    """
    Load an os-release record from exactly the given path.

    Args:
        file_path: Path to an os-release style file

    Returns:
        Parsed OsRelease

    Raises:
        OsReleaseOpenError: If the file cannot be opened
    """
    logger.debug(f"Reading os-release data from {file_path}")
    return parse_lines(read_lines(file_path))


def load_default(paths: Sequence[str | Path] = DEFAULT_PATHS) -> OsRelease:
    """
    Load the os-release record of the running system.

    Tries each path in order and returns the first one that opens.

    Args:
        paths: Candidate paths, primary first

    Returns:
        Parsed OsRelease

    Raises:
        OsReleaseOpenError: The failure of the last path, if none opens
        ValueError: If ``paths`` is empty
    """
    last_error = None

    for path in paths:
        try:
            return load_from(path)
        except OsReleaseOpenError as e:
            logger.debug(f"Falling back from {path}: {e.cause}")
            last_error = e

    if last_error is None:
        raise ValueError("No os-release paths given")
    raise last_error
