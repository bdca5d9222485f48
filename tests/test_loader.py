"""
Tests for loading os-release files from disk.
"""

import errno
import logging
from pathlib import Path

import pytest

from osrelease import (
    DEFAULT_PATHS,
    OsRelease,
    OsReleaseOpenError,
    load_default,
    load_from,
    read_lines,
)


FEDORA_CONTENT = """NAME="Fedora Linux"
VERSION="40 (Workstation Edition)"
ID=fedora
VERSION_ID=40
VERSION_CODENAME=""
PRETTY_NAME="Fedora Linux 40 (Workstation Edition)"
ANSI_COLOR="0;38;2;60;110;180"
LOGO=fedora-logo-icon
HOME_URL="https://fedoraproject.org/"
VARIANT="Workstation Edition"
VARIANT_ID=workstation
"""


@pytest.fixture
def fedora_file(tmp_path):
    """An os-release file in a temporary directory."""
    file_path = tmp_path / "os-release"
    file_path.write_text(FEDORA_CONTENT)
    return file_path


class TestReadLines:
    """Tests for reading decoded lines."""

    def test_terminators_stripped(self, tmp_path):
        """Test that LF and CRLF endings are removed."""
        file_path = tmp_path / "os-release"
        file_path.write_bytes(b"ID=arch\r\nNAME=Arch\n")
        assert read_lines(file_path) == ["ID=arch", "NAME=Arch"]

    def test_bare_carriage_return_kept(self, tmp_path):
        """Test that only LF ends a line."""
        file_path = tmp_path / "os-release"
        file_path.write_bytes(b"NAME=a\rb\nID=x\r\n")
        assert read_lines(file_path) == ["NAME=a\rb", "ID=x"]

    def test_blank_lines_and_missing_final_newline(self, tmp_path):
        """Test that inner blank lines survive and no final newline is needed."""
        file_path = tmp_path / "os-release"
        file_path.write_bytes(b"ID=x\n\nNAME=y")
        assert read_lines(file_path) == ["ID=x", "", "NAME=y"]

    def test_empty_file(self, tmp_path):
        """Test that an empty file has no lines."""
        file_path = tmp_path / "os-release"
        file_path.write_bytes(b"")
        assert read_lines(file_path) == []

    def test_undecodable_lines_skipped(self, tmp_path):
        """Test that invalid UTF-8 lines are left out."""
        file_path = tmp_path / "os-release"
        file_path.write_bytes(b"NAME=ok\n\xff\xfe=bad\nID=x\n")
        assert read_lines(file_path) == ["NAME=ok", "ID=x"]

    def test_undecodable_line_logged(self, tmp_path, caplog):
        """Test that skipped lines are reported at debug level."""
        file_path = tmp_path / "os-release"
        file_path.write_bytes(b"NAME=ok\n\xff\xfe=bad\n")

        with caplog.at_level(logging.DEBUG, logger="osrelease"):
            read_lines(file_path)

        assert any(
            record.levelno == logging.DEBUG and "undecodable line 2" in record.getMessage()
            for record in caplog.records
        )

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises an open error."""
        with pytest.raises(OsReleaseOpenError):
            read_lines(tmp_path / "missing")


class TestLoadFrom:
    """Tests for load_from."""

    def test_load(self, fedora_file):
        """Test loading a real-looking file."""
        release = load_from(fedora_file)

        assert isinstance(release, OsRelease)
        assert release.name == "Fedora Linux"
        assert release.version == "40 (Workstation Edition)"
        assert release.version_id == "40"
        assert release.version_codename == ""
        assert release.logo == "fedora-logo-icon"
        assert release.extra == {
            "VARIANT": '"Workstation Edition"',
            "VARIANT_ID": "workstation",
        }

    def test_load_str_path(self, fedora_file):
        """Test that string paths are accepted."""
        assert load_from(str(fedora_file)).id == "fedora"

    def test_undecodable_line_does_not_fail(self, tmp_path):
        """Test that a bad line only drops that line."""
        file_path = tmp_path / "os-release"
        file_path.write_bytes(b'NAME="Arch Linux"\nLOGO=\xe9t\xe9\nID=arch\n')

        release = load_from(file_path)
        assert release.name == "Arch Linux"
        assert release.id == "arch"
        assert release.logo == ""

    def test_missing_file(self, tmp_path):
        """Test the error raised for a missing file."""
        missing = tmp_path / "missing"

        with pytest.raises(OsReleaseOpenError) as exc_info:
            load_from(missing)

        error = exc_info.value
        assert error.path == missing
        assert isinstance(error.cause, FileNotFoundError)
        assert error.__cause__ is error.cause
        assert error.errno == errno.ENOENT
        assert str(missing) in str(error)
        assert str(error).startswith("unable to open file at")

    def test_directory(self, tmp_path):
        """Test that a directory cannot be loaded."""
        with pytest.raises(OsReleaseOpenError) as exc_info:
            load_from(tmp_path)
        assert exc_info.value.path == tmp_path

    def test_open_error_is_oserror(self, tmp_path):
        """Test that callers can catch the failure as OSError."""
        with pytest.raises(OSError):
            load_from(tmp_path / "missing")


class TestLoadDefault:
    """Tests for load_default."""

    def test_default_paths(self):
        """Test the standard lookup order."""
        assert DEFAULT_PATHS == (Path("/etc/os-release"), Path("/usr/lib/os-release"))

    def test_primary_wins(self, tmp_path, fedora_file):
        """Test that the first path is used when it exists."""
        secondary = tmp_path / "secondary"
        secondary.write_text("ID=other\n")

        release = load_default((fedora_file, secondary))
        assert release.id == "fedora"

    def test_fallback_to_secondary(self, tmp_path, fedora_file):
        """Test falling back when the primary path is missing."""
        release = load_default((tmp_path / "missing", fedora_file))
        assert release.id == "fedora"

    def test_fallback_logged(self, tmp_path, fedora_file, caplog):
        """Test that falling back reports the skipped path."""
        missing = tmp_path / "missing"

        with caplog.at_level(logging.DEBUG, logger="osrelease"):
            load_default((missing, fedora_file))

        assert any(
            f"Falling back from {missing}" in record.getMessage() for record in caplog.records
        )

    def test_both_missing_reports_secondary(self, tmp_path):
        """Test that the failure of the second path is surfaced."""
        primary = tmp_path / "etc-os-release"
        secondary = tmp_path / "usr-lib-os-release"

        with pytest.raises(OsReleaseOpenError) as exc_info:
            load_default((primary, secondary))

        assert exc_info.value.path == secondary
        assert str(secondary) in str(exc_info.value)

    def test_no_paths(self):
        """Test that an empty candidate list is rejected."""
        with pytest.raises(ValueError):
            load_default(())

    def test_running_system(self):
        """Test reading the host's own os-release file."""
        if not any(path.exists() for path in DEFAULT_PATHS):
            pytest.skip("No os-release file on this system")

        release = load_default()
        assert isinstance(release, OsRelease)
