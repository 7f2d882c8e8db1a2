# =============================================================================
# tests/test_storage.py - Storage Service Tests
# =============================================================================

import pytest

from app.exceptions import InvalidFilenameError
from core.services.storage_service import StorageService


class TestSafeFilename:

    @pytest.mark.parametrize(
        "filename,expected",
        [
            ("file.txt", "file.txt"),
            ("dir/file.txt", "file.txt"),
            ("../../etc/passwd", "passwd"),
            ("C:\\temp\\file.txt", "file.txt"),
        ],
    )
    def test_keeps_basename(self, filename, expected):
        assert StorageService.safe_filename(filename) == expected

    @pytest.mark.parametrize("filename", [None, "", "..", "/"])
    def test_rejects_unusable(self, filename):
        with pytest.raises(InvalidFilenameError):
            StorageService.safe_filename(filename)


class TestSaveFile:

    def test_creates_directory(self, tmp_path):
        directory = tmp_path / "nested" / "target"

        path = StorageService.save_file(directory, "file.txt", b"hello")

        assert path == directory / "file.txt"
        assert path.read_bytes() == b"hello"

    def test_overwrites_existing(self, tmp_path):
        StorageService.save_file(tmp_path, "file.txt", b"old")
        path = StorageService.save_file(tmp_path, "file.txt", b"new")

        assert path.read_bytes() == b"new"
