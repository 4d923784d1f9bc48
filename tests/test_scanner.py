"""Unit tests for folder_index.scanner module."""

from types import SimpleNamespace
from unittest.mock import patch

import pytest

from folder_index.errors import FilesystemError
from folder_index.scanner import get_file_metadata, scan_directory


class TestScanDirectory:
    """Test scan_directory function."""

    def test_empty(self, tmp_path):
        """Should return nothing for an empty folder."""
        assert scan_directory(tmp_path, "index.html") == ([], [])

    def test_sorted_files(self, tmp_path, make_file):
        """Should return files sorted by name."""
        make_file(tmp_path / "b.jpg")
        make_file(tmp_path / "a.jpg")
        make_file(tmp_path / "C.jpg")

        files, dirs = scan_directory(tmp_path, "index.html")

        assert [f.name for f in files] == ["C.jpg", "a.jpg", "b.jpg"]
        assert dirs == []

    def test_skips_index_and_hidden(self, tmp_path, make_file):
        """Should never return the index file or dotfiles."""
        make_file(tmp_path / "index.html")
        make_file(tmp_path / ".DS_Store")
        make_file(tmp_path / ".hidden" / "inside.jpg")
        make_file(tmp_path / "a.jpg")

        files, dirs = scan_directory(tmp_path, "index.html", recursive=True)

        assert [f.name for f in files] == ["a.jpg"]
        assert dirs == []

    def test_custom_index_name(self, tmp_path, make_file):
        """Should skip only the configured index file."""
        make_file(tmp_path / "index.html")
        make_file(tmp_path / "album.html")

        files, _ = scan_directory(tmp_path, "album.html")

        assert [f.name for f in files] == ["index.html"]

    def test_dirs_only_when_recursive(self, tmp_path, make_file):
        """Should return directories only in recursive mode."""
        make_file(tmp_path / "2024" / "x.jpg")
        make_file(tmp_path / "2023" / "y.jpg")
        make_file(tmp_path / "a.jpg")

        files, dirs = scan_directory(tmp_path, "index.html", recursive=False)
        assert [f.name for f in files] == ["a.jpg"]
        assert dirs == []

        files, dirs = scan_directory(tmp_path, "index.html", recursive=True)
        assert [f.name for f in files] == ["a.jpg"]
        assert [d.name for d in dirs] == ["2023", "2024"]

    def test_missing_folder(self, tmp_path):
        """Should raise FilesystemError with the path."""
        missing = tmp_path / "missing"
        with pytest.raises(FilesystemError) as exc_info:
            scan_directory(missing, "index.html")
        assert exc_info.value.path == missing
        assert exc_info.value.operation == "scan directory"


class TestGetFileMetadata:
    """Test get_file_metadata function."""

    def test_modified(self, tmp_path, make_file):
        """Should return the modification time as integer seconds."""
        path = make_file(tmp_path / "a.jpg", mtime=1600000000)
        created, modified = get_file_metadata(path)
        assert modified == 1600000000
        assert isinstance(created, int)

    def test_birthtime_fallback(self, tmp_path):
        """Should use the modification time when no birth time exists."""
        fake = SimpleNamespace(st_mtime=1234.9)
        with patch("folder_index.scanner.os.stat", return_value=fake):
            assert get_file_metadata(tmp_path / "a.jpg") == (1234, 1234)

    def test_birthtime(self, tmp_path):
        """Should prefer the birth time when available."""
        fake = SimpleNamespace(st_mtime=2000.0, st_birthtime=1000.0)
        with patch("folder_index.scanner.os.stat", return_value=fake):
            assert get_file_metadata(tmp_path / "a.jpg") == (1000, 2000)

    def test_missing(self, tmp_path):
        """Should raise FilesystemError for a missing file."""
        with pytest.raises(FilesystemError):
            get_file_metadata(tmp_path / "missing.jpg")
