"""Shared fixtures for folder_index tests."""

import os

import pytest

from folder_index.models import BookmarkEntry, BookmarkFolder


@pytest.fixture
def make_file():
    """Create a file with a fixed modification time."""
    def _make(path, mtime=1700000000, content="x"):
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        os.utime(path, (mtime, mtime))
        return path
    return _make


@pytest.fixture
def fixed_metadata():
    """Metadata provider that ignores the filesystem."""
    def _metadata(path):
        return 100, 200
    return _metadata


@pytest.fixture
def sample_items():
    """A mixed item list as the merge engine would produce it."""
    return [
        BookmarkEntry(name="a.jpg", href="a.jpg", add_date=1, last_modified=2, description="sunset"),
        BookmarkEntry(name="b c.jpg", href="b%20c.jpg", add_date=3, last_modified=4),
        BookmarkFolder(
            name="2023",
            last_modified=5,
            entries=[
                BookmarkEntry(name="x.png", href="2023/x.png", add_date=6, last_modified=7),
                BookmarkEntry(name="y.png", href="2023/y.png", add_date=8, last_modified=9, description="beach"),
            ],
        ),
        BookmarkFolder(name="empty", last_modified=10),
    ]
