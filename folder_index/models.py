#!/usr/bin/env python3
"""Common data models for folder bookmark indexes."""

from dataclasses import dataclass, field
from typing import List, Optional, Union


@dataclass
class BookmarkEntry:
    """Represents a single bookmarked file."""
    name: str
    href: str
    add_date: int = 0
    last_modified: int = 0
    # Caption written by the user, never generated from the filesystem
    description: Optional[str] = None


@dataclass
class BookmarkFolder:
    """Represents a subfolder; holds links only, one level deep."""
    name: str
    last_modified: int = 0
    entries: List[BookmarkEntry] = field(default_factory=list)


BookmarkItem = Union[BookmarkEntry, BookmarkFolder]


@dataclass
class BookmarkFile:
    """A flattened link as consumed by the album pipeline."""
    href: str
    name: str
    caption: Optional[str] = None
