#!/usr/bin/env python3
"""Merge parsed bookmark items with a fresh folder scan."""

import logging
import os
from dataclasses import replace
from pathlib import Path
from typing import Callable, Dict, List, Sequence, Set, Tuple
from urllib.parse import quote

from .models import BookmarkEntry, BookmarkFolder, BookmarkItem
from .scanner import get_file_metadata

MetadataProvider = Callable[[Path], Tuple[int, int]]


def display_name(name: str) -> str:
    """Decode undecodable filename bytes lossily for display."""
    return os.fsencode(name).decode("utf-8", "replace")


def encode_name(name: str) -> str:
    """Percent-encode a single path segment from its raw filesystem bytes."""
    return quote(os.fsencode(name), safe="")


def encode_relative_path(path: Path, base_path: Path) -> str:
    """Percent-encode a path relative to base_path, keeping '/' separators."""
    try:
        relative = path.relative_to(base_path)
    except ValueError:
        relative = path
    return "/".join(encode_name(part) for part in relative.parts)


def _new_entry(path: Path, href: str, metadata: MetadataProvider) -> BookmarkEntry:
    add_date, last_modified = metadata(path)
    return BookmarkEntry(
        name=display_name(path.name),
        href=href,
        add_date=add_date,
        last_modified=last_modified,
    )


def merge_bookmarks(
    existing: Sequence[BookmarkItem],
    files: Sequence[Path],
    dirs: Sequence[Tuple[Path, Sequence[Path]]],
    base_path: Path,
    metadata: MetadataProvider = get_file_metadata,
) -> List[BookmarkItem]:
    """
    Append newly found files and folders to the existing items.

    Existing items keep their position and fields; nothing is ever removed.
    Top-level links are matched by href, folders by name, and links inside
    a folder by href within that folder.

    Args:
        existing: Items parsed from the current index.
        files: Top-level files found by the scanner.
        dirs: (directory, files in directory) pairs found by the scanner.
        base_path: Folder the index lives in; nested hrefs are relative to it.
        metadata: Returns (created, modified) timestamps for a path.
    """
    base_path = Path(base_path)
    items: List[BookmarkItem] = list(existing)
    hrefs: Set[str] = set()
    folder_positions: Dict[str, int] = {}

    for position, item in enumerate(items):
        if isinstance(item, BookmarkEntry):
            hrefs.add(item.href)
        elif isinstance(item, BookmarkFolder):
            folder_positions.setdefault(item.name, position)

    added = 0
    for file_path in files:
        href = encode_name(file_path.name)
        if href in hrefs:
            continue
        items.append(_new_entry(file_path, href, metadata))
        hrefs.add(href)
        added += 1

    for dir_path, dir_files in dirs:
        dir_name = display_name(dir_path.name)
        position = folder_positions.get(dir_name)

        if position is not None:
            folder = items[position]
            entries = list(folder.entries)
            folder_hrefs = {entry.href for entry in entries}
            for file_path in dir_files:
                href = encode_relative_path(file_path, base_path)
                if href in folder_hrefs:
                    continue
                entries.append(_new_entry(file_path, href, metadata))
                folder_hrefs.add(href)
                added += 1
            if len(entries) != len(folder.entries):
                items[position] = replace(folder, entries=entries)
                logging.debug(f"Extended folder '{dir_name}' to {len(entries)} entries")
        else:
            _, last_modified = metadata(dir_path)
            folder = BookmarkFolder(name=dir_name, last_modified=last_modified)
            for file_path in dir_files:
                href = encode_relative_path(file_path, base_path)
                folder.entries.append(_new_entry(file_path, href, metadata))
                added += 1
            folder_positions[dir_name] = len(items)
            items.append(folder)
            logging.debug(f"Added folder '{dir_name}' with {len(folder.entries)} entries")

    logging.info(f"Merged {len(existing)} existing items, added {added} new links")
    return items
