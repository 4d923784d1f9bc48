#!/usr/bin/env python3
"""Sync a folder's bookmark index with the folder contents."""

import logging
import os
from pathlib import Path
from typing import List, Tuple, Union

from .errors import FilesystemError, InvalidTargetError
from .merger import merge_bookmarks
from .parser import parse_bookmarks
from .renderer import render_bookmarks
from .scanner import scan_directory

DEFAULT_INDEX_FILENAME = "index.html"
DEFAULT_TITLE = "Bookmarks Menu"


def read_index(index_path: Path) -> str:
    """Read the index text, or return an empty string if it does not exist."""
    if not index_path.exists():
        logging.debug(f"No existing index at {index_path}")
        return ""
    try:
        return index_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FilesystemError(index_path, "read index", e) from e


def write_index(index_path: Path, content: str):
    """Replace the index in one step so a failed write leaves the old file intact."""
    tmp = index_path.with_name(f".{index_path.name}.tmp")
    try:
        tmp.write_text(content, encoding="utf-8")
        os.replace(tmp, index_path)
    except OSError as e:
        if tmp.exists():
            tmp.unlink()
        raise FilesystemError(index_path, "write index", e) from e


def sync_folder(
    folder: Union[str, Path],
    index_filename: str = DEFAULT_INDEX_FILENAME,
    recursive: bool = False,
) -> int:
    """
    Update the bookmark index of a folder.

    Reads the existing index (if any), scans the folder, merges new files
    and subfolders in, and writes the result back. With recursive set, each
    subfolder is scanned one level deep and becomes a bookmark folder.

    Returns:
        Number of top-level items written.
    """
    folder = Path(folder)
    if not folder.is_dir():
        raise InvalidTargetError(folder)

    index_path = folder / index_filename

    logging.info(f"Reading index {index_path}...")
    existing_items = parse_bookmarks(read_index(index_path))

    logging.info(f"Scanning {folder}...")
    files, dirs = scan_directory(folder, index_filename, recursive)

    dir_contents: List[Tuple[Path, List[Path]]] = []
    if recursive:
        for dir_path in dirs:
            dir_files, _ = scan_directory(dir_path, index_filename, False)
            dir_contents.append((dir_path, dir_files))

    merged_items = merge_bookmarks(existing_items, files, dir_contents, folder)

    folder_name = folder.name or folder.resolve().name or DEFAULT_TITLE
    write_index(index_path, render_bookmarks(folder_name, merged_items))

    logging.info(f"Index written: {index_path}")
    return len(merged_items)
