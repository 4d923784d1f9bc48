#!/usr/bin/env python3
"""List folder contents and read file timestamps."""

import logging
import os
from pathlib import Path
from typing import List, Tuple

from .errors import FilesystemError


def get_file_metadata(path: Path) -> Tuple[int, int]:
    """
    Return (created, modified) as Unix seconds.

    Falls back to the modification time when the platform does not
    report a birth time.
    """
    try:
        stat = os.stat(path)
    except OSError as e:
        raise FilesystemError(path, "read metadata", e) from e

    modified = int(stat.st_mtime)
    created = getattr(stat, "st_birthtime", None)
    if created is None:
        return modified, modified
    return int(created), modified


def scan_directory(
    folder: Path,
    index_filename: str,
    recursive: bool = False,
) -> Tuple[List[Path], List[Path]]:
    """
    List the immediate children of a folder.

    The index file itself and hidden entries (names starting with '.') are
    skipped. Files and directories are each sorted by name. Directories are
    only returned when recursive is set.

    Returns:
        Tuple of (files, dirs)
    """
    folder = Path(folder)
    files = []
    dirs = []

    try:
        children = list(folder.iterdir())
    except OSError as e:
        raise FilesystemError(folder, "scan directory", e) from e

    for path in children:
        name = path.name
        if name == index_filename:
            continue
        if name.startswith("."):
            logging.debug(f"Skipping hidden entry: {path}")
            continue

        if path.is_dir():
            if recursive:
                dirs.append(path)
        elif path.is_file():
            files.append(path)

    files.sort(key=lambda p: p.name)
    dirs.sort(key=lambda p: p.name)

    logging.debug(f"Scanned {folder}: {len(files)} files, {len(dirs)} directories")
    return files, dirs
