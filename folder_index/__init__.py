"""Core modules for folder bookmark index operations."""

from .models import BookmarkEntry, BookmarkFolder, BookmarkItem, BookmarkFile
from .errors import IndexSyncError, InvalidTargetError, FilesystemError, TreeFormatError
from .logger import Colors, setup_logging
from .parser import IndexParser, parse_bookmarks, extract_title, flatten_bookmark_files
from .scanner import scan_directory, get_file_metadata
from .merger import merge_bookmarks
from .renderer import HTMLRenderer, render_bookmarks
from .sync import DEFAULT_INDEX_FILENAME, sync_folder
from .tree import read_tree, iter_tree_rows, format_tsv_row

__all__ = [
    # Models
    "BookmarkEntry",
    "BookmarkFolder",
    "BookmarkItem",
    "BookmarkFile",
    # Errors
    "IndexSyncError",
    "InvalidTargetError",
    "FilesystemError",
    "TreeFormatError",
    # Logging
    "Colors",
    "setup_logging",
    # Pipeline
    "IndexParser",
    "parse_bookmarks",
    "extract_title",
    "flatten_bookmark_files",
    "scan_directory",
    "get_file_metadata",
    "merge_bookmarks",
    "HTMLRenderer",
    "render_bookmarks",
    "DEFAULT_INDEX_FILENAME",
    "sync_folder",
    # Tree dump
    "read_tree",
    "iter_tree_rows",
    "format_tsv_row",
]
