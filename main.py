#!/usr/bin/env python3
"""
Folder Index Tool

Keep Netscape-style bookmark index files in sync with folder contents.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from folder_index import (
    Colors,
    DEFAULT_INDEX_FILENAME,
    IndexSyncError,
    format_tsv_row,
    iter_tree_rows,
    read_tree,
    setup_logging,
    sync_folder,
)


def run_bookmarks(args: argparse.Namespace) -> int:
    """Generate or update the bookmark index of a folder."""
    count = sync_folder(args.folder, index_filename=args.index, recursive=args.recursive)
    index_path = Path(args.folder) / args.index
    print(f"{Colors.GREEN}Bookmark index generated:{Colors.RESET} {index_path}")
    print(f"Total entries: {count}")
    return 0


def run_tree(args: argparse.Namespace) -> int:
    """Print a tree JSON dump as TSV (path, size, timestamp)."""
    tree = read_tree(args.file)
    for row in iter_tree_rows(tree.node):
        print(format_tsv_row(row))
    print(tree.report.files)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="folder-index",
        description="Manage bookmark index files for a folder tree",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug output")
    parser.add_argument("-q", "--quiet", action="store_true", help="Suppress log output")
    subparsers = parser.add_subparsers(dest="command", required=True)

    p = subparsers.add_parser(
        "bookmarks", help="Generate and sync Netscape-style bookmark index files for folders"
    )
    p.add_argument("folder", type=Path, metavar="FOLDER", help="Folder to generate bookmarks for")
    p.add_argument(
        "-i", "--index",
        default=DEFAULT_INDEX_FILENAME,
        help=f"Name of the index file (default: {DEFAULT_INDEX_FILENAME})",
    )
    p.add_argument("-r", "--recursive", action="store_true", help="Include subdirectories one level deep")
    p.set_defaults(func=run_bookmarks)

    p = subparsers.add_parser("tree", help="Parse tree JSON and output TSV (path, size, timestamp)")
    p.add_argument(
        "file", type=Path, metavar="FILE",
        help='Tree JSON file (generated with: tree -J --du -D --timefmt "%%Y-%%m-%%d")',
    )
    p.set_defaults(func=run_tree)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(verbose=args.verbose, silent=args.quiet)

    try:
        return args.func(args)
    except IndexSyncError as e:
        print(f"{Colors.RED}Error:{Colors.RESET} {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n\nBye!")
        sys.exit(130)
