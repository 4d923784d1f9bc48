#!/usr/bin/env python3
"""
Read `tree -J` dumps and flatten them to TSV rows.

Expects output of: tree -J --du -D --timefmt "%Y-%m-%d"
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple

from .errors import FilesystemError, TreeFormatError


@dataclass
class TreeNode:
    """A file, directory or link in the dump."""
    node_type: str
    name: str
    size: int
    time: str
    contents: Optional[List["TreeNode"]] = None


@dataclass
class ReportNode:
    """The trailing summary record of the dump."""
    node_type: str
    size: int
    directories: int
    files: int


@dataclass
class TreeList:
    node: TreeNode
    report: ReportNode


def _parse_node(data: Dict) -> TreeNode:
    contents = data.get("contents")
    return TreeNode(
        node_type=data["type"],
        name=data["name"],
        size=int(data["size"]),
        time=data["time"],
        contents=[_parse_node(child) for child in contents] if contents is not None else None,
    )


def parse_tree(data: List) -> TreeList:
    """Convert decoded tree JSON into typed records."""
    try:
        node_data, report_data = data
        node = _parse_node(node_data)
        report = ReportNode(
            node_type=report_data["type"],
            size=int(report_data["size"]),
            directories=int(report_data["directories"]),
            files=int(report_data["files"]),
        )
    except (TypeError, ValueError, KeyError) as e:
        raise TreeFormatError(f"Unexpected tree JSON structure: {e}") from e
    return TreeList(node=node, report=report)


def read_tree(path: Path) -> TreeList:
    """Read and parse a tree JSON file."""
    path = Path(path)
    logging.info(f"Reading tree dump {path}...")
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise FilesystemError(path, "read tree dump", e) from e
    except json.JSONDecodeError as e:
        raise TreeFormatError(f"{path} is not valid JSON: {e}") from e
    return parse_tree(data)


def iter_tree_rows(node: TreeNode, prefix: str = "") -> Iterator[Tuple[str, int, str]]:
    """Yield (full path, size, time) for a node and all its descendants."""
    full_path = f"{prefix}{node.name}"
    yield full_path, node.size, node.time
    for child in node.contents or []:
        yield from iter_tree_rows(child, f"{full_path}/")


def format_tsv_row(row: Tuple[str, int, str]) -> str:
    path, size, time = row
    return f"{path}\t{size}\t{time}"
