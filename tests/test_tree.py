"""Unit tests for folder_index.tree module."""

import json

import pytest

from folder_index.errors import FilesystemError, TreeFormatError
from folder_index.tree import format_tsv_row, iter_tree_rows, parse_tree, read_tree

TREE_DATA = [
    {"type": "link", "name": "/Users/me/Drive", "size": 4096, "time": "2023-08-23", "contents": [
        {"type": "file", "name": "2023 Cashflow.gsheet", "size": 168, "time": "2023-12-04"},
        {"type": "directory", "name": "Archive", "size": 577632, "time": "2019-02-08", "contents": [
            {"type": "file", "name": "XÚÖ West.gdoc", "size": 168, "time": "2018-05-08"},
        ]},
    ]},
    {"type": "report", "size": 99984167157, "directories": 909, "files": 29484},
]


class TestParseTree:
    """Test parse_tree function."""

    def test_typed(self):
        """Should map JSON into typed records."""
        tree = parse_tree(TREE_DATA)
        assert tree.node.name == "/Users/me/Drive"
        assert tree.node.node_type == "link"
        assert tree.node.contents[1].contents[0].name == "XÚÖ West.gdoc"
        assert tree.report.files == 29484
        assert tree.report.directories == 909

    def test_leaf_has_no_contents(self):
        """Should leave contents unset for files."""
        tree = parse_tree(TREE_DATA)
        assert tree.node.contents[0].contents is None

    def test_bad_structure(self):
        """Should raise TreeFormatError for unexpected shapes."""
        with pytest.raises(TreeFormatError):
            parse_tree([{"name": "x"}])
        with pytest.raises(TreeFormatError):
            parse_tree({"type": "report"})


class TestReadTree:
    """Test read_tree function."""

    def test_read(self, tmp_path):
        """Should read a dump from disk."""
        path = tmp_path / "tree.json"
        path.write_text(json.dumps(TREE_DATA), encoding="utf-8")
        assert read_tree(path).report.files == 29484

    def test_invalid_json(self, tmp_path):
        """Should raise TreeFormatError for invalid JSON."""
        path = tmp_path / "tree.json"
        path.write_text("{not json")
        with pytest.raises(TreeFormatError):
            read_tree(path)

    def test_missing(self, tmp_path):
        """Should raise FilesystemError for a missing file."""
        with pytest.raises(FilesystemError):
            read_tree(tmp_path / "missing.json")


class TestIterTreeRows:
    """Test iter_tree_rows function."""

    def test_full_paths(self):
        """Should yield pre-order rows with full paths."""
        rows = list(iter_tree_rows(parse_tree(TREE_DATA).node))
        assert rows == [
            ("/Users/me/Drive", 4096, "2023-08-23"),
            ("/Users/me/Drive/2023 Cashflow.gsheet", 168, "2023-12-04"),
            ("/Users/me/Drive/Archive", 577632, "2019-02-08"),
            ("/Users/me/Drive/Archive/XÚÖ West.gdoc", 168, "2018-05-08"),
        ]

    def test_format_tsv_row(self):
        """Should join fields with tabs."""
        assert format_tsv_row(("a/b", 10, "2020-01-01")) == "a/b\t10\t2020-01-01"
