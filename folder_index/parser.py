#!/usr/bin/env python3
"""Parse existing Netscape-style bookmark index files."""

import html
import logging
import re
from enum import Enum, auto
from typing import List, Optional

from .models import BookmarkEntry, BookmarkFile, BookmarkFolder, BookmarkItem

UNTITLED = "Untitled"

TITLE_RE = re.compile(r"<H1>(.*?)</H1>", re.DOTALL)
MAIN_LIST_RE = re.compile(r"<H1>.*?</H1>\s*<DL><p>(.*)</DL><p>\s*$", re.DOTALL)
LINK_RE = re.compile(
    r'<DT><A\s+HREF="(?P<href>(?:[^"&<>]|&(?:amp|#38|#x26);)+)"'
    r'(?:\s+ADD_DATE="(?P<add_date>\d+)")?'
    r'(?:\s+LAST_MODIFIED="(?P<last_modified>\d+)")?'
    r'>(?P<name>[^<]+)</A>'
)
FOLDER_RE = re.compile(
    r'<DT><H3'
    r'(?:\s+ADD_DATE="(?P<add_date>\d+)")?'
    r'(?:\s+LAST_MODIFIED="(?P<last_modified>\d+)")?'
    r'>(?P<name>[^<]+)</H3>'
)

LIST_OPEN = "<DL><p>"
LIST_CLOSE = "</DL>"
DESCRIPTION = "<DD>"


class ParserState(Enum):
    """Where the line cursor currently is in the index structure."""
    TOP_LEVEL = auto()
    FOLDER_HEADING = auto()
    IN_FOLDER = auto()
    SKIPPING_NESTED = auto()


def extract_title(content: str) -> str:
    """Return the text of the <H1> heading, or 'Untitled' if there is none."""
    match = TITLE_RE.search(content)
    if not match:
        return UNTITLED
    return html.unescape(match.group(1))


class IndexParser:
    """
    Line-cursor parser for the bookmark index dialect written by this tool.

    Only one level of folders is supported. A folder found inside another
    folder is dropped together with everything in its nested list.
    """

    def __init__(self, content: str):
        self.content = content
        self.lines: List[str] = []
        self.pos = 0
        self.state = ParserState.TOP_LEVEL
        self.items: List[BookmarkItem] = []
        self.folder: Optional[BookmarkFolder] = None
        self.skip_depth = 0

    def parse(self) -> List[BookmarkItem]:
        """Parse the index text into an ordered list of items."""
        if not self.content.strip():
            return []

        match = MAIN_LIST_RE.search(self.content)
        if not match:
            logging.warning("Existing index has no recognizable bookmark list, treating it as empty")
            return []

        self.lines = [line.strip() for line in match.group(1).split("\n")]
        self.pos = 0
        self.state = ParserState.TOP_LEVEL
        self.items = []
        self.folder = None
        self.skip_depth = 0

        while self.pos < len(self.lines):
            line = self.lines[self.pos]
            self.pos += 1
            if self.state is ParserState.TOP_LEVEL:
                self._top_level(line)
            elif self.state is ParserState.FOLDER_HEADING:
                self._folder_heading(line)
            elif self.state is ParserState.IN_FOLDER:
                self._in_folder(line)
            else:
                self._skipping_nested(line)

        logging.debug(f"Parsed {len(self.items)} existing items")
        return self.items

    def _top_level(self, line: str):
        if line.startswith("<DT><A"):
            entry = self._parse_link(line)
            if entry:
                self.items.append(entry)
        elif line.startswith("<DT><H3"):
            folder = self._parse_folder(line)
            if folder:
                self.items.append(folder)
                self.folder = folder
                self.state = ParserState.FOLDER_HEADING
        elif line:
            logging.debug(f"Ignoring line: {line}")

    def _folder_heading(self, line: str):
        if line == LIST_OPEN:
            self.state = ParserState.IN_FOLDER
            return
        # Heading without a nested list: an empty folder, reread the line
        self.folder = None
        self.state = ParserState.TOP_LEVEL
        self.pos -= 1

    def _in_folder(self, line: str):
        if line.startswith(LIST_CLOSE):
            self.folder = None
            self.state = ParserState.TOP_LEVEL
        elif line.startswith("<DT><A"):
            entry = self._parse_link(line)
            if entry:
                self.folder.entries.append(entry)
        elif line.startswith("<DT><H3"):
            logging.debug(f"Ignoring nested folder: {line}")
            if self._peek() == LIST_OPEN:
                self.pos += 1
                self.skip_depth = 1
                self.state = ParserState.SKIPPING_NESTED
        elif line:
            logging.debug(f"Ignoring line in folder '{self.folder.name}': {line}")

    def _skipping_nested(self, line: str):
        if line.startswith("<DL>"):
            self.skip_depth += 1
        elif line.startswith(LIST_CLOSE):
            self.skip_depth -= 1
            if self.skip_depth == 0:
                self.state = ParserState.IN_FOLDER

    def _peek(self) -> Optional[str]:
        if self.pos < len(self.lines):
            return self.lines[self.pos]
        return None

    def _parse_link(self, line: str) -> Optional[BookmarkEntry]:
        match = LINK_RE.fullmatch(line)
        if not match:
            logging.debug(f"Skipping malformed link: {line}")
            return None

        entry = BookmarkEntry(
            name=html.unescape(match.group("name")),
            href=match.group("href"),
            add_date=int(match.group("add_date") or 0),
            last_modified=int(match.group("last_modified") or 0),
        )

        following = self._peek()
        if following is not None and following.startswith(DESCRIPTION):
            entry.description = following[len(DESCRIPTION):].strip()
            self.pos += 1
        return entry

    def _parse_folder(self, line: str) -> Optional[BookmarkFolder]:
        match = FOLDER_RE.fullmatch(line)
        if not match:
            logging.debug(f"Skipping malformed folder: {line}")
            return None
        return BookmarkFolder(
            name=html.unescape(match.group("name")),
            last_modified=int(match.group("last_modified") or 0),
        )


def parse_bookmarks(content: str) -> List[BookmarkItem]:
    """Parse index text; anything unrecognizable yields an empty list."""
    return IndexParser(content).parse()


def flatten_bookmark_files(items: List[BookmarkItem]) -> List[BookmarkFile]:
    """Flatten items to (href, name, caption) records, recursing into folders."""
    files = []
    for item in items:
        if isinstance(item, BookmarkEntry):
            files.append(BookmarkFile(href=item.href, name=item.name, caption=item.description))
        elif isinstance(item, BookmarkFolder):
            files.extend(flatten_bookmark_files(item.entries))
    return files
