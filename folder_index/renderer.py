#!/usr/bin/env python3
"""Render bookmark items to the on-disk index format."""

import logging
from typing import List, Sequence

from .models import BookmarkEntry, BookmarkFolder, BookmarkItem

GENERATED_WARNING = (
    "<!-- This is an automatically generated file. It will be read and modified "
    "by automated tools. Edit only if you understand the risks -->"
)


class HTMLRenderer:
    """Renders bookmark items as a Netscape bookmark file."""

    INDENT = "    "

    def __init__(self, folder_name: str, items: Sequence[BookmarkItem]):
        self.folder_name = folder_name
        self.items = items

    def render(self) -> str:
        """Render items to HTML string."""
        html_parts = [
            '<!DOCTYPE NETSCAPE-Bookmark-file-1>',
            '<META HTTP-EQUIV="Content-Type" CONTENT="text/html; charset=UTF-8">',
            GENERATED_WARNING,
            '<TITLE>Bookmarks</TITLE>',
            f'<H1>{self._escape_html(self.folder_name)}</H1>',
            '<DL><p>',
        ]

        for item in self.items:
            if isinstance(item, BookmarkEntry):
                html_parts.extend(self._entry_to_html(item, level=1))
            elif isinstance(item, BookmarkFolder):
                html_parts.extend(self._folder_to_html(item, level=1))

        html_parts.append('</DL><p>')

        logging.debug(f"Rendered {len(self.items)} items")
        return '\n'.join(html_parts) + '\n'

    def _entry_to_html(self, entry: BookmarkEntry, level: int) -> List[str]:
        indent = self.INDENT * level
        lines = [
            f'{indent}<DT><A HREF="{entry.href}" ADD_DATE="{entry.add_date}" '
            f'LAST_MODIFIED="{entry.last_modified}">{self._escape_html(entry.name)}</A>'
        ]
        if entry.description is not None:
            lines.append(f'{indent}<DD>{entry.description}')
        return lines

    def _folder_to_html(self, folder: BookmarkFolder, level: int) -> List[str]:
        indent = self.INDENT * level
        lines = [
            f'{indent}<DT><H3 LAST_MODIFIED="{folder.last_modified}">{self._escape_html(folder.name)}</H3>',
            f'{indent}<DL><p>',
        ]
        for entry in folder.entries:
            lines.extend(self._entry_to_html(entry, level + 1))
        lines.append(f'{indent}</DL><p>')
        return lines

    def _escape_html(self, text: str) -> str:
        """Escape HTML special characters."""
        if text is None:
            text = ""
        return (text.replace("&", "&amp;")
                   .replace("<", "&lt;")
                   .replace(">", "&gt;"))


def render_bookmarks(folder_name: str, items: Sequence[BookmarkItem]) -> str:
    """Render the full index document for a folder."""
    return HTMLRenderer(folder_name, items).render()
