#!/usr/bin/env python3
"""Netscape Bookmark File output."""

import logging
from typing import List, Union

from .models import Bookmark, BookmarkFolder

logger = logging.getLogger(__name__)

HEADER = """<!DOCTYPE NETSCAPE-Bookmark-file-1>
<!-- This is an automatically generated file.
     It will be read and overwritten.
     DO NOT EDIT! -->
<META HTTP-EQUIV="Content-Type" CONTENT="text/html; charset=UTF-8">
<TITLE>Bookmarks</TITLE>
<H1>Bookmarks</H1>
<DL><p>
"""

FOOTER = "</DL><p>"

INDENT = "    "


class HTMLExporter:
    """Exports bookmarks to HTML format."""

    def __init__(self, folders: List[BookmarkFolder]):
        self.folders = folders

    def export(self) -> str:
        """Export bookmarks to HTML string."""
        logger.info("Converting bookmarks to HTML...")

        html_parts = [HEADER]
        for folder in self.folders:
            html_parts.extend(self._node_to_html(folder, depth=1))
        html_parts.append(FOOTER)

        logger.debug("HTML conversion completed")
        return "".join(html_parts)

    def _node_to_html(self, node: Union[Bookmark, BookmarkFolder], depth: int) -> List[str]:
        """Convert a bookmark or folder to HTML lines."""
        indent = INDENT * depth

        if isinstance(node, Bookmark):
            # Text is written as-is, no entity escaping
            return [f'{indent}<DT><A HREF="{node.url}">{node.title}</A>\n']

        lines = [
            f"{indent}<DT><H3>{node.title}</H3>\n",
            f"{indent}<DL><p>\n",
        ]
        for item in node.children:
            lines.extend(self._node_to_html(item, depth + 1))
        lines.append(f"{indent}</DL><p>\n")
        return lines
