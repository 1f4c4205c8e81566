#!/usr/bin/env python3
"""Rebuild the Arc sidebar tree from its flat item list."""

import logging
from typing import Any, Dict, Iterator, List, Optional, Union

from .models import Bookmark, BookmarkFolder, SidebarItem
from .record_index import RecordIndex

DEFAULT_SPACE_TITLE = "Default Space"
UNTITLED_FOLDER_TITLE = "Untitled Folder"

Node = Union[Bookmark, BookmarkFolder]


def clean_url(url: Optional[str]) -> Optional[str]:
    """Remove the JSON escape characters Arc leaves in saved URLs."""
    if not url:
        return url
    return url.replace("\\//", "//").replace("\\", "").strip()


class SidebarTreeBuilder:
    """Converts Arc spaces into bookmark folders using a RecordIndex."""

    def __init__(self, index: RecordIndex, log: Optional[logging.Logger] = None):
        self.index = index
        self.log = log or logging.getLogger(__name__)

    def build(self, spaces: List[Any]) -> List[BookmarkFolder]:
        """Convert every space object in `spaces`, skipping marker entries."""
        folders = []
        for space in spaces:
            if not isinstance(space, dict):
                self.log.debug(f"Skipping non-dict space entry: {space!r}")
                continue
            folders.append(self.build_space(space))
        return folders

    def build_space(self, space: Dict[str, Any]) -> BookmarkFolder:
        """Convert one space into a top-level folder."""
        self.log.debug(f"Processing space: {space.get('id', 'unknown')}")

        children: List[Node] = []
        for container_id in self._container_ids(space):
            container = self.index.lookup(container_id)
            if container is None:
                self.log.debug(f"Could not find container with id: {container_id}")
                continue
            children.extend(self.process_container(container))

        title = space.get("title")
        if not isinstance(title, str) or not title:
            title = DEFAULT_SPACE_TITLE
        space_id = space.get("id")
        return BookmarkFolder(
            title=title,
            children=children,
            source_id=space_id if isinstance(space_id, str) else None,
        )

    def _container_ids(self, space: Dict[str, Any]) -> Iterator[str]:
        """Yield container ids from containerIDs, then newContainerIDs."""
        container_ids = space.get("containerIDs")
        if isinstance(container_ids, list):
            for entry in container_ids:
                # Objects here are pinned/unpinned type tags
                if isinstance(entry, str):
                    yield entry

        new_container_ids = space.get("newContainerIDs")
        if isinstance(new_container_ids, list):
            for entry in new_container_ids:
                if isinstance(entry, dict) and len(entry) == 1:
                    candidate = next(iter(entry.values()))
                    if isinstance(candidate, str):
                        yield candidate
                elif isinstance(entry, str):
                    yield entry

    def process_container(self, container: SidebarItem) -> List[Node]:
        """Convert the direct children of a container."""
        self.log.debug(f"Processing container: {container.id}")

        if not container.children_ids:
            self.log.debug(f"No children in container: {container.id}")
            return []

        items: List[Node] = []
        for child_id in container.children_ids:
            item = self.index.lookup(child_id)
            if item is None:
                self.log.debug(f"Could not find item with id: {child_id}")
                continue

            if item.is_tab:
                bookmark = self._make_bookmark(item)
                items.append(bookmark)
                self.log.debug(f"Added bookmark: {bookmark.title}")
            elif item.is_list:
                folder = self._make_folder(item)
                items.append(folder)
                self.log.debug(f"Added folder: {folder.title} with {len(folder.children)} items")
            else:
                self.log.debug(f"Skipping item {item.id} of unknown type")

        return items

    def _make_folder(self, item: SidebarItem) -> BookmarkFolder:
        """Convert a list item into a folder of its direct tabs."""
        # Only tabs directly inside the list are kept; nested lists are not expanded
        children: List[Node] = []
        for child_id in item.children_ids:
            child = self.index.lookup(child_id)
            if child is not None and child.is_tab:
                children.append(self._make_bookmark(child))
        return BookmarkFolder(
            title=item.title or UNTITLED_FOLDER_TITLE,
            children=children,
            source_id=item.id,
        )

    def _make_bookmark(self, item: SidebarItem) -> Bookmark:
        """Convert a tab item into a bookmark with a cleaned URL."""
        url = clean_url(item.saved_url) or ""
        return Bookmark(
            title=item.saved_title or url,
            url=url,
            source_id=item.id,
        )
