#!/usr/bin/env python3
"""Lookup of Arc sidebar items by id."""

import logging
from typing import Any, Dict, Iterable, List, Optional

from .models import SidebarItem

logger = logging.getLogger(__name__)


class RecordIndex:
    """
    Read-only mapping from item id to SidebarItem.

    The first item seen for an id wins; later duplicates are recorded in
    `duplicates` and otherwise ignored.
    """

    def __init__(self, entries: Iterable[Any] = ()):
        self._items: Dict[str, SidebarItem] = {}
        self.duplicates: List[str] = []
        self.skipped = 0

        for entry in entries:
            item = SidebarItem.from_raw(entry)
            if item is None:
                self.skipped += 1
                continue
            if item.id in self._items:
                logger.debug(f"Duplicate item id {item.id}, keeping first")
                self.duplicates.append(item.id)
                continue
            self._items[item.id] = item

    @classmethod
    def build(cls, entries: Iterable[Any]) -> "RecordIndex":
        """Index a flat sequence of raw sidebar entries."""
        return cls(entries)

    def lookup(self, item_id: Any) -> Optional[SidebarItem]:
        """Return the item for `item_id`, or None when it does not resolve."""
        if not isinstance(item_id, str):
            return None
        return self._items.get(item_id)

    def __contains__(self, item_id: Any) -> bool:
        return self.lookup(item_id) is not None

    def __len__(self) -> int:
        return len(self._items)
