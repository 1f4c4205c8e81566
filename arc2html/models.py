#!/usr/bin/env python3
"""Common data models for Arc sidebar conversion."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Tuple, Union


@dataclass
class Bookmark:
    """Represents a single bookmark."""
    title: str
    url: str
    source_id: Optional[str] = None


@dataclass
class BookmarkFolder:
    """Represents a bookmark folder containing other bookmarks or folders."""
    title: str
    children: List[Union["Bookmark", "BookmarkFolder"]] = field(default_factory=list)
    source_id: Optional[str] = None


class PayloadKind(Enum):
    """What an Arc sidebar item holds."""
    TAB = "tab"
    LIST = "list"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class SidebarItem:
    """One record from the sidebar `items` array, with its payload decided."""
    id: str
    title: Optional[str] = None
    children_ids: Tuple[str, ...] = ()
    kind: PayloadKind = PayloadKind.UNKNOWN
    saved_url: Optional[str] = None
    saved_title: Optional[str] = None

    @classmethod
    def from_raw(cls, raw: Any) -> Optional["SidebarItem"]:
        """
        Build an item from a raw JSON entry.

        Returns None for type-tag markers (non-object entries) and for
        objects without a string id.
        """
        if not isinstance(raw, dict):
            return None
        item_id = raw.get("id")
        if not isinstance(item_id, str):
            return None

        children = raw.get("childrenIds")
        if isinstance(children, list):
            children_ids = tuple(c for c in children if isinstance(c, str))
        else:
            children_ids = ()

        title = raw.get("title")
        if not isinstance(title, str):
            title = None

        kind = PayloadKind.UNKNOWN
        saved_url = saved_title = None
        data = raw.get("data")
        if isinstance(data, dict):
            # Arc writes empty payloads as {"list": {}}, so test presence
            if data.get("tab") is not None:
                kind = PayloadKind.TAB
                tab = data["tab"] if isinstance(data["tab"], dict) else {}
                saved_url = _str_or_none(tab.get("savedURL"))
                saved_title = _str_or_none(tab.get("savedTitle"))
            elif data.get("list") is not None:
                kind = PayloadKind.LIST

        return cls(
            id=item_id,
            title=title,
            children_ids=children_ids,
            kind=kind,
            saved_url=saved_url,
            saved_title=saved_title,
        )

    @property
    def is_tab(self) -> bool:
        """True when the item is a saved tab."""
        return self.kind is PayloadKind.TAB

    @property
    def is_list(self) -> bool:
        """True when the item is a folder-like list."""
        return self.kind is PayloadKind.LIST


def _str_or_none(value: Any) -> Optional[str]:
    """Return `value` if it is a string, else None."""
    return value if isinstance(value, str) else None
