"""Shared fixtures for tests."""
import copy
import json
import logging

import pytest


SAMPLE_SIDEBAR = {
    "sidebarSyncState": {},
    "sidebar": {
        "containers": [
            {"global": {}},
            {
                "items": [
                    "item",
                    {
                        "id": "pinned-1",
                        "title": None,
                        "childrenIds": ["tab-docs", "folder-work", "missing-id", "tab-escaped"],
                        "data": {"itemContainer": {"containerType": {"spaceItems": {"_0": "space-1"}}}},
                    },
                    {
                        "id": "tab-docs",
                        "parentID": "pinned-1",
                        "childrenIds": [],
                        "data": {"tab": {"savedURL": "https://docs.python.org", "savedTitle": "Python Docs"}},
                    },
                    {
                        "id": "folder-work",
                        "parentID": "pinned-1",
                        "title": "Work",
                        "childrenIds": ["tab-jira", "folder-nested", "tab-wiki"],
                        "data": {"list": {}},
                    },
                    {
                        "id": "tab-jira",
                        "parentID": "folder-work",
                        "childrenIds": [],
                        "data": {"tab": {"savedURL": "https://jira.example.com/board", "savedTitle": "Jira Board"}},
                    },
                    {
                        "id": "folder-nested",
                        "parentID": "folder-work",
                        "title": "Archive",
                        "childrenIds": ["tab-old"],
                        "data": {"list": {}},
                    },
                    {
                        "id": "tab-old",
                        "parentID": "folder-nested",
                        "childrenIds": [],
                        "data": {"tab": {"savedURL": "https://old.example.com", "savedTitle": "Old"}},
                    },
                    {
                        "id": "tab-wiki",
                        "parentID": "folder-work",
                        "childrenIds": [],
                        "data": {"tab": {"savedURL": "https://wiki.example.com", "savedTitle": "Wiki"}},
                    },
                    {
                        "id": "tab-escaped",
                        "parentID": "pinned-1",
                        "childrenIds": [],
                        "data": {"tab": {"savedURL": "https:\\/\\/example.com\\/"}},
                    },
                    "item",
                    {
                        "id": "unpinned-2",
                        "childrenIds": ["tab-news"],
                        "data": {"itemContainer": {}},
                    },
                    {
                        "id": "tab-news",
                        "parentID": "unpinned-2",
                        "childrenIds": [],
                        "data": {"tab": {"savedURL": "https://news.example.com", "savedTitle": "News"}},
                    },
                ],
                "spaces": [
                    "space",
                    {
                        "id": "space-1",
                        "title": "Personal",
                        "containerIDs": [{"pinned": {}}, "pinned-1"],
                        "newContainerIDs": [{"pinned": {}}, {"unpinned": "unpinned-2"}],
                    },
                    "space",
                    {
                        "id": "space-2",
                        "containerIDs": [],
                    },
                ],
            },
        ]
    },
}


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo logging setup done by the code under test."""
    logger = logging.getLogger("arc2html")
    level, handlers = logger.level, list(logger.handlers)
    yield
    logger.setLevel(level)
    logger.handlers[:] = handlers


@pytest.fixture
def sidebar_data():
    """Return a fresh copy of the sample sidebar export."""
    return copy.deepcopy(SAMPLE_SIDEBAR)


@pytest.fixture
def sidebar_path(tmp_path):
    """Create a temporary StorableSidebar.json with sample data."""
    sidebar_file = tmp_path / "StorableSidebar.json"
    sidebar_file.write_text(json.dumps(SAMPLE_SIDEBAR, indent=2), encoding="utf-8")
    return sidebar_file


def make_sidebar(items, spaces):
    """Wrap items and spaces in the StorableSidebar.json envelope."""
    return {"sidebar": {"containers": [{"global": {}}, {"items": items, "spaces": spaces}]}}


def tab(item_id, url, title=None):
    payload = {"savedURL": url}
    if title is not None:
        payload["savedTitle"] = title
    return {"id": item_id, "childrenIds": [], "data": {"tab": payload}}


def container(item_id, children):
    return {"id": item_id, "childrenIds": children, "data": {"itemContainer": {}}}
