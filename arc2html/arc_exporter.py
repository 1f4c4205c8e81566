#!/usr/bin/env python3
"""Export Arc Browser bookmarks to HTML file."""

import json
import logging
import os
from dataclasses import asdict, dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from .html_exporter import HTMLExporter
from .logs import setup_logging
from .models import Bookmark, BookmarkFolder
from .record_index import RecordIndex
from .tree_builder import SidebarTreeBuilder

logger = logging.getLogger(__name__)


class ArcDataError(Exception):
    """Custom exception for Arc data parsing errors."""
    pass


@dataclass
class ConversionResult:
    """Output of one conversion: the HTML document and the tree behind it."""
    html: str
    folders: List[BookmarkFolder]


class ArcDataReader:
    """Handles reading and parsing Arc browser data."""

    FILENAME = "StorableSidebar.json"

    @classmethod
    def get_arc_data_path(cls) -> Path:
        """Get the path to Arc's data file (macOS)."""
        return Path(os.path.expanduser("~/Library/Application Support/Arc/")) / cls.FILENAME

    @classmethod
    def find_data_file(cls) -> Path:
        """Look for the sidebar file in the current directory, then in Arc's data directory."""
        current_file = Path(cls.FILENAME)
        if current_file.exists():
            logger.debug(f"Found {cls.FILENAME} in current directory")
            return current_file

        library_path = cls.get_arc_data_path()
        if library_path.exists():
            logger.debug(f"Found {cls.FILENAME} in Arc's data directory")
            return library_path

        raise ArcDataError(
            f'File not found. Look for "{cls.FILENAME}" '
            f'in the Arc browser data directory: {library_path.parent}'
        )

    @classmethod
    def read_data(cls, path: Optional[Path] = None) -> Dict:
        """Read Arc browser data from JSON file."""
        if path is None:
            path = cls.find_data_file()
        elif not path.exists():
            raise ArcDataError(f"File not found: {path}")

        logger.info(f"Reading Arc browser data from {path}...")
        try:
            with path.open("r", encoding="utf-8") as f:
                return json.load(f)
        except OSError as e:
            raise ArcDataError(f"Cannot read {path}: {e}") from e
        except ValueError as e:
            raise ArcDataError(f"{path} is not valid JSON: {e}") from e


def extract_sidebar(data: Any) -> Tuple[List[Any], List[Any]]:
    """
    Return the (items, spaces) arrays of the sidebar.

    Raises ArcDataError when `data` is not shaped like a StorableSidebar
    export: the bookmark data lives in sidebar.containers[1].
    """
    sidebar = data.get("sidebar") if isinstance(data, dict) else None
    if not isinstance(sidebar, dict):
        raise ArcDataError('Invalid sidebar data: missing "sidebar" object')

    containers = sidebar.get("containers")
    if not isinstance(containers, list) or len(containers) < 2:
        raise ArcDataError('Invalid sidebar data: "sidebar.containers" has no entry at index 1')

    container = containers[1]
    if not isinstance(container, dict):
        raise ArcDataError('Invalid sidebar data: "sidebar.containers[1]" is not an object')

    items = container.get("items")
    spaces = container.get("spaces")
    if not isinstance(items, list) or not isinstance(spaces, list):
        raise ArcDataError('Invalid sidebar data: "sidebar.containers[1]" needs "items" and "spaces" lists')

    return items, spaces


def convert_sidebar(data: Any, log: Optional[logging.Logger] = None) -> ConversionResult:
    """
    Convert parsed StorableSidebar.json data to a Netscape bookmarks document.

    `log` receives the diagnostics of the run; defaults to this module's logger.
    """
    log = log or logger
    items, spaces = extract_sidebar(data)

    log.info("Parsing Arc browser data...")
    index = RecordIndex.build(items)
    log.debug(f"Items: {len(items)} ({len(index)} indexed, {index.skipped} skipped)")
    log.debug(f"Spaces: {sum(1 for s in spaces if isinstance(s, dict))}")
    if index.duplicates:
        log.debug(f"Duplicate item ids ignored: {', '.join(index.duplicates)}")

    folders = SidebarTreeBuilder(index, log=log).build(spaces)
    if not folders:
        log.warning("No spaces found in sidebar data")

    if log.isEnabledFor(logging.DEBUG):
        log.debug(f"Final bookmark structure:\n{tree_to_json(folders)}")

    html = HTMLExporter(folders).export()
    return ConversionResult(html=html, folders=folders)


def tree_to_json(folders: List[BookmarkFolder]) -> str:
    """Serialize the bookmark tree for inspection."""
    return json.dumps([asdict(folder) for folder in folders], indent=2, ensure_ascii=False)


def count_items(folders: List[BookmarkFolder]) -> Tuple[int, int]:
    """Count total bookmarks and folders."""
    def count_folder(folder: BookmarkFolder) -> Tuple[int, int]:
        bm, fl = 0, 1
        for item in folder.children:
            if isinstance(item, Bookmark):
                bm += 1
            elif isinstance(item, BookmarkFolder):
                sub_bm, sub_fl = count_folder(item)
                bm += sub_bm
                fl += sub_fl
        return bm, fl

    total_bm, total_fl = 0, 0
    for folder in folders:
        bm, fl = count_folder(folder)
        total_bm += bm
        total_fl += fl
    return total_bm, total_fl


def export_to_html(
    input_path: Optional[Path] = None,
    output_path: Optional[Path] = None,
    tree_path: Optional[Path] = None,
    verbose: bool = False,
    silent: bool = False,
) -> Tuple[int, int]:
    """
    Export Arc bookmarks to HTML file.

    Returns:
        Tuple of (total_bookmarks, total_folders)
    """
    setup_logging(verbose=verbose, silent=silent)

    data = ArcDataReader.read_data(input_path)
    result = convert_sidebar(data)

    if output_path is None:
        current_date = datetime.now().strftime("%Y_%m_%d")
        output_path = Path(f"arc_bookmarks_{current_date}.html")

    with output_path.open("w", encoding="utf-8") as f:
        f.write(result.html)
    logger.info(f"Export completed: {output_path}")

    if tree_path is not None:
        with tree_path.open("w", encoding="utf-8") as f:
            f.write(tree_to_json(result.folders))
        logger.info(f"Bookmark tree written to: {tree_path}")

    return count_items(result.folders)
