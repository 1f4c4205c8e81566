"""Convert Arc Browser sidebar data to Netscape bookmark files."""

from .models import Bookmark, BookmarkFolder, PayloadKind, SidebarItem
from .record_index import RecordIndex
from .tree_builder import SidebarTreeBuilder, clean_url
from .html_exporter import HTMLExporter
from .logs import Colors, setup_logging
from .config import ExportConfig
from .arc_exporter import (
    ArcDataError,
    ArcDataReader,
    ConversionResult,
    convert_sidebar,
    count_items,
    export_to_html,
)

__all__ = [
    # Models
    "Bookmark",
    "BookmarkFolder",
    "PayloadKind",
    "SidebarItem",
    # Conversion
    "RecordIndex",
    "SidebarTreeBuilder",
    "clean_url",
    "HTMLExporter",
    "ArcDataError",
    "ArcDataReader",
    "ConversionResult",
    "convert_sidebar",
    "count_items",
    "export_to_html",
    # Host
    "Colors",
    "setup_logging",
    "ExportConfig",
]
