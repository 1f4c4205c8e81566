#!/usr/bin/env python3
"""
Arc Bookmarks Converter

Convert Arc Browser's StorableSidebar.json to an HTML bookmarks file
that Chrome, Firefox, Safari and others can import.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from arc2html import ArcDataError, ArcDataReader, Colors, ExportConfig, export_to_html


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="arc2html",
        description="Convert Arc Browser sidebar data to a Netscape bookmarks HTML file.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=Path,
        help=f"Path to {ArcDataReader.FILENAME} (default: current directory, then Arc's data directory)",
    )
    parser.add_argument("-o", "--output", type=Path, help="Output HTML file (default: arc_bookmarks_<date>.html)")
    parser.add_argument("--tree", type=Path, help="Also write the bookmark tree as JSON to this file")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("-v", "--verbose", action="store_true", help="Log every processed item")
    group.add_argument("-q", "--quiet", action="store_true", help="Disable logging")
    return parser


def print_header():
    """Print application header."""
    print()
    print("=" * 60)
    print(f"{Colors.BOLD}Arc Bookmarks Converter{Colors.RESET}")
    print("=" * 60)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    config = ExportConfig.from_env()

    if not args.quiet:
        print_header()

    try:
        bookmarks, folders = export_to_html(
            input_path=args.input or config.input_path,
            output_path=args.output or config.output_path,
            tree_path=args.tree,
            verbose=args.verbose or config.verbose,
            silent=args.quiet,
        )
    except ArcDataError as e:
        print(f"\n{Colors.RED}Error:{Colors.RESET} {e}", file=sys.stderr)
        return 1

    print()
    print(f"{Colors.GREEN}Export completed!{Colors.RESET}")
    print(f"  Bookmarks: {bookmarks}")
    print(f"  Folders: {folders}")
    return 0


def run():
    """Console script entry point."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n\nBye!")
        sys.exit(130)


if __name__ == "__main__":
    run()
