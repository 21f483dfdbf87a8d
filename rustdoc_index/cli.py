"""Command-line interface for inspecting rustdoc search-index.js files."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

import yaml

from rustdoc_index.dump_search_index import dump_search_index, index_to_json
from rustdoc_index.index_format_error import IndexFormatError
from rustdoc_index.item_kind import ItemKind, parse_kind_name
from rustdoc_index.load_config import load_config
from rustdoc_index.load_search_index import load_search_index
from rustdoc_index.render_library_page import render_library_page

logger = logging.getLogger(__name__)


def _kind_label(kind: ItemKind | int) -> str:
    return kind.label if isinstance(kind, ItemKind) else f"kind {kind}"


def cmd_libraries(args: argparse.Namespace, config: dict[str, Any]) -> int:
    """List indexed libraries with their item counts."""
    index = load_search_index(args.file, config)
    for name, entry in index.items():
        print(f"{name}\t{len(entry.items)} items")
    return 0


def cmd_show(args: argparse.Namespace, config: dict[str, Any]) -> int:
    """Print a Markdown overview of one library."""
    index = load_search_index(args.file, config)
    entry = index.lookup(args.library)
    if entry is None:
        print(f"Library not found: {args.library}", file=sys.stderr)
        return 1
    sys.stdout.write(render_library_page(entry, args.kind))
    return 0


def cmd_find(args: argparse.Namespace, config: dict[str, Any]) -> int:
    """Print items with an exact (case-insensitive) name match."""
    index = load_search_index(args.file, config)
    if args.library:
        entry = index.lookup(args.library)
        if entry is None:
            print(f"Library not found: {args.library}", file=sys.stderr)
            return 1
        matches = [(args.library, it) for it in entry.find_items(args.name)]
    else:
        matches = index.find_items(args.name)

    if not matches:
        print(f"No items named {args.name}", file=sys.stderr)
        return 1
    for lib, it in matches:
        parent = getattr(it, "parent", None)
        owner = f" (on {parent.name})" if parent else ""
        line = f"{lib}\t{_kind_label(it.kind)}\t{it.qualified_name}{owner}"
        if it.description:
            line += f"\t{it.description}"
        print(line)
    return 0


def cmd_check(args: argparse.Namespace, config: dict[str, Any]) -> int:
    """Validate a payload and report a summary or the first error."""
    try:
        index = load_search_index(args.file, config)
    except IndexFormatError as e:
        print(f"Invalid search index: {e}", file=sys.stderr)
        return 1
    total = sum(len(entry.items) for entry in index.values())
    print(f"OK: {len(index)} libraries, {total} items")
    return 0


def cmd_dump(args: argparse.Namespace, config: dict[str, Any]) -> int:
    """Re-emit the payload as search-index.js or plain JSON."""
    index = load_search_index(args.file, config)
    if args.json:
        print(json.dumps(index_to_json(index), indent=2, ensure_ascii=False))
    else:
        sys.stdout.write(dump_search_index(index, config))
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with one subcommand per operation."""
    ap = argparse.ArgumentParser(
        prog="rustdoc-index",
        description="Load and inspect a rustdoc search-index.js payload.",
    )
    ap.add_argument("--config", help="Path to a YAML configuration file")
    ap.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: from config, WARNING)",
    )
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("libraries", help="List indexed libraries")
    p.add_argument("file", type=Path, help="search-index.js or JSON payload")
    p.set_defaults(func=cmd_libraries)

    p = sub.add_parser("show", help="Show one library as Markdown")
    p.add_argument("file", type=Path, help="search-index.js or JSON payload")
    p.add_argument("library", help="Library (crate) name")
    p.add_argument(
        "--kind",
        type=parse_kind_name,
        help="Only show items of this kind, e.g. struct or trait-method",
    )
    p.set_defaults(func=cmd_show)

    p = sub.add_parser("find", help="Find items by exact name")
    p.add_argument("file", type=Path, help="search-index.js or JSON payload")
    p.add_argument("name", help="Item name (case-insensitive)")
    p.add_argument("--library", help="Restrict the lookup to one library")
    p.set_defaults(func=cmd_find)

    p = sub.add_parser("check", help="Validate a payload")
    p.add_argument("file", type=Path, help="search-index.js or JSON payload")
    p.set_defaults(func=cmd_check)

    p = sub.add_parser("dump", help="Re-emit a payload")
    p.add_argument("file", type=Path, help="search-index.js or JSON payload")
    p.add_argument("--json", action="store_true", help="Emit plain JSON")
    p.set_defaults(func=cmd_dump)

    return ap


def main() -> int:
    """Run the command-line interface."""
    args = build_parser().parse_args()
    try:
        config = load_config(args.config)
    except (ValueError, yaml.YAMLError) as e:
        msg = f"Invalid configuration {args.config}: {e}"
        raise SystemExit(msg) from e
    level = args.log_level or str(config["logging"].get("level", "WARNING"))
    logging.basicConfig(
        level=level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    logger.debug("Running %s on %s", args.command, args.file)
    try:
        return args.func(args, config)
    except IndexFormatError as e:
        msg = f"Invalid search index {args.file}: {e}"
        raise SystemExit(msg) from e


if __name__ == "__main__":
    raise SystemExit(main())
