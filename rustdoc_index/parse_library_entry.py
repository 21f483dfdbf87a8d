"""Logic for parsing one library entry of the payload."""

from typing import Any

from rustdoc_index.index_format_error import IndexFormatError
from rustdoc_index.library_entry import LibraryEntry
from rustdoc_index.models import Item
from rustdoc_index.parse_item_record import parse_item_record
from rustdoc_index.parse_path_record import parse_path_record

ENTRY_KEYS = {"doc", "items", "paths"}


def parse_library_entry(
    name: str, raw: Any, allow_unknown_kinds: bool = False
) -> LibraryEntry:
    """Parse ``{"doc": ..., "items": [...], "paths": [...]}`` for one library."""
    if not isinstance(raw, dict):
        msg = f"library entry must be an object, got {type(raw).__name__}"
        raise IndexFormatError(msg, name)
    if set(raw) != ENTRY_KEYS:
        missing = sorted(ENTRY_KEYS - set(raw))
        extra = sorted(set(raw) - ENTRY_KEYS)
        msg = f"library entry keys mismatch (missing={missing}, unexpected={extra})"
        raise IndexFormatError(msg, name)

    doc = raw["doc"]
    if not isinstance(doc, str):
        msg = f"doc must be a string, got {doc!r}"
        raise IndexFormatError(msg, name)
    for field in ("items", "paths"):
        if not isinstance(raw[field], list):
            msg = f"{field} must be a list, got {type(raw[field]).__name__}"
            raise IndexFormatError(msg, name)

    # Items refer to paths by offset, so paths are parsed first.
    paths = tuple(
        parse_path_record(rec, name, i, allow_unknown_kinds)
        for i, rec in enumerate(raw["paths"])
    )
    items: list[Item] = []
    previous_path: str | None = None
    for i, rec in enumerate(raw["items"]):
        item = parse_item_record(
            rec, paths, previous_path, name, i, allow_unknown_kinds
        )
        previous_path = item.path
        items.append(item)

    return LibraryEntry(name=name, doc=doc, items=tuple(items), paths=paths)
