"""Logic for serializing a SearchIndex back to the generator's format."""

import json
from typing import Any

from rustdoc_index.library_entry import LibraryEntry
from rustdoc_index.load_config import merge_config
from rustdoc_index.models import Item, Signature, TypeRef
from rustdoc_index.search_index import SearchIndex


def _type_ref_to_json(ref: TypeRef | None) -> dict[str, Any] | None:
    return None if ref is None else {"name": ref.name}


def _signature_to_json(sig: Signature | None) -> dict[str, Any] | None:
    if sig is None:
        return None
    return {
        "inputs": [_type_ref_to_json(x) for x in sig.inputs],
        "output": _type_ref_to_json(sig.output),
    }


def _item_to_record(item: Item, previous_path: str | None) -> list[Any]:
    return [
        int(item.kind),
        item.name,
        "" if item.path == previous_path else item.path,
        item.description,
        getattr(item, "parent_index", None),
        _signature_to_json(getattr(item, "signature", None)),
    ]


def library_to_json(entry: LibraryEntry) -> dict[str, Any]:
    """Convert one library back to ``{"doc", "items", "paths"}``."""
    items = []
    previous_path: str | None = None
    for item in entry.items:
        items.append(_item_to_record(item, previous_path))
        previous_path = item.path
    return {
        "doc": entry.doc,
        "items": items,
        "paths": [[int(p.kind), p.name] for p in entry.paths],
    }


def index_to_json(index: SearchIndex) -> dict[str, Any]:
    """Convert the whole index back to the plain payload mapping."""
    return {name: library_to_json(entry) for name, entry in index.items()}


def _compact(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def dump_search_index(index: SearchIndex, config: dict[str, Any] | None = None) -> str:
    """Render the index as a search-index.js script.

    Output from the generator survives a load/dump cycle unchanged.
    """
    config = merge_config(config)
    var = config["payload"]["variable"]
    init = config["payload"]["initializer"]
    lines = [f"var {var} = {{}};"]
    lines.extend(
        f"{var}[{_compact(name)}] = {_compact(library_to_json(entry))};"
        for name, entry in index.items()
    )
    lines.append(f"{init}({var});")
    return "\n".join(lines)
