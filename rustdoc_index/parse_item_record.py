"""Logic for parsing `items` records into typed item variants."""

from typing import Any

from rustdoc_index.index_format_error import IndexFormatError
from rustdoc_index.item_kind import ItemKind
from rustdoc_index.models import (
    MEMBER_TYPES,
    TOP_LEVEL_TYPES,
    FunctionItem,
    GenericItem,
    Item,
    PathRecord,
)
from rustdoc_index.parse_kind_code import parse_kind_code
from rustdoc_index.parse_signature import parse_signature

ITEM_RECORD_ARITY = 6


def _expect_str(value: Any, field: str, library: str, position: str) -> str:
    if not isinstance(value, str):
        msg = f"{field} must be a string, got {value!r}"
        raise IndexFormatError(msg, library, position)
    return value


def _parse_parent_index(
    raw: Any, paths: tuple[PathRecord, ...], library: str, position: str
) -> int | None:
    if raw is None:
        return None
    if not isinstance(raw, int) or isinstance(raw, bool):
        msg = f"path index must be an integer or null, got {raw!r}"
        raise IndexFormatError(msg, library, position)
    if not 0 <= raw < len(paths):
        msg = f"path index {raw} out of range for {len(paths)} path records"
        raise IndexFormatError(msg, library, position)
    return raw


def parse_item_record(
    raw: object,
    paths: tuple[PathRecord, ...],
    previous_path: str | None,
    library: str,
    index: int,
    allow_unknown_kinds: bool = False,
) -> Item:
    """Parse one ``[kind, name, path, desc, pathIndex, signature]`` record.

    An empty module path repeats ``previous_path``, the resolved path of the
    record before this one in the same library.
    """
    position = f"items[{index}]"
    if not isinstance(raw, list) or len(raw) != ITEM_RECORD_ARITY:
        msg = f"expected a {ITEM_RECORD_ARITY}-element record, got {raw!r}"
        raise IndexFormatError(msg, library, position)

    kind = parse_kind_code(raw[0], library, position, allow_unknown_kinds)
    name = raw[1]
    if name is not None and not isinstance(name, str):
        msg = f"name must be a string or null, got {name!r}"
        raise IndexFormatError(msg, library, position)
    path = _expect_str(raw[2], "module path", library, position)
    if not path:
        if previous_path is None:
            msg = "first item has an empty module path"
            raise IndexFormatError(msg, library, position)
        path = previous_path
    description = _expect_str(raw[3], "description", library, position)
    parent_index = _parse_parent_index(raw[4], paths, library, position)
    signature = parse_signature(raw[5], library, position)
    parent = paths[parent_index] if parent_index is not None else None

    common: dict[str, Any] = {
        "kind": kind,
        "name": name,
        "path": path,
        "description": description,
    }

    if kind in TOP_LEVEL_TYPES:
        if parent is not None or signature is not None:
            label = ItemKind(kind).label
            msg = f"{label} record must not carry a parent or signature"
            raise IndexFormatError(msg, library, position)
        return TOP_LEVEL_TYPES[ItemKind(kind)](**common)

    if kind == ItemKind.FUNCTION:
        if parent is not None:
            msg = "function record must not carry a parent"
            raise IndexFormatError(msg, library, position)
        return FunctionItem(**common, signature=signature)

    if kind in MEMBER_TYPES:
        item_type = MEMBER_TYPES[ItemKind(kind)]
        if parent is None:
            msg = f"{ItemKind(kind).label} record requires a parent path index"
            raise IndexFormatError(msg, library, position)
        if kind == ItemKind.VARIANT:
            if signature is not None:
                msg = "variant record must not carry a signature"
                raise IndexFormatError(msg, library, position)
            return item_type(**common, parent_index=parent_index, parent=parent)
        return item_type(
            **common,
            parent_index=parent_index,
            parent=parent,
            signature=signature,
        )

    return GenericItem(
        **common,
        parent_index=parent_index,
        parent=parent,
        signature=signature,
    )
