"""Logic for parsing function signatures attached to item records."""

from typing import Any

from rustdoc_index.index_format_error import IndexFormatError
from rustdoc_index.models import Signature, TypeRef


def _parse_type_ref(raw: Any, library: str, position: str) -> TypeRef:
    if not isinstance(raw, dict) or set(raw) != {"name"}:
        msg = f"expected a {{'name': ...}} type reference, got {raw!r}"
        raise IndexFormatError(msg, library, position)
    name = raw["name"]
    if name is not None and not isinstance(name, str):
        msg = f"type name must be a string or null, got {name!r}"
        raise IndexFormatError(msg, library, position)
    return TypeRef(name=name)


def parse_signature(raw: Any, library: str, position: str) -> Signature | None:
    """Parse ``{"inputs": [...], "output": ...}``; ``null`` means no signature."""
    if raw is None:
        return None
    if not isinstance(raw, dict) or set(raw) != {"inputs", "output"}:
        msg = f"signature must have exactly 'inputs' and 'output', got {raw!r}"
        raise IndexFormatError(msg, library, position)
    inputs = raw["inputs"]
    if not isinstance(inputs, list):
        msg = f"signature inputs must be a list, got {inputs!r}"
        raise IndexFormatError(msg, library, position)
    output = raw["output"]
    return Signature(
        inputs=tuple(_parse_type_ref(x, library, position) for x in inputs),
        output=None if output is None else _parse_type_ref(output, library, position),
    )
