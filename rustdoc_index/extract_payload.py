"""Logic for pulling the JSON payload out of a generated search-index.js.

The generator writes::

    var searchIndex = {};
    searchIndex["log"] = {"doc":"...","items":[...],"paths":[...]};
    initSearch(searchIndex);

Plain JSON (the mapping on its own) is accepted as well.
"""

import json
import logging
import re
from typing import Any

from rustdoc_index.index_format_error import IndexFormatError

logger = logging.getLogger(__name__)

JSON_STRING = r'"(?:[^"\\]|\\.)*"'


def _reject_duplicates(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in pairs:
        if key in result:
            msg = f"duplicate key {key!r}"
            raise IndexFormatError(msg)
        result[key] = value
    return result


_DECODER = json.JSONDecoder(object_pairs_hook=_reject_duplicates)


def _line_col(text: str, pos: int) -> str:
    line = text.count("\n", 0, pos) + 1
    col = pos - (text.rfind("\n", 0, pos) + 1) + 1
    return f"line {line}, column {col}"


def _decode_value(text: str, pos: int) -> tuple[Any, int]:
    try:
        return _DECODER.raw_decode(text, pos)
    except json.JSONDecodeError as e:
        msg = f"invalid JSON: {e.msg}"
        raise IndexFormatError(msg, position=_line_col(text, e.pos)) from e


def extract_payload(text: str, variable: str, initializer: str) -> dict[str, Any]:
    """Return the ``{library: entry}`` mapping held in ``text``."""
    text = text.removeprefix("\ufeff")
    stripped = text.lstrip()
    if stripped.startswith("{"):
        start = len(text) - len(stripped)
        value, end = _decode_value(text, start)
        if text[end:].strip():
            msg = "trailing data after JSON payload"
            raise IndexFormatError(msg, position=_line_col(text, end))
        return value

    var = re.escape(variable)
    header_re = re.compile(rf"\s*var\s+{var}\s*=\s*\{{\s*\}}\s*;")
    assign_re = re.compile(rf"\s*{var}\[({JSON_STRING})\]\s*=\s*")
    end_re = re.compile(r"\s*;")
    init_re = re.compile(rf"\s*{re.escape(initializer)}\(\s*{var}\s*\)\s*;?\s*\Z")

    m = header_re.match(text)
    if not m:
        msg = f"expected 'var {variable} = {{}};' at start of payload"
        raise IndexFormatError(msg, position=_line_col(text, 0))
    pos = m.end()

    payload: dict[str, Any] = {}
    while True:
        m = assign_re.match(text, pos)
        if not m:
            break
        name = json.loads(m.group(1))
        if name in payload:
            msg = f"library {name!r} assigned twice"
            raise IndexFormatError(msg, position=_line_col(text, m.start(1)))
        value, pos = _decode_value(text, m.end())
        m = end_re.match(text, pos)
        if not m:
            msg = "expected ';' after library entry"
            raise IndexFormatError(msg, name, _line_col(text, pos))
        payload[name] = value
        pos = m.end()

    if init_re.match(text, pos):
        return payload
    if not text[pos:].strip():
        logger.warning("Payload has no %s(%s) call", initializer, variable)
        return payload
    msg = f"unexpected statement, expected {variable}[...] or {initializer}(...)"
    raise IndexFormatError(msg, position=_line_col(text, pos))
