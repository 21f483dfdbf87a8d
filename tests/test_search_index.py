"""Tests for the SearchIndex lookup surface."""

import pytest

from rustdoc_index.index_format_error import IndexFormatError
from rustdoc_index.parse_search_index import parse_search_index

PAYLOAD = {
    "log": {
        "doc": "A lightweight logging facade.",
        "items": [
            [3, "LogRecord", "log", "The payload of a log message.", None, None],
            [5, "set_logger", "", "Sets the global logger.", None, None],
        ],
        "paths": [],
    },
    "netstring": {
        "doc": "",
        "items": [
            [3, "Channel", "netstring::channel", "", None, None],
            [11, "set_logger", "", "", 0, None],
        ],
        "paths": [[3, "Channel"]],
    },
}


def test_lookup_existing_library() -> None:
    """Looking up a present library returns its entry."""
    index = parse_search_index(PAYLOAD)
    entry = index.lookup("log")
    assert entry is not None
    assert entry.doc == "A lightweight logging facade."
    assert entry.name == "log"


def test_lookup_missing_library_returns_none() -> None:
    """Looking up an absent library reports not found instead of raising."""
    index = parse_search_index(PAYLOAD)
    assert index.lookup("missing") is None
    assert "missing" not in index


def test_index_preserves_order_and_mapping_protocol() -> None:
    """The index behaves like a read-only mapping in payload order."""
    index = parse_search_index(PAYLOAD)
    assert index.libraries == ["log", "netstring"]
    assert list(index) == ["log", "netstring"]
    assert len(index) == 2
    assert index["netstring"].paths[0].name == "Channel"
    with pytest.raises(KeyError):
        index["missing"]
    with pytest.raises(TypeError):
        index["x"] = index["log"]  # type: ignore[index]


def test_parse_is_idempotent() -> None:
    """Parsing the same payload twice gives equal values."""
    assert parse_search_index(PAYLOAD) == parse_search_index(PAYLOAD)


def test_parse_does_not_alias_payload() -> None:
    """Mutating the payload afterwards does not change the index."""
    payload = {"x": {"doc": "d", "items": [], "paths": []}}
    index = parse_search_index(payload)
    payload["y"] = payload["x"]
    payload["x"]["doc"] = "changed"
    assert index.libraries == ["x"]
    assert index.lookup("x").doc == "d"


def test_find_items_across_libraries() -> None:
    """Item lookup searches every library and reports where it matched."""
    index = parse_search_index(PAYLOAD)
    found = index.find_items("SET_LOGGER")
    assert [(lib, it.kind) for lib, it in found] == [("log", 5), ("netstring", 11)]


def test_parse_rejects_non_mapping() -> None:
    """The top level must be an object of libraries."""
    with pytest.raises(IndexFormatError, match="must be an object"):
        parse_search_index([])
    with pytest.raises(IndexFormatError, match="must not be empty"):
        parse_search_index({"": {"doc": "", "items": [], "paths": []}})


def test_unknown_kinds_follow_config() -> None:
    """Unknown kind codes are only accepted when configured."""
    payload = {"x": {"doc": "", "items": [[42, "a", "x", "", None, None]], "paths": []}}
    with pytest.raises(IndexFormatError):
        parse_search_index(payload)
    config = {"parsing": {"allow_unknown_kinds": True}}
    index = parse_search_index(payload, config)
    assert index.lookup("x").items[0].kind == 42
