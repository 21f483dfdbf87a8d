"""Tests for loading search index files from disk."""

import json
from pathlib import Path

import pytest

from rustdoc_index.index_format_error import IndexFormatError
from rustdoc_index.item_kind import ItemKind
from rustdoc_index.load_search_index import load_search_index, loads_search_index
from rustdoc_index.models import MethodItem, TraitMethodItem, VariantItem

FIXTURE = Path(__file__).parent / "fixtures" / "search-index.js"


def test_load_fixture_libraries() -> None:
    """The generated fixture loads both crates with all records."""
    index = load_search_index(FIXTURE)
    assert index.libraries == ["log", "netstring"]
    log = index.lookup("log")
    assert log.doc == "A lightweight logging facade."
    assert len(log.items) == 99
    assert len(log.paths) == 9
    netstring = index.lookup("netstring")
    assert netstring.doc == ""
    assert len(netstring.items) == 23
    assert len(netstring.paths) == 5


def test_load_fixture_path_indexes_in_bounds() -> None:
    """Every member in the fixture resolves to one of its library's paths."""
    index = load_search_index(FIXTURE)
    for entry in index.values():
        for item in entry.items:
            parent_index = getattr(item, "parent_index", None)
            if parent_index is not None:
                assert 0 <= parent_index < len(entry.paths)
                assert entry.parent_of(item) is entry.paths[parent_index]


def test_load_fixture_typed_records() -> None:
    """Records come back as the variant matching their kind."""
    netstring = load_search_index(FIXTURE).lookup("netstring")
    flushes = netstring.find_items("flush")
    assert [type(it) for it in flushes] == [MethodItem, TraitMethodItem]
    assert flushes[0].description == "Flushes all pending operations"
    assert flushes[0].parent.name == "Channel"
    assert flushes[1].parent.name == "WriteNetstring"

    log = load_search_index(FIXTURE).lookup("log")
    variants = log.items_of_kind(ItemKind.VARIANT)
    assert all(isinstance(v, VariantItem) for v in variants)
    assert {v.parent.name for v in variants} == {"LogLevel", "LogLevelFilter"}


def test_load_fixture_module_paths() -> None:
    """Empty module paths in the fixture resolve to the enclosing module."""
    netstring = load_search_index(FIXTURE).lookup("netstring")
    (channel_error,) = netstring.find_items("ChannelError")
    assert channel_error.path == "netstring::channel"
    (shutdown,) = [
        it for it in netstring.find_items("Shutdown") if it.kind == ItemKind.TRAIT
    ]
    assert shutdown.path == "netstring"


def test_load_twice_is_equal() -> None:
    """Loading the same file twice gives structurally equal indexes."""
    assert load_search_index(FIXTURE) == load_search_index(FIXTURE)


def test_load_plain_json(tmp_path: Path) -> None:
    """A JSON file holding the mapping loads the same as the script."""
    payload = {"log": {"doc": "A lightweight logging facade.", "items": [], "paths": []}}
    path = tmp_path / "index.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    index = load_search_index(path)
    assert index.lookup("log").doc == "A lightweight logging facade."
    assert index.lookup("missing") is None


def test_load_truncated_file_fails(tmp_path: Path) -> None:
    """A truncated file fails fast instead of loading partially."""
    text = FIXTURE.read_text(encoding="utf-8")
    path = tmp_path / "search-index.js"
    path.write_text(text[: len(text) // 2], encoding="utf-8")
    with pytest.raises(IndexFormatError):
        load_search_index(path)


def test_load_missing_file_fails(tmp_path: Path) -> None:
    """Missing files surface as FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_search_index(tmp_path / "nope.js")


def test_loads_with_custom_config() -> None:
    """Payload names come from configuration."""
    config = {
        "payload": {"variable": "idx", "initializer": "boot"},
        "parsing": {"allow_unknown_kinds": False},
    }
    text = 'var idx = {};\nidx["x"] = {"doc":"","items":[],"paths":[]};\nboot(idx);'
    assert loads_search_index(text, config).libraries == ["x"]


def test_loads_with_partial_config() -> None:
    """A config naming only some sections is merged over the defaults."""
    text = FIXTURE.read_text(encoding="utf-8")
    index = loads_search_index(text, {"parsing": {"allow_unknown_kinds": True}})
    assert index.libraries == ["log", "netstring"]


def test_load_file_with_byte_order_mark(tmp_path: Path) -> None:
    """A leading UTF-8 byte order mark is ignored."""
    path = tmp_path / "search-index.js"
    path.write_bytes(b"\xef\xbb\xbf" + FIXTURE.read_bytes())
    assert load_search_index(path) == load_search_index(FIXTURE)


def test_loads_text_with_byte_order_mark() -> None:
    """A decoded BOM character at the start of the text is ignored."""
    text = "\ufeff" + FIXTURE.read_text(encoding="utf-8")
    assert loads_search_index(text).libraries == ["log", "netstring"]


def test_load_invalid_utf8_fails(tmp_path: Path) -> None:
    """Bytes that are not UTF-8 raise a parse error naming the offset."""
    data = FIXTURE.read_bytes()
    path = tmp_path / "search-index.js"
    path.write_bytes(data[:100] + b"\xff\xfe" + data[100:])
    with pytest.raises(IndexFormatError, match="not valid UTF-8") as exc:
        load_search_index(path)
    assert exc.value.position == "byte 100"
