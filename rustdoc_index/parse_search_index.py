"""Logic for turning a decoded payload mapping into a SearchIndex."""

import logging
from typing import Any

from rustdoc_index.index_format_error import IndexFormatError
from rustdoc_index.load_config import merge_config
from rustdoc_index.parse_library_entry import parse_library_entry
from rustdoc_index.search_index import SearchIndex

logger = logging.getLogger(__name__)


def parse_search_index(
    payload: Any, config: dict[str, Any] | None = None
) -> SearchIndex:
    """Validate and convert ``{library: entry}`` into an immutable index."""
    config = merge_config(config)
    allow_unknown = bool(config["parsing"].get("allow_unknown_kinds", False))
    if not isinstance(payload, dict):
        msg = f"payload must be an object, got {type(payload).__name__}"
        raise IndexFormatError(msg)

    libraries = {}
    for name, raw in payload.items():
        if not name:
            msg = "library name must not be empty"
            raise IndexFormatError(msg)
        entry = parse_library_entry(name, raw, allow_unknown)
        logger.debug(
            "Parsed library %s: %d items, %d paths",
            name,
            len(entry.items),
            len(entry.paths),
        )
        libraries[name] = entry
    return SearchIndex(libraries)
