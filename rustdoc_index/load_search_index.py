"""Logic for loading a search index file from disk."""

import logging
from pathlib import Path
from typing import Any

from rustdoc_index.extract_payload import extract_payload
from rustdoc_index.index_format_error import IndexFormatError
from rustdoc_index.load_config import merge_config
from rustdoc_index.parse_search_index import parse_search_index
from rustdoc_index.search_index import SearchIndex

logger = logging.getLogger(__name__)


def loads_search_index(text: str, config: dict[str, Any] | None = None) -> SearchIndex:
    """Parse the text of a search-index.js (or plain JSON) payload."""
    config = merge_config(config)
    payload = extract_payload(
        text,
        variable=config["payload"]["variable"],
        initializer=config["payload"]["initializer"],
    )
    return parse_search_index(payload, config)


def load_search_index(path: Path, config: dict[str, Any] | None = None) -> SearchIndex:
    """Read and parse a search index file."""
    data = Path(path).read_bytes()
    try:
        # utf-8-sig drops a leading byte order mark
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        msg = f"payload is not valid UTF-8: {e.reason}"
        raise IndexFormatError(msg, position=f"byte {e.start}") from e
    index = loads_search_index(text, config)
    logger.info("Loaded %d libraries from %s", len(index), path)
    return index
