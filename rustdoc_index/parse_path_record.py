"""Logic for parsing `paths` records of a library entry."""

from rustdoc_index.index_format_error import IndexFormatError
from rustdoc_index.models import PathRecord
from rustdoc_index.parse_kind_code import parse_kind_code


def parse_path_record(
    raw: object,
    library: str,
    index: int,
    allow_unknown_kinds: bool = False,
) -> PathRecord:
    """Parse a ``[kindCode, name]`` pair."""
    position = f"paths[{index}]"
    if not isinstance(raw, list) or len(raw) != 2:  # noqa: PLR2004
        msg = f"expected a [kind, name] pair, got {raw!r}"
        raise IndexFormatError(msg, library, position)
    kind = parse_kind_code(raw[0], library, position, allow_unknown_kinds)
    name = raw[1]
    if not isinstance(name, str):
        msg = f"path name must be a string, got {name!r}"
        raise IndexFormatError(msg, library, position)
    return PathRecord(kind=kind, name=name)
