"""Logic for validating kind codes found in payload records."""

from rustdoc_index.index_format_error import IndexFormatError
from rustdoc_index.item_kind import ItemKind


def parse_kind_code(
    raw: object,
    library: str,
    position: str,
    allow_unknown: bool = False,
) -> ItemKind | int:
    """Convert a raw kind code to an ItemKind, rejecting anything else."""
    # bool is an int subclass but never a valid code
    if not isinstance(raw, int) or isinstance(raw, bool):
        msg = f"kind code must be an integer, got {raw!r}"
        raise IndexFormatError(msg, library, position)
    try:
        return ItemKind(raw)
    except ValueError:
        if allow_unknown and raw >= 0:
            return raw
        msg = f"unknown kind code {raw}"
        raise IndexFormatError(msg, library, position) from None
