"""Kind codes used by rustdoc to tag documented items."""

from enum import IntEnum


class ItemKind(IntEnum):
    """Numeric item kinds, in the generator's order."""

    MODULE = 0
    EXTERN_CRATE = 1
    IMPORT = 2
    STRUCT = 3
    ENUM = 4
    FUNCTION = 5
    TYPEDEF = 6
    STATIC = 7
    TRAIT = 8
    IMPL = 9
    TRAIT_METHOD = 10  # required method declared on a trait
    METHOD = 11
    STRUCT_FIELD = 12
    VARIANT = 13
    MACRO = 14
    PRIMITIVE = 15
    ASSOCIATED_TYPE = 16
    CONSTANT = 17
    ASSOCIATED_CONSTANT = 18

    @property
    def label(self) -> str:
        """Human-readable name, e.g. ``trait method``."""
        return self.name.lower().replace("_", " ")


def parse_kind_name(value: str) -> ItemKind:
    """Resolve a CLI-style kind name (``struct``, ``trait-method``) or code."""
    text = value.strip()
    if text.isdigit():
        return ItemKind(int(text))
    key = text.upper().replace("-", "_").replace(" ", "_")
    try:
        return ItemKind[key]
    except KeyError:
        msg = f"Unknown item kind: {value}"
        raise ValueError(msg) from None
