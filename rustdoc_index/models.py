"""Data models for a loaded rustdoc search index.

Records in the payload are positional tuples. They are turned into one frozen
dataclass per item kind so callers use named fields instead of offsets.
"""

from dataclasses import dataclass

from rustdoc_index.item_kind import ItemKind


@dataclass(frozen=True)
class TypeRef:
    """A single type mentioned in a function signature."""

    name: str | None


@dataclass(frozen=True)
class Signature:
    """Inputs and output of a function or method, by lowercased type name."""

    inputs: tuple[TypeRef, ...]
    output: TypeRef | None


@dataclass(frozen=True)
class PathRecord:
    """An item identity referenced by index from member records."""

    kind: ItemKind | int
    name: str


@dataclass(frozen=True, kw_only=True)
class Item:
    """Fields shared by every documented item."""

    kind: ItemKind | int
    name: str | None
    path: str  # containing module, e.g. netstring::channel
    description: str

    @property
    def qualified_name(self) -> str:
        """Module path joined with the item name."""
        if not self.name:
            return self.path
        return f"{self.path}::{self.name}" if self.path else self.name


@dataclass(frozen=True, kw_only=True)
class ModuleItem(Item):
    """A module."""


@dataclass(frozen=True, kw_only=True)
class StructItem(Item):
    """A struct."""


@dataclass(frozen=True, kw_only=True)
class EnumItem(Item):
    """An enum."""


@dataclass(frozen=True, kw_only=True)
class TraitItem(Item):
    """A trait."""


@dataclass(frozen=True, kw_only=True)
class MacroItem(Item):
    """A macro."""


@dataclass(frozen=True, kw_only=True)
class FunctionItem(Item):
    """A free function."""

    signature: Signature | None = None


@dataclass(frozen=True, kw_only=True)
class VariantItem(Item):
    """An enum variant, attached to its enum."""

    parent_index: int
    parent: PathRecord


@dataclass(frozen=True, kw_only=True)
class TraitMethodItem(Item):
    """A method declared by a trait."""

    parent_index: int
    parent: PathRecord
    signature: Signature | None = None


@dataclass(frozen=True, kw_only=True)
class MethodItem(Item):
    """A method implemented on a type, inherent or from a trait impl."""

    parent_index: int
    parent: PathRecord
    signature: Signature | None = None


@dataclass(frozen=True, kw_only=True)
class GenericItem(Item):
    """Any other kind of item (fields, constants, typedefs, ...)."""

    parent_index: int | None = None
    parent: PathRecord | None = None
    signature: Signature | None = None


# Kinds whose records never reference a parent path.
TOP_LEVEL_TYPES: dict[ItemKind, type[Item]] = {
    ItemKind.MODULE: ModuleItem,
    ItemKind.STRUCT: StructItem,
    ItemKind.ENUM: EnumItem,
    ItemKind.TRAIT: TraitItem,
    ItemKind.MACRO: MacroItem,
}

# Kinds whose records must reference a parent path.
MEMBER_TYPES: dict[ItemKind, type[Item]] = {
    ItemKind.VARIANT: VariantItem,
    ItemKind.TRAIT_METHOD: TraitMethodItem,
    ItemKind.METHOD: MethodItem,
}
