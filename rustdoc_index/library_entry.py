"""Data model for one library (crate) in the search index."""

from dataclasses import dataclass

from rustdoc_index.item_kind import ItemKind
from rustdoc_index.models import Item, PathRecord


@dataclass(frozen=True)
class LibraryEntry:
    """Documentation record for one crate: its doc line, items and paths."""

    name: str
    doc: str
    items: tuple[Item, ...]
    paths: tuple[PathRecord, ...]

    def find_items(self, name: str) -> list[Item]:
        """Return items whose name matches exactly, ignoring case."""
        wanted = name.lower()
        return [it for it in self.items if it.name and it.name.lower() == wanted]

    def items_of_kind(self, kind: ItemKind | int) -> list[Item]:
        """Return items of a single kind, in payload order."""
        return [it for it in self.items if it.kind == kind]

    def members_of(self, path_index: int) -> list[Item]:
        """Return the items attached to ``paths[path_index]``."""
        return [
            it for it in self.items if getattr(it, "parent_index", None) == path_index
        ]

    def parent_of(self, item: Item) -> PathRecord | None:
        """Return the path record an item is attached to, if any."""
        return getattr(item, "parent", None)
