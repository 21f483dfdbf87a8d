"""Immutable lookup over all libraries of a loaded search index."""

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from rustdoc_index.library_entry import LibraryEntry
from rustdoc_index.models import Item


class SearchIndex(Mapping[str, LibraryEntry]):
    """Read-only mapping from library name to its entry, in payload order."""

    def __init__(self, libraries: Mapping[str, LibraryEntry]) -> None:
        """Freeze a copy of the given libraries."""
        self._libraries = MappingProxyType(dict(libraries))

    def __getitem__(self, name: str) -> LibraryEntry:
        return self._libraries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._libraries)

    def __len__(self) -> int:
        return len(self._libraries)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SearchIndex):
            return list(self.items()) == list(other.items())
        return NotImplemented

    def __repr__(self) -> str:
        return f"SearchIndex({list(self._libraries)!r})"

    @property
    def libraries(self) -> list[str]:
        """Library names in payload order."""
        return list(self._libraries)

    def lookup(self, name: str) -> LibraryEntry | None:
        """Return the entry for a library, or None when it is not indexed."""
        return self._libraries.get(name)

    def find_items(self, name: str) -> list[tuple[str, Item]]:
        """Return ``(library, item)`` pairs whose item name matches exactly."""
        return [
            (lib, it)
            for lib, entry in self._libraries.items()
            for it in entry.find_items(name)
        ]
