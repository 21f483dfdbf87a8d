"""Logic for rendering a library overview page."""

from rustdoc_index.format_signature import format_signature
from rustdoc_index.item_kind import ItemKind
from rustdoc_index.library_entry import LibraryEntry
from rustdoc_index.md_table import md_table
from rustdoc_index.models import Item


def _heading(kind: ItemKind | int) -> str:
    if not isinstance(kind, ItemKind):
        return f"Kind {kind}"
    label = kind.label.title()
    return label + ("es" if label.endswith(("s", "x", "ch", "sh")) else "s")


def _row(item: Item) -> list[str]:
    parent = getattr(item, "parent", None)
    return [
        f"`{item.name}`" if item.name else "",
        f"`{item.path}`",
        f"`{parent.name}`" if parent else "",
        format_signature(getattr(item, "signature", None)),
        item.description,
    ]


def render_library_page(entry: LibraryEntry, kind: ItemKind | None = None) -> str:
    """Render a library's items in Markdown, grouped by kind."""
    parts: list[str] = [f"# Library {entry.name}", ""]
    if entry.doc:
        parts += [entry.doc, ""]

    kinds: list[ItemKind | int] = []
    for it in entry.items:
        if it.kind not in kinds:
            kinds.append(it.kind)
    if kind is not None:
        kinds = [k for k in kinds if k == kind]

    headers = ["Name", "Module", "Parent", "Signature", "Description"]
    for k in sorted(kinds, key=int):
        rows = [_row(it) for it in entry.items if it.kind == k]
        parts += [f"## {_heading(k)}", "", md_table(headers, rows), ""]

    if kind is not None and not kinds:
        parts += [f"_No {kind.label} items._", ""]

    return "\n".join(parts).rstrip() + "\n"
