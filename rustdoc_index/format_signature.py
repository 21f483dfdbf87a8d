"""Utility for rendering a signature as short text."""

from rustdoc_index.models import Signature


def format_signature(sig: Signature | None) -> str:
    """Render ``(self, logrecord) -> bool``; empty when there is no signature."""
    if sig is None:
        return ""
    args = ", ".join(x.name or "_" for x in sig.inputs)
    text = f"({args})"
    if sig.output is not None:
        text += f" -> {sig.output.name or '_'}"
    return text
