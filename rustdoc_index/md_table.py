"""Utility for generating Markdown tables."""


def _escape(cell: str) -> str:
    return cell.replace("\n", " ").replace("|", "\\|").strip()


def md_table(headers: list[str], rows: list[list[str]]) -> str:
    """Generate a Markdown table; pipes and newlines in cells are escaped."""
    if not rows:
        return ""
    out = [
        "| " + " | ".join(headers) + " |",
        "| " + " | ".join(["---"] * len(headers)) + " |",
    ]
    out.extend("| " + " | ".join(_escape(c) for c in r) + " |" for r in rows)
    return "\n".join(out)
