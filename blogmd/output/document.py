"""Assembles the output document: `---` header, blank line, rendered body."""

from __future__ import annotations

from blogmd.feed.models import NormalizedItem

_TITLE_ESCAPES = str.maketrans({
    "\\": "\\\\",
    '"': '\\"',
    "\r": "\\r",
    "\n": "\\n",
})


def escape_title(title: str) -> str:
    """Escape a title for embedding in a double-quoted header field."""
    return title.translate(_TITLE_ESCAPES)


def format_header(item: NormalizedItem) -> str:
    lines = [
        "---",
        f'title: "{escape_title(item.title)}"',
        f"date: {item.published_at}",
        f"updated: {item.updated_at}",
        "categories:",
    ]
    if item.category_block:
        lines.append(item.category_block)
    lines.append("---")
    return "\n".join(lines)


def assemble_document(item: NormalizedItem, body: str) -> str:
    return f"{format_header(item)}\n\n{body}"
