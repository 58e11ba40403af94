"""Output subsystem — assembles and writes Markdown posts."""

from blogmd.output.document import assemble_document, escape_title, format_header
from blogmd.output.writer import PostWriter, sanitize_title

__all__ = [
    "PostWriter",
    "assemble_document",
    "escape_title",
    "format_header",
    "sanitize_title",
]
