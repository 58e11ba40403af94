"""Body conversion subsystem — wraps MarkItDown behind a renderer protocol."""

from blogmd.converter.renderer import MarkItDownRenderer, MarkupRenderer, render_body

__all__ = [
    "MarkItDownRenderer",
    "MarkupRenderer",
    "render_body",
]
