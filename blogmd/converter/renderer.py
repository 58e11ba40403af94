"""HTML-to-Markdown rendering of post bodies."""

from __future__ import annotations

import io
import logging
from functools import cached_property
from typing import Protocol, runtime_checkable

from markitdown import MarkItDown

from blogmd.errors import RenderError

logger = logging.getLogger(__name__)


@runtime_checkable
class MarkupRenderer(Protocol):
    """Renders an HTML fragment to Markdown. May raise on failure."""

    def render(self, fragment: str) -> str: ...


class MarkItDownRenderer:
    """MarkupRenderer backed by MarkItDown's HTML converter."""

    @cached_property
    def _md(self) -> MarkItDown:
        return MarkItDown()

    def render(self, fragment: str) -> str:
        stream = io.BytesIO(fragment.encode("utf-8"))
        try:
            result = self._md.convert_stream(stream, file_extension=".html")
        except Exception as e:
            raise RenderError(e) from e
        return result.markdown


def render_body(renderer: MarkupRenderer, fragment: str) -> str:
    """Render a body fragment, falling back to the original on any failure."""
    if not fragment:
        return ""
    try:
        return renderer.render(fragment)
    except Exception:
        logger.warning("Error converting HTML to Markdown, keeping original body", exc_info=True)
        return fragment
