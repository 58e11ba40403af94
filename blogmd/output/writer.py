"""PostWriter — names and writes assembled documents to disk."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from blogmd.errors import FatalIOError, WriteError

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_\- ]")


def sanitize_title(title: str) -> str:
    """Make a post title safe for use as a filename.

    Keeps ASCII letters, digits, underscore, hyphen and space, then turns
    spaces into underscores. Applying it twice gives the same result.
    """
    return _UNSAFE_CHARS.sub("", title).replace(" ", "_")


class PostWriter:
    """Writes one Markdown document per feed item into base_dir.

    Items whose names collide overwrite each other; the last write wins.
    """

    def __init__(self, base_dir: str | Path, extension: str = ".md") -> None:
        self.base_dir = Path(base_dir)
        self.extension = extension

    def file_name(self, title: str, *, index: int) -> str:
        """File name for an item; ``index`` is its 1-based feed position."""
        stem = sanitize_title(title) or f"untitled-{index}"
        return f"{stem}{self.extension}"

    def ensure_output_dir(self) -> Path:
        try:
            self.base_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FatalIOError(self.base_dir, e) from e
        return self.base_dir

    def write(self, title: str, document: str, *, index: int, dry_run: bool = False) -> Path:
        """Write a single document to disk.

        Returns the Path of the written (or would-be) file.
        """
        dest = self.base_dir / self.file_name(title, index=index)

        if dry_run:
            logger.debug("dry-run: would write %s", dest)
            return dest

        try:
            dest.parent.mkdir(parents=True, exist_ok=True)
            dest.write_text(document, encoding="utf-8")
        except OSError as e:
            raise WriteError(dest, e) from e
        logger.info("wrote %s (%d bytes)", dest, len(document))
        return dest
