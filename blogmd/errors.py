"""Error taxonomy for the feed-to-markdown pipeline.

Only FatalIOError and ParseError stop a run. The others are contained to the
item that produced them.
"""

from __future__ import annotations

from pathlib import Path


class BlogmdError(Exception):
    """Base class for all blogmd errors."""


class FatalIOError(BlogmdError):
    """The input feed cannot be read or the output location cannot be created."""

    def __init__(self, path: str | Path, cause: Exception) -> None:
        self.path = Path(path)
        super().__init__(f"I/O failure on {self.path}: {cause}")
        self.__cause__ = cause


class ParseError(BlogmdError):
    """The feed document is not well-formed or lacks the root/channel structure."""


class DateFormatError(BlogmdError):
    """A date field does not match the source timestamp format."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"unrecognised date {value!r}")


class RenderError(BlogmdError):
    """The markup renderer failed on a body fragment."""

    def __init__(self, cause: Exception) -> None:
        super().__init__(f"markup rendering failed: {cause}")
        self.__cause__ = cause


class WriteError(BlogmdError):
    """A single document could not be persisted."""

    def __init__(self, path: str | Path, cause: Exception) -> None:
        self.path = Path(path)
        super().__init__(f"cannot write {self.path}: {cause}")
        self.__cause__ = cause
