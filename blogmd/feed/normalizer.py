"""Field normalization: canonical dates and the header category block."""

from __future__ import annotations

import logging
import re
from datetime import datetime, timedelta

from blogmd.errors import DateFormatError
from blogmd.feed.models import NormalizedItem, RawItem

logger = logging.getLogger(__name__)

# RFC 1123 with a numeric zone, e.g. "Mon, 02 Jan 2006 15:04:05 -0700"
SOURCE_DATE_FORMAT = "%a, %d %b %Y %H:%M:%S %z"
# strptime alone accepts one-digit days and "+07:00"/"Z" zones.
_SOURCE_DATE_SHAPE = re.compile(
    r"[A-Z][a-z]{2}, \d{2} [A-Z][a-z]{2} \d{4} \d{2}:\d{2}:\d{2} [+-]\d{4}"
)


def parse_source_date(value: str) -> datetime:
    stripped = value.strip()
    if not _SOURCE_DATE_SHAPE.fullmatch(stripped):
        raise DateFormatError(value)
    try:
        return datetime.strptime(stripped, SOURCE_DATE_FORMAT)
    except ValueError as e:
        raise DateFormatError(value) from e


def format_canonical(dt: datetime) -> str:
    """RFC 3339 timestamp; a zero offset is written as ``Z``."""
    if dt.utcoffset() == timedelta(0):
        return dt.replace(tzinfo=None).isoformat(timespec="seconds") + "Z"
    return dt.isoformat(timespec="seconds")


def normalize_date(value: str) -> str:
    """Return the canonical form of a source date.

    Empty input stays empty. Unparseable input is logged and passed through
    unchanged.
    """
    if not value:
        return ""
    try:
        return format_canonical(parse_source_date(value))
    except DateFormatError as e:
        logger.warning("Error parsing date %r: %s", value, e)
        return value


def format_categories(categories: list[str]) -> str:
    return "\n".join(f"\t- {label}" for label in categories)


def normalize_item(item: RawItem) -> NormalizedItem:
    published = normalize_date(item.published_at)
    updated = normalize_date(item.updated_at) or published
    return NormalizedItem(
        title=item.title,
        published_at=published,
        updated_at=updated,
        body_markup=item.body_markup,
        category_block=format_categories(item.categories),
    )
