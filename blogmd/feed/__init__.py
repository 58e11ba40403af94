"""Feed subsystem: parsing the export and normalizing its items."""

from blogmd.feed.models import NormalizedItem, RawItem
from blogmd.feed.normalizer import (
    format_canonical,
    format_categories,
    normalize_date,
    normalize_item,
    parse_source_date,
)
from blogmd.feed.parser import parse_feed, read_feed

__all__ = [
    "NormalizedItem",
    "RawItem",
    "format_canonical",
    "format_categories",
    "normalize_date",
    "normalize_item",
    "parse_feed",
    "parse_source_date",
    "read_feed",
]
