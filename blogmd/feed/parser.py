"""Feed parser: RSS export bytes -> ordered RawItems."""

from __future__ import annotations

import logging
from pathlib import Path

from lxml import etree

from blogmd.errors import FatalIOError, ParseError
from blogmd.feed.models import RawItem

logger = logging.getLogger(__name__)

NS = {
    "content": "http://purl.org/rss/1.0/modules/content/",
    "dc": "http://purl.org/dc/elements/1.1/",
}


def read_feed(path: str | Path) -> bytes:
    """Read the whole feed document into memory."""
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise FatalIOError(path, e) from e
    logger.debug("read %s (%d bytes)", path, len(data))
    return data


def parse_feed(data: bytes) -> list[RawItem]:
    """Decode a feed document into RawItems, in document order.

    Raises ParseError if the document is not well-formed or has no channel
    element under its root.
    """
    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    try:
        root = etree.fromstring(data, parser=parser)
    except etree.XMLSyntaxError as e:
        raise ParseError(f"feed is not well-formed XML: {e}") from e

    channel = root.find("channel")
    if channel is None:
        raise ParseError(f"no <channel> element under <{etree.QName(root).localname}>")

    items = [_parse_item(el) for el in channel.findall("item")]
    logger.info("parsed %d items from feed", len(items))
    return items


def _parse_item(el: etree._Element) -> RawItem:
    return RawItem(
        title=el.findtext("title") or "",
        published_at=el.findtext("pubDate") or "",
        updated_at=el.findtext("dc:date", namespaces=NS) or "",
        body_markup=el.findtext("content:encoded", namespaces=NS) or "",
        categories=[c.text or "" for c in el.findall("category")],
    )
