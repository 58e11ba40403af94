"""Shared test fixtures for blogmd."""

import pytest

from blogmd.config.models import BlogmdConfig
from blogmd.feed.models import RawItem

SAMPLE_FEED = b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0"
     xmlns:content="http://purl.org/rss/1.0/modules/content/"
     xmlns:dc="http://purl.org/dc/elements/1.1/">
  <channel>
    <title>Example Blog</title>
    <item>
      <title>Hello, World! 2024</title>
      <pubDate>Mon, 02 Jan 2006 15:04:05 -0700</pubDate>
      <content:encoded><![CDATA[<b>hi</b>]]></content:encoded>
      <category>Tech</category>
      <category>Go</category>
    </item>
    <item>
      <title>Second post</title>
      <pubDate>Tue, 03 Jan 2006 10:00:00 +0000</pubDate>
      <dc:date>Wed, 04 Jan 2006 11:30:00 +0100</dc:date>
      <content:encoded><![CDATA[<p>Body</p>]]></content:encoded>
    </item>
  </channel>
</rss>
"""


class UpperRenderer:
    """Deterministic stand-in for MarkItDown."""

    def render(self, fragment: str) -> str:
        return fragment.upper()


class BrokenRenderer:
    def render(self, fragment: str) -> str:
        raise RuntimeError("renderer exploded")


@pytest.fixture
def sample_feed_bytes():
    return SAMPLE_FEED


@pytest.fixture
def sample_feed_file(tmp_path):
    path = tmp_path / "content.xml"
    path.write_bytes(SAMPLE_FEED)
    return path


@pytest.fixture
def sample_item():
    return RawItem(
        title="Hello, World! 2024",
        published_at="Mon, 02 Jan 2006 15:04:05 -0700",
        body_markup="<b>hi</b>",
        categories=["Tech", "Go"],
    )


@pytest.fixture
def upper_renderer():
    return UpperRenderer()


@pytest.fixture
def broken_renderer():
    return BrokenRenderer()


@pytest.fixture
def sample_config():
    return BlogmdConfig()
