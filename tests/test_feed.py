"""Tests for the feed subsystem: parser and field normalizer."""

from datetime import datetime, timedelta, timezone

import pytest

from blogmd.errors import DateFormatError, FatalIOError, ParseError
from blogmd.feed.models import RawItem
from blogmd.feed.normalizer import (
    format_canonical,
    format_categories,
    normalize_date,
    normalize_item,
    parse_source_date,
)
from blogmd.feed.parser import parse_feed, read_feed


# ---------------------------------------------------------------------------
# parse_feed / read_feed
# ---------------------------------------------------------------------------


class TestParseFeed:
    def test_items_in_document_order(self, sample_feed_bytes):
        items = parse_feed(sample_feed_bytes)
        assert [i.title for i in items] == ["Hello, World! 2024", "Second post"]

    def test_fields_extracted(self, sample_feed_bytes):
        first, second = parse_feed(sample_feed_bytes)
        assert first.published_at == "Mon, 02 Jan 2006 15:04:05 -0700"
        assert first.body_markup == "<b>hi</b>"
        assert first.categories == ["Tech", "Go"]
        assert first.updated_at == ""
        assert second.updated_at == "Wed, 04 Jan 2006 11:30:00 +0100"
        assert second.categories == []

    def test_update_date_requires_dc_namespace(self):
        doc = b"""<rss><channel><item>
            <date>Mon, 02 Jan 2006 15:04:05 -0700</date>
        </item></channel></rss>"""
        (item,) = parse_feed(doc)
        assert item.updated_at == ""

    def test_missing_fields_are_empty(self):
        (item,) = parse_feed(b"<rss><channel><item/></channel></rss>")
        assert item == RawItem()

    def test_empty_channel(self):
        assert parse_feed(b"<rss><channel/></rss>") == []

    def test_not_well_formed_raises(self):
        with pytest.raises(ParseError):
            parse_feed(b"<rss><channel><item></channel>")

    def test_empty_document_raises(self):
        with pytest.raises(ParseError):
            parse_feed(b"")

    def test_missing_channel_raises(self):
        with pytest.raises(ParseError, match="channel"):
            parse_feed(b"<rss><item><title>x</title></item></rss>")

    def test_category_order_preserved(self):
        cats = "".join(f"<category>c{i}</category>" for i in range(10))
        (item,) = parse_feed(f"<rss><channel><item>{cats}</item></channel></rss>".encode())
        assert item.categories == [f"c{i}" for i in range(10)]


class TestReadFeed:
    def test_reads_bytes(self, sample_feed_file, sample_feed_bytes):
        assert read_feed(sample_feed_file) == sample_feed_bytes

    def test_missing_file_is_fatal(self, tmp_path):
        with pytest.raises(FatalIOError) as exc_info:
            read_feed(tmp_path / "nope.xml")
        assert exc_info.value.path == tmp_path / "nope.xml"
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------


class TestDates:
    def test_canonical_with_offset(self):
        assert normalize_date("Mon, 02 Jan 2006 15:04:05 -0700") == "2006-01-02T15:04:05-07:00"

    def test_utc_rendered_as_z(self):
        assert normalize_date("Tue, 03 Jan 2006 10:00:00 +0000") == "2006-01-03T10:00:00Z"

    def test_round_trip_same_instant(self):
        src = "Sun, 17 Mar 2024 23:59:59 +0530"
        out = normalize_date(src)
        assert datetime.fromisoformat(out) == parse_source_date(src)

    def test_empty_stays_empty(self):
        assert normalize_date("") == ""

    def test_invalid_passes_through(self, caplog):
        with caplog.at_level("WARNING"):
            assert normalize_date("not-a-date") == "not-a-date"
        assert "not-a-date" in caplog.text

    def test_parse_source_date_raises(self):
        with pytest.raises(DateFormatError) as exc_info:
            parse_source_date("2006-01-02")
        assert exc_info.value.value == "2006-01-02"

    @pytest.mark.parametrize(
        "value",
        [
            "Mon, 2 Jan 2006 15:04:05 -0700",
            "Mon, 02 Jan 2006 15:04:05 -07:00",
            "Mon, 02 Jan 2006 15:04:05 Z",
            "Mon, 02 Jan 2006 15:04 -0700",
            "Mon, 02 Jan 06 15:04:05 -0700",
        ],
    )
    def test_only_fixed_layout_accepted(self, value):
        with pytest.raises(DateFormatError):
            parse_source_date(value)
        assert normalize_date(value) == value

    def test_format_canonical_positive_offset(self):
        dt = datetime(2020, 5, 1, 8, 0, 0, tzinfo=timezone(timedelta(hours=2)))
        assert format_canonical(dt) == "2020-05-01T08:00:00+02:00"


# ---------------------------------------------------------------------------
# Categories / normalize_item
# ---------------------------------------------------------------------------


class TestCategories:
    def test_tab_bullets_in_order(self):
        assert format_categories(["Tech", "Go"]) == "\t- Tech\n\t- Go"

    def test_empty(self):
        assert format_categories([]) == ""


class TestNormalizeItem:
    def test_updated_falls_back_to_published(self, sample_item):
        n = normalize_item(sample_item)
        assert n.published_at == "2006-01-02T15:04:05-07:00"
        assert n.updated_at == n.published_at

    def test_updated_kept_when_present(self, sample_item):
        item = sample_item.model_copy(update={"updated_at": "Wed, 04 Jan 2006 11:30:00 +0100"})
        assert normalize_item(item).updated_at == "2006-01-04T11:30:00+01:00"

    def test_invalid_published_falls_back_verbatim(self):
        n = normalize_item(RawItem(title="x", published_at="not-a-date"))
        assert n.published_at == "not-a-date"
        assert n.updated_at == "not-a-date"

    def test_title_and_body_untouched(self, sample_item):
        n = normalize_item(sample_item)
        assert n.title == sample_item.title
        assert n.body_markup == sample_item.body_markup
        assert n.category_block == "\t- Tech\n\t- Go"
