"""Pipeline driver: feed -> normalized items -> Markdown files.

Items are processed one at a time in feed order. Per-item failures are
recorded in the BatchReport; only reading/parsing the feed and creating the
output directory abort a run.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path

from blogmd.converter import MarkItDownRenderer, MarkupRenderer, render_body
from blogmd.errors import WriteError
from blogmd.feed import RawItem, normalize_item, parse_feed, read_feed
from blogmd.models import BatchReport, ItemOutcome
from blogmd.output import PostWriter, assemble_document

logger = logging.getLogger(__name__)


def convert_items(
    items: list[RawItem],
    renderer: MarkupRenderer,
    writer: PostWriter,
    *,
    dry_run: bool = False,
) -> BatchReport:
    """Convert and write every item. A failed write never stops the batch."""
    start = time.monotonic()
    report = BatchReport()

    for index, item in enumerate(items, start=1):
        normalized = normalize_item(item)
        body = render_body(renderer, normalized.body_markup)
        document = assemble_document(normalized, body)

        try:
            path = writer.write(item.title, document, index=index, dry_run=dry_run)
        except WriteError as e:
            logger.warning("Error writing file '%s': %s", e.path, e.__cause__)
            report.failed += 1
            report.outcomes.append(
                ItemOutcome(index=index, title=item.title, path=str(e.path), error=str(e))
            )
            continue

        report.written += 1
        report.outcomes.append(ItemOutcome(index=index, title=item.title, path=str(path)))

    report.duration = time.monotonic() - start
    return report


def run(
    feed_path: str | Path,
    output_dir: str | Path,
    *,
    renderer: MarkupRenderer | None = None,
    extension: str = ".md",
    dry_run: bool = False,
) -> BatchReport:
    """Run the full conversion. Raises FatalIOError or ParseError before any item is written."""
    writer = PostWriter(output_dir, extension=extension)
    if not dry_run:
        writer.ensure_output_dir()

    items = parse_feed(read_feed(feed_path))
    report = convert_items(items, renderer or MarkItDownRenderer(), writer, dry_run=dry_run)
    logger.info(
        "converted %d/%d items into %s (%.2fs)",
        report.written, len(items), writer.base_dir, report.duration,
    )
    return report
