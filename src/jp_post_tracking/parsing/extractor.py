# src/jp_post_tracking/parsing/extractor.py
from __future__ import annotations

import logging
from typing import List

from lxml import etree

from jp_post_tracking.errors import MalformedDocumentError
from jp_post_tracking.models import TrackingStatus

logger = logging.getLogger("jp_post_tracking.parsing.extractor")

# The carrier marks its history table with this summary attribute.
HISTORY_TABLE_SUMMARY = "履歴情報"
HISTORY_ROWS_XPATH = f'//table[@summary="{HISTORY_TABLE_SUMMARY}"]/tr'

# (field, row of the pair, 1-based td position)
_CELL_LAYOUT: tuple[tuple[str, int, int], ...] = (
    ("datetime", 0, 1),
    ("status", 0, 2),
    ("detail", 0, 3),
    ("office", 0, 4),
    ("postcode", 1, 1),
    ("prefecture", 0, 5),
)


def _parse_document(html: str):
    """
    Parse with libxml2's recovering HTML parser. Parse errors are collected
    on the parser's error log instead of being raised.
    """
    parser = etree.HTMLParser(recover=True, encoding="utf-8")
    try:
        return etree.fromstring((html or "").encode("utf-8"), parser)
    except (etree.XMLSyntaxError, etree.ParserError):
        # only raised for documents with nothing parseable at all
        return None


def _cell_text(row, position: int) -> str:
    return str(row.xpath(f"string(.//td[{position}])"))


def extract_rows(html: str) -> list:
    """Return the direct child rows of the history table, validated."""
    root = _parse_document(html)
    if root is None:
        raise MalformedDocumentError()

    rows = root.xpath(HISTORY_ROWS_XPATH)
    logger.debug("History table rows found: %d", len(rows))

    # Header pair plus at least one data pair, always in pairs.
    if len(rows) <= 2 or len(rows) % 2 != 0:
        raise MalformedDocumentError()
    return rows


def extract_statuses(html: str) -> List[TrackingStatus]:
    """
    Convert a tracking result page into its history events, oldest first.

    Every event is rendered as two consecutive rows; the first pair is the
    table header and is dropped. Missing cells become "".

    Raises MalformedDocumentError when the history table is absent or its
    row count is not an even number greater than 2.
    """
    rows = extract_rows(html)
    pairs = [rows[i:i + 2] for i in range(0, len(rows), 2)][1:]

    statuses: List[TrackingStatus] = []
    for pair in pairs:
        values = {
            name: _cell_text(pair[row_idx], pos)
            for name, row_idx, pos in _CELL_LAYOUT
        }
        statuses.append(TrackingStatus(**values))
    return statuses


__all__ = [
    "HISTORY_TABLE_SUMMARY",
    "extract_rows",
    "extract_statuses",
]
