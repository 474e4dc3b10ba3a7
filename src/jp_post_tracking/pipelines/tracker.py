from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Optional

import pandas as pd

from jp_post_tracking.api.client import TrackingFetcher
from jp_post_tracking.errors import TrackingError
from jp_post_tracking.io.codes import remove_non_numeric_chars
from jp_post_tracking.io.schema import (
    OUTPUT_COLUMNS,
    OUTPUT_ERROR_COLUMN,
    STATUS_FIELD_COLUMNS,
)
from jp_post_tracking.models import Tracking
from jp_post_tracking.parsing.extractor import extract_statuses
from jp_post_tracking.rules.classifier import TrackingParser, classify_tracking
from jp_post_tracking.rules.status_map import Slot


@dataclass(frozen=True)
class TrackingOutcome:
    tracking_code: str
    result: Optional[TrackingParser] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.result is not None


def parse_document(tracking_code: str, html: str) -> TrackingParser:
    """Extract and classify an already fetched result page."""
    code = remove_non_numeric_chars(tracking_code)
    tracking = Tracking(tracking_code=code, statuses=extract_statuses(html))
    return classify_tracking(tracking)


class TrackingPipeline:
    """fetch -> extract -> classify, one tracking code at a time."""

    def __init__(self, logger, *, client: TrackingFetcher) -> None:
        self.logger = logger
        self.client = client

    def track(self, tracking_code: str) -> TrackingParser:
        code = remove_non_numeric_chars(tracking_code)
        if not code:
            raise ValueError(f"Tracking code has no digits: {tracking_code!r}")

        html = self.client.fetch(code)
        result = parse_document(code, html)
        self.logger.info(
            "%s: used=%s done=%s latest=%s %s",
            code, result.is_used, result.is_done,
            result.latest.datetime, result.latest.status,
        )
        return result

    def run(self, tracking_codes: Iterable[str]) -> List[TrackingOutcome]:
        """Track every code in order; a failing code is recorded, not raised."""
        outcomes: List[TrackingOutcome] = []
        for raw in tracking_codes:
            code = remove_non_numeric_chars(raw)
            try:
                outcomes.append(TrackingOutcome(code, result=self.track(code)))
            except (TrackingError, ValueError) as e:
                self.logger.warning("%s: %s", code or raw, e)
                outcomes.append(TrackingOutcome(code, error=str(e)))
        failed = sum(1 for o in outcomes if not o.ok)
        self.logger.info("Tracked %d code(s), %d failed", len(outcomes), failed)
        return outcomes


def outcome_to_row(outcome: TrackingOutcome) -> dict[str, Any]:
    row: dict[str, Any] = {col: "" for col in OUTPUT_COLUMNS}
    row["TrackingCode"] = outcome.tracking_code
    row[OUTPUT_ERROR_COLUMN] = outcome.error or ""

    result = outcome.result
    row["IsUsed"] = bool(result and result.is_used)
    row["IsDone"] = bool(result and result.is_done)
    if result is None:
        return row

    for slot in Slot:
        status = result.slot(slot)
        prefix = slot.value.capitalize()
        for field, suffix in STATUS_FIELD_COLUMNS.items():
            row[f"{prefix}{suffix}"] = getattr(status, field)
    return row


def outcomes_to_frame(outcomes: Iterable[TrackingOutcome]) -> pd.DataFrame:
    rows = [outcome_to_row(o) for o in outcomes]
    df = pd.DataFrame(rows, columns=OUTPUT_COLUMNS)
    df["IsUsed"] = df["IsUsed"].astype(bool)
    df["IsDone"] = df["IsDone"].astype(bool)
    return df
