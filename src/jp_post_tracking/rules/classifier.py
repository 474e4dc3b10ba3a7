# src/jp_post_tracking/rules/classifier.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from jp_post_tracking.errors import PreconditionViolation
from jp_post_tracking.models import Tracking, TrackingStatus
from jp_post_tracking.rules.status_map import NAMED_SLOTS, Slot, slot_for_label


@dataclass(frozen=True)
class TrackingParser:
    """Milestones of one tracking history.

    - latest:     the last event overall
    - underwrite: last 引受 (accepted) event
    - arrive:     last 到着 event
    - passing:    last 通過 event
    - done:       last delivery-completing event
    - is_used:    the number was accepted by the carrier
    - is_done:    delivery completed
    """
    tracking: Tracking
    latest: TrackingStatus
    underwrite: TrackingStatus
    arrive: TrackingStatus
    passing: TrackingStatus
    done: TrackingStatus
    is_used: bool
    is_done: bool

    @classmethod
    def parse(cls, tracking: Tracking) -> "TrackingParser":
        return classify_tracking(tracking)

    def slot(self, slot: Slot) -> TrackingStatus:
        return getattr(self, slot.value)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "tracking_code": self.tracking.tracking_code,
            "is_used": self.is_used,
            "is_done": self.is_done,
        }
        for s in Slot:
            out[s.value] = self.slot(s).to_dict()
        return out


def assign_slots(statuses: tuple[TrackingStatus, ...]) -> dict[Slot, TrackingStatus]:
    """
    Single pass, last write wins. Events whose label is unknown or not a
    milestone land in LATEST; LATEST is then forced to the final event.
    """
    assigned: dict[Slot, TrackingStatus] = {}
    for status in statuses:
        assigned[slot_for_label(status.status)] = status

    # Unconditional: latest is the chronologically last event, whatever its label.
    assigned[Slot.LATEST] = statuses[-1]
    return assigned


def classify_tracking(tracking: Tracking) -> TrackingParser:
    if not tracking.statuses:
        raise PreconditionViolation(
            f"Tracking {tracking.tracking_code!r} has no statuses to classify.")

    assigned = assign_slots(tracking.statuses)
    for s in NAMED_SLOTS:
        assigned.setdefault(s, TrackingStatus.empty())

    underwrite = assigned[Slot.UNDERWRITE]
    done = assigned[Slot.DONE]
    return TrackingParser(
        tracking=tracking,
        latest=assigned[Slot.LATEST],
        underwrite=underwrite,
        arrive=assigned[Slot.ARRIVE],
        passing=assigned[Slot.PASSING],
        done=done,
        is_used=not underwrite.is_empty(),
        is_done=not done.is_empty(),
    )
