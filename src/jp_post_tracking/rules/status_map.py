# src/jp_post_tracking/rules/status_map.py
from __future__ import annotations

from enum import Enum
from typing import Optional


class Slot(str, Enum):
    LATEST = "latest"
    UNDERWRITE = "underwrite"
    ARRIVE = "arrive"
    PASSING = "passing"
    DONE = "done"


# Slots that are filled with the empty status when nothing lands in them.
# LATEST is excluded: it is always the last event.
NAMED_SLOTS: tuple[Slot, ...] = (Slot.UNDERWRITE, Slot.ARRIVE, Slot.PASSING, Slot.DONE)


class LabelCategory(str, Enum):
    UNMAPPED = "unmapped"   # label not known at all
    NO_SLOT = "no_slot"     # known label, deliberately not a milestone
    SLOT = "slot"


# Exact carrier labels. None means "known, but not a milestone".
STATUS_SLOTS: dict[str, Optional[Slot]] = {
    "引受": Slot.UNDERWRITE,
    "到着": Slot.ARRIVE,
    "通過": Slot.PASSING,
    "ご不在のため持ち戻り": None,
    "差出人に返送": None,
    "配達希望受付": None,
    "最寄局・最寄店送付": None,
    "保管": None,
    "持ち出し中": None,
    "お届け先にお届け済み": Slot.DONE,
    "窓口でお渡し": Slot.DONE,
    "差出人に返送済み": Slot.DONE,
}


def label_category(label: str) -> LabelCategory:
    if label not in STATUS_SLOTS:
        return LabelCategory.UNMAPPED
    if STATUS_SLOTS[label] is None:
        return LabelCategory.NO_SLOT
    return LabelCategory.SLOT


def slot_for_label(label: str) -> Slot:
    """Slot an event with this label is written to; non-milestones go to LATEST."""
    if label_category(label) is LabelCategory.SLOT:
        return STATUS_SLOTS[label]  # type: ignore[return-value]
    return Slot.LATEST
