# src/jp_post_tracking/io/schema.py
from __future__ import annotations

from jp_post_tracking.rules.status_map import Slot

INPUT_CODE_COLUMN = "Tracking Number"

# TrackingStatus field -> column suffix
STATUS_FIELD_COLUMNS = {
    "datetime": "Datetime",
    "status": "Status",
    "detail": "Detail",
    "office": "Office",
    "postcode": "Postcode",
    "prefecture": "Prefecture",
}

OUTPUT_KEY_COLUMNS = ["TrackingCode", "IsUsed", "IsDone"]
OUTPUT_SLOT_COLUMNS = [
    f"{slot.value.capitalize()}{suffix}"
    for slot in Slot
    for suffix in STATUS_FIELD_COLUMNS.values()
]
OUTPUT_ERROR_COLUMN = "Error"

OUTPUT_COLUMNS = OUTPUT_KEY_COLUMNS + OUTPUT_SLOT_COLUMNS + [OUTPUT_ERROR_COLUMN]
