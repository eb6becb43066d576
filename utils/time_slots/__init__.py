from utils.time_slots.generate_time_slots import generate_time_slots
from utils.time_slots.day_time_slots import (
    DAY_END_TIME,
    DAY_START_TIME,
    TIME_SLOT_DURATION_MINUTES,
    TIME_SLOTS,
    get_touched_time_slots,
    is_slot_aligned,
)


__all__ = [
    "DAY_END_TIME",
    "DAY_START_TIME",
    "TIME_SLOT_DURATION_MINUTES",
    "TIME_SLOTS",
    "generate_time_slots",
    "get_touched_time_slots",
    "is_slot_aligned",
]
