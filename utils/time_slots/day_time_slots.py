from models.facility.time_slot import TimeSlot
from utils.time_slots.generate_time_slots import generate_time_slots

DAY_START_TIME = "07:00"
DAY_END_TIME = "21:00"
TIME_SLOT_DURATION_MINUTES = 30

# The business-day grid, identical for every facility
TIME_SLOTS: list[TimeSlot] = generate_time_slots(
    DAY_START_TIME, DAY_END_TIME, TIME_SLOT_DURATION_MINUTES)


def get_touched_time_slots(start_time: str, end_time: str) -> list[TimeSlot]:
    """Slots whose start falls within [start_time, end_time)."""
    return [
        slot for slot in TIME_SLOTS
        if start_time <= slot.start < end_time
    ]


def is_slot_aligned(start_time: str, end_time: str) -> bool:
    slot_starts = {slot.start for slot in TIME_SLOTS}
    slot_ends = {slot.end for slot in TIME_SLOTS}
    return start_time in slot_starts and end_time in slot_ends
