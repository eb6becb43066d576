from models.facility.time_slot import TimeSlot
from utils.datetime import add_minutes_to_time_string


def generate_time_slots(
    start_time: str,
    end_time: str,
    min_interval: int
) -> list[TimeSlot]:
    """
    Generate the consecutive time slots between start_time and end_time.

    A trailing remainder shorter than min_interval does not become a slot.

    Args:
        start_time: Start of the first slot in HH:MM format
        end_time: End of the last slot in HH:MM format
        min_interval: Slot length in minutes (15, 30 or 60)

    Returns:
        List of TimeSlot objects covering [start_time, end_time)
    """
    valid_min_intervals = [15, 30, 60]
    if min_interval not in valid_min_intervals:
        raise ValueError("min_interval must be 15, 30 or 60")

    slots = []
    slot_start = start_time

    while slot_start < end_time:
        try:
            slot_end = add_minutes_to_time_string(slot_start, min_interval)
        except ValueError:
            break
        if slot_end > end_time:
            break

        slots.append(TimeSlot(start=slot_start, end=slot_end))
        slot_start = slot_end

    return slots
