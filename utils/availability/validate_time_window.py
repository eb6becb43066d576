from errors import InvalidRequestError
from utils.datetime import is_valid_time_string
from utils.time_slots import is_slot_aligned


def validate_time_window(start_time: str, end_time: str) -> None:
    """
    Reject windows the half-hour grid cannot represent.

    Raises:
        InvalidRequestError: when a time is not zero-padded HH:MM, when
            start_time is not before end_time, or when either bound is not
            a slot boundary
    """
    for time_str in (start_time, end_time):
        if not is_valid_time_string(time_str):
            raise InvalidRequestError(
                f"'{time_str}' is not a zero-padded HH:MM time")

    if start_time >= end_time:
        raise InvalidRequestError(
            f"Start time {start_time} must be before end time {end_time}")

    if not is_slot_aligned(start_time, end_time):
        raise InvalidRequestError(
            f"Window {start_time}-{end_time} is not aligned to the time slot grid")
