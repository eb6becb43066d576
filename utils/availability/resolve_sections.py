from datetime import date
from typing import Iterable
from errors import InvalidRequestError
from models.booking.booking import Booking
from utils.availability.get_free_sections import (
    get_bookings_for_date,
    is_closed_during,
    is_section_free,
)
from utils.availability.validate_time_window import validate_time_window
from utils.time_slots import get_touched_time_slots


def resolve_sections(
    existing_bookings: Iterable[Booking],
    booking_date: date,
    start_time: str,
    end_time: str,
    requested_count: int,
    consecutive: bool,
    sections: Iterable[int]
) -> list[int]:
    """
    Allocate sections for a booking window.

    Two policies are supported:
        - first-N-free (consecutive=False): the requested_count lowest-numbered
          sections that are free in every touched slot
        - first-N-consecutive (consecutive=True): the leftmost unbroken run of
          requested_count sections that are all free in every touched slot

    No partial allocation is ever returned: if the request cannot be met the
    result is empty. The existing bookings are never modified.

    Args:
        existing_bookings: Bookings of the same facility (other dates are ignored)
        booking_date: The calendar date of the request
        start_time: Window start in HH:MM format, aligned to a slot start
        end_time: Window end in HH:MM format, aligned to a slot end
        requested_count: Number of sections needed
        consecutive: Whether the sections must form an unbroken run
        sections: Section numbers of the facility (1..N)

    Returns:
        The allocated section numbers in ascending order, or an empty list

    Raises:
        InvalidRequestError: for malformed windows or a requested_count below 1
    """
    validate_time_window(start_time, end_time)
    if requested_count < 1:
        raise InvalidRequestError(
            f"Requested section count must be at least 1, got {requested_count}")

    all_sections = sorted(sections)
    if requested_count > len(all_sections):
        return []

    bookings = get_bookings_for_date(existing_bookings, booking_date)
    touched_slots = get_touched_time_slots(start_time, end_time)

    if is_closed_during(bookings, touched_slots):
        return []

    if consecutive:
        for start_index in range(len(all_sections) - requested_count + 1):
            run = all_sections[start_index:start_index + requested_count]
            if all(is_section_free(section, bookings, touched_slots) for section in run):
                return run
        return []

    allocated = []
    for section in all_sections:
        if is_section_free(section, bookings, touched_slots):
            allocated.append(section)
        if len(allocated) == requested_count:
            return allocated

    return []
