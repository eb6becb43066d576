from datetime import date
from typing import Iterable
from models.booking.booking import Booking
from models.facility.time_slot import TimeSlot
from utils.datetime import is_time_between
from utils.time_slots import get_touched_time_slots


def get_bookings_for_date(
    existing_bookings: Iterable[Booking],
    booking_date: date
) -> list[Booking]:
    return [booking for booking in existing_bookings if booking.date == booking_date]


def is_closed_during(bookings: list[Booking], touched_slots: list[TimeSlot]) -> bool:
    """True when a closed booking covers the start of any touched slot."""
    return any(
        booking.is_closed and is_time_between(
            slot.start, booking.start_time, booking.end_time)
        for booking in bookings
        for slot in touched_slots
    )


def is_section_free(
    section: int,
    bookings: list[Booking],
    touched_slots: list[TimeSlot]
) -> bool:
    """
    A section is free only if no booking occupies it in any touched slot.
    """
    for slot in touched_slots:
        for booking in bookings:
            if (section in booking.sections
                    and is_time_between(slot.start, booking.start_time, booking.end_time)):
                return False
    return True


def get_free_sections(
    existing_bookings: Iterable[Booking],
    booking_date: date,
    start_time: str,
    end_time: str,
    sections: Iterable[int]
) -> list[int]:
    """
    List every section that is free across all slots of [start_time, end_time).

    Args:
        existing_bookings: Bookings of the same facility
        booking_date: The calendar date of the request
        start_time: Window start in HH:MM format
        end_time: Window end in HH:MM format (exclusive)
        sections: Section numbers of the facility

    Returns:
        Free section numbers in ascending order, empty while the facility is closed
    """
    bookings = get_bookings_for_date(existing_bookings, booking_date)
    touched_slots = get_touched_time_slots(start_time, end_time)

    if is_closed_during(bookings, touched_slots):
        return []

    return [
        section for section in sorted(sections)
        if is_section_free(section, bookings, touched_slots)
    ]
