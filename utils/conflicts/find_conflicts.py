from typing import Iterable
from models.booking.booking import Booking


def find_conflicts(
    candidate: Booking,
    existing_bookings: Iterable[Booking],
    section_label: str = "Section"
) -> list[str]:
    """
    Report every section of the candidate already taken by another booking
    with the same facility, date and exact time window.

    Closed candidates never conflict: closing the facility overrides any
    existing bookings.

    Args:
        candidate: The booking about to be accepted
        existing_bookings: Bookings to check against
        section_label: Display name of a section ("Track", "Half")

    Returns:
        One human-readable message per conflicting section, empty if none
    """
    conflicts: list[str] = []

    if candidate.is_closed:
        return conflicts

    relevant_bookings = [
        booking for booking in existing_bookings
        if booking.date == candidate.date
        and booking.start_time == candidate.start_time
        and booking.end_time == candidate.end_time
        and booking.facility_type == candidate.facility_type
        and (candidate.id is None or booking.id != candidate.id)
    ]

    for section in candidate.sections:
        conflicting = next(
            (booking for booking in relevant_bookings if section in booking.sections), None)
        if conflicting:
            conflicts.append(
                f"{section_label} {section} is already booked by "
                f"{conflicting.display_label} at this time"
            )

    return conflicts
