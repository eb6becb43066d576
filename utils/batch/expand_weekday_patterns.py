from datetime import date
from errors import InvalidRequestError
from models.booking.unresolved_request import UnresolvedRequest
from models.booking.weekday_pattern import WeekdayPattern
from models.facility.facility_profile import FacilityType
from utils.availability import validate_time_window
from utils.datetime import each_day_of_interval, get_weekday_number

CLOSED_LABEL = "CLOSED"


def expand_weekday_patterns(
    date_from: date,
    date_to: date,
    weekday_patterns: list[WeekdayPattern],
    facility_type: FacilityType,
    occupant_label: str = "",
    category: str | None = None,
    is_closed: bool = False,
    closed_reason: str | None = None
) -> list[UnresolvedRequest]:
    """
    Expand a date range and weekday patterns into one request per matching date.

    Requests are emitted pattern by pattern in entry order, and by ascending
    date within each pattern.

    Args:
        date_from: First date of the range (inclusive)
        date_to: Last date of the range (inclusive)
        weekday_patterns: Weekday, window and section count per entry
        facility_type: Facility the requests belong to
        occupant_label: Party the sections are booked for
        category: Optional occupant category
        is_closed: Whether the batch closes the facility
        closed_reason: Optional label shown for closed bookings

    Returns:
        List of UnresolvedRequest objects in processing order
    """
    if date_from > date_to:
        raise InvalidRequestError(
            f"date_from {date_from} must not be after date_to {date_to}")
    if not weekday_patterns:
        raise InvalidRequestError("At least one weekday pattern is required")

    closed_reason = (closed_reason or "").strip() or None
    if is_closed:
        occupant_label = closed_reason or CLOSED_LABEL
    elif not occupant_label.strip():
        raise InvalidRequestError("An occupant label is required for bookings")

    for pattern in weekday_patterns:
        validate_time_window(pattern.start_time, pattern.end_time)
        if not is_closed and pattern.requested_count < 1:
            raise InvalidRequestError(
                f"Requested section count must be at least 1, got {pattern.requested_count}")

    all_dates = each_day_of_interval(date_from, date_to)
    requests = []

    for pattern in weekday_patterns:
        for day in all_dates:
            if get_weekday_number(day) != pattern.weekday:
                continue

            requests.append(UnresolvedRequest(
                facility_type=facility_type,
                date=day,
                start_time=pattern.start_time,
                end_time=pattern.end_time,
                requested_count=pattern.requested_count,
                occupant_label=occupant_label,
                category=category,
                is_closed=is_closed,
                closed_reason=closed_reason if is_closed else None
            ))

    return requests
