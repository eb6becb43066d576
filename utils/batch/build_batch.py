from typing import Iterable
from pydantic import BaseModel
from models.booking.booking import Booking
from models.booking.unresolved_request import UnresolvedRequest
from models.facility.facility_profile import FacilityProfile
from utils.availability import get_free_sections, resolve_sections
from utils.conflicts import find_conflicts


class BatchBuildOutcome(BaseModel):
    bookings: list[Booking]
    conflicts: list[str]


def format_window(request: UnresolvedRequest) -> str:
    return f"{request.date.strftime('%d.%m.%Y')} {request.start_time}-{request.end_time}"


def convert_request_to_booking(
    request: UnresolvedRequest,
    sections: list[int]
) -> Booking:
    return Booking(
        facility_type=request.facility_type,
        date=request.date,
        start_time=request.start_time,
        end_time=request.end_time,
        sections=sections,
        occupant_label=request.occupant_label,
        category=request.category,
        is_closed=request.is_closed,
        closed_reason=request.closed_reason
    )


def build_batch(
    requests: list[UnresolvedRequest],
    existing_bookings: Iterable[Booking],
    profile: FacilityProfile,
    incremental: bool = True
) -> BatchBuildOutcome:
    """
    Resolve sections for every request and gate each result through the
    conflict validator.

    In incremental mode every accepted booking joins the working set before
    the next request is resolved, so two requests in one batch can never
    claim the same section. In snapshot mode every request only sees the
    bookings that existed before the batch.

    Closed requests take the full section set and skip both the allocation
    engine and the conflict validator.

    Args:
        requests: Requests in processing order
        existing_bookings: Bookings of the facility before the batch
        profile: The facility the requests belong to
        incremental: Whether accepted requests are visible to later ones

    Returns:
        BatchBuildOutcome holding the accepted bookings and one conflict
        message per failing request
    """
    snapshot = list(existing_bookings)
    working_set = list(snapshot)
    section_label = profile.section_label

    bookings: list[Booking] = []
    conflicts: list[str] = []

    for request in requests:
        visible_bookings = working_set if incremental else snapshot

        if request.is_closed:
            booking = convert_request_to_booking(request, list(profile.sections))
            bookings.append(booking)
            working_set.append(booking)
            continue

        sections = resolve_sections(
            existing_bookings=visible_bookings,
            booking_date=request.date,
            start_time=request.start_time,
            end_time=request.end_time,
            requested_count=request.requested_count,
            consecutive=False,
            sections=profile.sections
        )

        if not sections:
            free_sections = get_free_sections(
                visible_bookings,
                request.date,
                request.start_time,
                request.end_time,
                profile.sections
            )
            conflicts.append(
                f"{format_window(request)}: not enough free {profile.section_label_plural} "
                f"(requested {request.requested_count}, available {len(free_sections)})"
            )
            continue

        booking = convert_request_to_booking(request, sections)
        section_conflicts = find_conflicts(booking, visible_bookings, section_label)
        if section_conflicts:
            conflicts.append(
                f"{format_window(request)}: {'; '.join(section_conflicts)}")
            continue

        bookings.append(booking)
        working_set.append(booking)

    return BatchBuildOutcome(bookings=bookings, conflicts=conflicts)
