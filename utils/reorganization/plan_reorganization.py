from datetime import date
from models.booking.booking import Booking
from models.facility.facility_profile import FacilityProfile
from models.reorganization.reorganization_plan import ReorganizationPlan


def group_bookings_by_window(
    bookings: list[Booking]
) -> dict[tuple[date, str, str], list[Booking]]:
    groups: dict[tuple[date, str, str], list[Booking]] = {}
    for booking in bookings:
        key = (booking.date, booking.start_time, booking.end_time)
        groups.setdefault(key, []).append(booking)
    return groups


def plan_reorganization(
    bookings: list[Booking],
    profile: FacilityProfile
) -> ReorganizationPlan:
    """
    Plan consecutive section assignments for bookings sharing a date and window.

    Closed bookings are repaired to the full section set. The others are
    ordered by occupant label and packed from section 1 upwards, each taking
    as many sections as it already holds. A booking that no longer fits is
    left as it is and reported as a warning.

    Args:
        bookings: All bookings of a single facility
        profile: The facility the bookings belong to

    Returns:
        ReorganizationPlan with the new sections of every booking that changes
    """
    all_sections = list(profile.sections)
    total_sections = len(all_sections)
    changes: dict[str, list[int]] = {}
    warnings: list[str] = []

    for (group_date, start_time, end_time), group in group_bookings_by_window(bookings).items():
        next_section = 1

        # Ties on the label fall back to the current layout so a second pass changes nothing
        ordered = sorted(
            (booking for booking in group if not booking.is_closed),
            key=lambda booking: (booking.occupant_label, sorted(booking.sections), booking.id or "")
        )

        for booking in group:
            if booking.is_closed and sorted(booking.sections) != all_sections:
                changes[booking.id] = all_sections

        for booking in ordered:
            section_count = len(booking.sections)

            if next_section + section_count - 1 > total_sections:
                warnings.append(
                    f"Cannot fit booking {booking.id} ({booking.occupant_label}) on "
                    f"{group_date.isoformat()} {start_time}-{end_time}: "
                    f"not enough consecutive {profile.section_label_plural} left"
                )
                continue

            new_sections = list(range(next_section, next_section + section_count))
            if new_sections != sorted(booking.sections):
                changes[booking.id] = new_sections

            next_section += section_count

    return ReorganizationPlan(changes=changes, warnings=warnings)
