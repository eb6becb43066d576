from datetime import date
from models.booking.booking import Booking
from models.facility.facility_profile import FacilityProfile
from models.grid.week_grid import GridCell, MergedBlock, WeekGrid
from utils.datetime import get_week_days, get_week_start
from utils.time_slots import TIME_SLOTS


def get_booking_for_cell(
    bookings: list[Booking],
    day: date,
    slot_start: str,
    section: int
) -> Booking | None:
    """First booking on this day holding the section while the slot starts."""
    return next(
        (
            booking for booking in bookings
            if booking.date == day
            and section in booking.sections
            and booking.covers(slot_start)
        ),
        None
    )


def render_week_grid(
    bookings: list[Booking],
    week_start: date,
    profile: FacilityProfile
) -> WeekGrid:
    """
    Lay out a week of bookings as a grid of merged cells.

    Rows are the time slots of the day, columns are the sections of each of
    the seven days (Monday first). A booking becomes one merged block per
    contiguous run of sections and slots, like a spreadsheet merged region.

    A cell starts a block when the previous slot of the same day and section
    does not hold the same booking. From there the block extends downwards
    while the same booking holds the section, and rightwards (within the day)
    while the same booking holds the next sections at the current slot.
    Blocks key strictly on booking identity, never on the occupant label.

    Args:
        bookings: Bookings of a single facility
        week_start: Any date of the week to render
        profile: The facility the bookings belong to

    Returns:
        WeekGrid with one GridCell per (slot, day, section) and the list of blocks
    """
    monday = get_week_start(week_start)
    days = get_week_days(monday)
    sections = list(profile.sections)
    section_count = len(sections)

    occupants = [
        [
            [get_booking_for_cell(bookings, day, slot.start, section) for section in sections]
            for day in days
        ]
        for slot in TIME_SLOTS
    ]

    def is_same_booking(slot_index: int, day_index: int, section_index: int, booking: Booking) -> bool:
        return occupants[slot_index][day_index][section_index] is booking

    cells: list[list[GridCell | None]] = [
        [None] * (len(days) * section_count) for _ in TIME_SLOTS
    ]
    blocks: list[MergedBlock] = []

    for slot_index in range(len(TIME_SLOTS)):
        for day_index in range(len(days)):
            section_index = 0

            while section_index < section_count:
                column = day_index * section_count + section_index
                booking = occupants[slot_index][day_index][section_index]

                if cells[slot_index][column] is not None:
                    # Already covered by a block started in an earlier row
                    section_index += 1
                    continue

                if booking is None:
                    cells[slot_index][column] = GridCell(state="empty")
                    section_index += 1
                    continue

                if slot_index > 0 and is_same_booking(slot_index - 1, day_index, section_index, booking):
                    cells[slot_index][column] = GridCell(state="covered")
                    section_index += 1
                    continue

                col_span = 1
                for next_index in range(section_index + 1, section_count):
                    if not is_same_booking(slot_index, day_index, next_index, booking):
                        break
                    col_span += 1

                row_span = 1
                for next_slot in range(slot_index + 1, len(TIME_SLOTS)):
                    if not is_same_booking(next_slot, day_index, section_index, booking):
                        break
                    row_span += 1

                block = MergedBlock(
                    booking_id=booking.id,
                    label=booking.display_label,
                    occupant_label=booking.occupant_label,
                    category=booking.category,
                    is_closed=booking.is_closed,
                    day_index=day_index,
                    slot_index=slot_index,
                    section_index=section_index,
                    row_span=row_span,
                    col_span=col_span
                )
                blocks.append(block)

                for row in range(slot_index, slot_index + row_span):
                    for offset in range(col_span):
                        cells[row][column + offset] = GridCell(state="covered")
                cells[slot_index][column] = GridCell(state="block", block=block)

                section_index += col_span

    return WeekGrid(
        week_start=monday,
        days=days,
        sections=sections,
        time_slots=TIME_SLOTS,
        cells=cells,
        blocks=blocks
    )
