from datetime import date, timedelta
import openpyxl
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter
from models.booking.booking import Booking
from models.facility.facility_profile import FacilityProfile
from utils.colors import get_occupant_color
from utils.datetime import get_week_start
from utils.grid import render_week_grid

WEEKDAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
HEADER_ROWS = 3  # Title, day names, section labels
CENTERED = Alignment(wrap_text=True, horizontal="center", vertical="center")


def format_week_range(week_start: date) -> str:
    monday = get_week_start(week_start)
    sunday = monday + timedelta(days=6)
    return f"{monday.strftime('%d.%m')} - {sunday.strftime('%d.%m.%Y')}"


def get_bookings_in_week(bookings: list[Booking], week_start: date) -> list[Booking]:
    monday = get_week_start(week_start)
    sunday = monday + timedelta(days=6)
    week_bookings = [booking for booking in bookings if monday <= booking.date <= sunday]
    return sorted(week_bookings, key=lambda booking: (booking.date, booking.start_time))


def build_week_file_name(profile: FacilityProfile, week_start: date, anonymized: bool) -> str:
    date_range = format_week_range(week_start).replace(" ", "_").replace(".", "-")
    suffix = "_anonymized" if anonymized else ""
    return f"{profile.name} {date_range}{suffix}.xlsx"


def _fill(hex_color: str) -> PatternFill:
    rgb = hex_color.lstrip("#")
    return PatternFill(start_color=rgb, end_color=rgb, fill_type="solid")


def _write_schedule_sheet(
    worksheet,
    bookings: list[Booking],
    week_start: date,
    profile: FacilityProfile,
    color_map: dict[str, str],
    anonymized: bool
) -> None:
    grid = render_week_grid(bookings, week_start, profile)
    section_count = len(grid.sections)
    last_column = 1 + 7 * section_count

    worksheet.cell(row=1, column=1, value=f"{profile.name}: {format_week_range(grid.week_start)}")
    worksheet.cell(row=1, column=1).font = Font(bold=True, size=14)
    worksheet.merge_cells(start_row=1, start_column=1, end_row=1, end_column=last_column)

    worksheet.cell(row=2, column=1, value="Time")
    worksheet.cell(row=3, column=1, value="From - To")
    for day_index, day in enumerate(grid.days):
        first_column = 2 + day_index * section_count
        header = worksheet.cell(
            row=2, column=first_column,
            value=f"{WEEKDAY_NAMES[day_index]} {day.strftime('%d.%m.%Y')}")
        header.alignment = CENTERED
        header.font = Font(bold=True)
        if section_count > 1:
            worksheet.merge_cells(
                start_row=2, start_column=first_column,
                end_row=2, end_column=first_column + section_count - 1)

        for section_index, section in enumerate(grid.sections):
            label = worksheet.cell(
                row=3, column=first_column + section_index,
                value=f"{profile.section_label} {section}")
            label.alignment = CENTERED

    for slot_index, slot in enumerate(grid.time_slots):
        worksheet.cell(row=HEADER_ROWS + 1 + slot_index, column=1, value=f"{slot.start} - {slot.end}")

    for block in grid.blocks:
        row = HEADER_ROWS + 1 + block.slot_index
        column = 2 + block.day_index * section_count + block.section_index

        cell = worksheet.cell(row=row, column=column)
        if not anonymized or block.is_closed:
            cell.value = block.label
        cell.alignment = CENTERED
        cell.fill = _fill(get_occupant_color(
            block.occupant_label,
            color_map,
            category=block.category,
            is_closed=block.is_closed,
            anonymized=anonymized
        ))
        if block.is_closed:
            cell.font = Font(bold=True)

        if block.row_span > 1 or block.col_span > 1:
            worksheet.merge_cells(
                start_row=row, start_column=column,
                end_row=row + block.row_span - 1,
                end_column=column + block.col_span - 1)

    worksheet.column_dimensions["A"].width = 14
    for column in range(2, last_column + 1):
        worksheet.column_dimensions[get_column_letter(column)].width = 10
    worksheet.freeze_panes = worksheet.cell(row=HEADER_ROWS + 1, column=2)


def _write_listing_sheet(worksheet, bookings: list[Booking], week_start: date, anonymized: bool) -> None:
    week_bookings = get_bookings_in_week(bookings, week_start)

    worksheet.append([f"Week: {format_week_range(week_start)}"])
    worksheet.append([f"Number of bookings: {len(week_bookings)}"])
    worksheet.append([])
    worksheet.append(["Date", "Time", "Sections", "Occupant", "Category"])

    for booking in week_bookings:
        occupant = booking.display_label
        if anonymized and not booking.is_closed:
            occupant = None
        worksheet.append([
            booking.date.strftime("%d.%m.%Y"),
            f"{booking.start_time} - {booking.end_time}",
            ", ".join(str(section) for section in sorted(booking.sections)),
            occupant,
            booking.category,
        ])


def export_week_to_workbook(
    bookings: list[Booking],
    week_start: date,
    profile: FacilityProfile,
    color_map: dict[str, str] | None = None,
    anonymized: bool = False
) -> openpyxl.Workbook:
    """
    Build a spreadsheet for one facility week.

    The "Schedule" sheet reproduces the week grid with one merged region per
    block. The "Bookings" sheet lists the week's bookings by date and time.
    Anonymized workbooks colour blocks by category and only print the labels
    of closed bookings.

    Args:
        bookings: Bookings of the facility (bookings outside the week are ignored)
        week_start: Any date of the week to export
        profile: The facility the bookings belong to
        color_map: Occupant label -> #RRGGBB colour
        anonymized: Whether occupant names must be hidden

    Returns:
        The openpyxl Workbook, ready to be saved
    """
    workbook = openpyxl.Workbook()
    schedule_sheet = workbook.active
    schedule_sheet.title = "Schedule"
    _write_schedule_sheet(
        schedule_sheet, bookings, week_start, profile, color_map or {}, anonymized)

    listing_sheet = workbook.create_sheet("Bookings")
    _write_listing_sheet(listing_sheet, bookings, week_start, anonymized)

    return workbook
