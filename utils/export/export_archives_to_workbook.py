from datetime import datetime
import openpyxl
from models.archive.archive_snapshot import ArchiveSnapshot
from models.facility.facility_profiles import FACILITY_PROFILES
from utils.export.export_week_to_workbook import format_week_range


def export_archives_to_workbook(snapshots: list[ArchiveSnapshot]) -> openpyxl.Workbook:
    """
    List every archived week in one sheet, newest week first.
    The facility and week are only printed on the first row of each week.
    """
    workbook = openpyxl.Workbook()
    worksheet = workbook.active
    worksheet.title = "Archive"

    worksheet.append(["Full booking archive"])
    worksheet.append([f"Generated: {datetime.now().strftime('%d.%m.%Y %H:%M')}"])
    worksheet.append([])
    worksheet.append(["Facility", "Week", "Date", "Time", "Sections", "Occupant", "Category"])

    for snapshot in sorted(snapshots, key=lambda snapshot: snapshot.week_start, reverse=True):
        profile = FACILITY_PROFILES.get(snapshot.facility_type)
        facility_name = profile.name if profile else snapshot.facility_type
        week_range = format_week_range(snapshot.week_start)

        bookings = sorted(snapshot.bookings, key=lambda booking: (booking.date, booking.start_time))
        for index, booking in enumerate(bookings):
            worksheet.append([
                facility_name if index == 0 else None,
                week_range if index == 0 else None,
                booking.date.strftime("%d.%m.%Y"),
                f"{booking.start_time} - {booking.end_time}",
                ", ".join(str(section) for section in sorted(booking.sections)),
                booking.display_label,
                booking.category,
            ])
        worksheet.append([])

    return workbook
