from utils.export.export_archives_to_workbook import export_archives_to_workbook
from utils.export.export_week_to_workbook import (
    build_week_file_name,
    export_week_to_workbook,
    format_week_range,
    get_bookings_in_week,
)
from utils.export.workbook_to_bytes import workbook_to_bytes

__all__ = [
    "build_week_file_name",
    "export_archives_to_workbook",
    "export_week_to_workbook",
    "format_week_range",
    "get_bookings_in_week",
    "workbook_to_bytes",
]
