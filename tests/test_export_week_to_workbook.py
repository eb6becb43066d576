from datetime import date
from io import BytesIO
import openpyxl
from models.facility.facility_profiles import FACILITY_PROFILES
from services.schedule_service import ScheduleService
from models.contractor.contractor import Contractor
from stores import InMemoryBookingStore, InMemoryContractorStore
from utils.export import build_week_file_name, export_week_to_workbook, format_week_range


TRACK_6 = FACILITY_PROFILES["track-6"]
MONDAY = date(2024, 6, 3)


def get_merged_ranges(worksheet) -> set[str]:
    return {str(merged_range) for merged_range in worksheet.merged_cells.ranges}


def test_blocks_become_merged_regions(make_booking):
    # Arrange
    bookings = [
        make_booking(sections=[2, 3], booking_id="a", occupant_label="AZS"),
        make_booking(sections=[1], booking_id="b", booking_date=date(2024, 6, 4), start_time="07:00", end_time="07:30"),
    ]

    # Act
    workbook = export_week_to_workbook(bookings, MONDAY, TRACK_6, {"azs": "#93c5fd"})

    # Assert
    worksheet = workbook["Schedule"]
    merged_ranges = get_merged_ranges(worksheet)
    assert "C8:D9" in merged_ranges
    assert "B2:G2" in merged_ranges
    assert "A1:AQ1" in merged_ranges
    assert not any(merged_range.startswith("H4") for merged_range in merged_ranges)

    assert worksheet["C8"].value == "AZS"
    assert worksheet["C8"].fill.start_color.rgb.endswith("93C5FD")
    assert worksheet["H4"].value == "OKS SKRA"
    assert worksheet["B2"].value == "Monday 03.06.2024"
    assert worksheet["B3"].value == "Track 1"
    assert worksheet["A4"].value == "07:00 - 07:30"


def test_anonymized_export_hides_occupants(make_booking):
    # Arrange
    bookings = [
        make_booking(sections=[1], booking_id="a", occupant_label="AZS", category="Running group"),
        make_booking(
            sections=[1, 2, 3, 4, 5, 6], booking_id="b", start_time="12:00", end_time="13:00",
            occupant_label="CLOSED", is_closed=True, closed_reason="Maintenance"),
    ]

    # Act
    workbook = export_week_to_workbook(bookings, MONDAY, TRACK_6, {"AZS": "#FF0000"}, anonymized=True)

    # Assert
    worksheet = workbook["Schedule"]
    assert worksheet["B8"].value is None
    assert worksheet["B8"].fill.start_color.rgb.endswith("93C5FD")
    assert worksheet["B14"].value == "Maintenance"
    assert "B14:G15" in get_merged_ranges(worksheet)

    listing = workbook["Bookings"]
    occupants = [row[3] for row in listing.iter_rows(min_row=5, values_only=True)]
    assert occupants == [None, "Maintenance"]


def test_listing_only_holds_the_week(make_booking):
    # Arrange
    bookings = [
        make_booking(sections=[1], booking_date=date(2024, 6, 10), booking_id="next-week"),
        make_booking(sections=[1], booking_date=date(2024, 6, 5), booking_id="a"),
    ]

    # Act
    workbook = export_week_to_workbook(bookings, date(2024, 6, 7), TRACK_6)

    # Assert
    listing = workbook["Bookings"]
    assert listing["A1"].value == "Week: 03.06 - 09.06.2024"
    assert listing["A2"].value == "Number of bookings: 1"
    assert listing["A5"].value == "05.06.2024"


def test_week_range_and_file_name():
    # Assert
    assert format_week_range(date(2024, 6, 5)) == "03.06 - 09.06.2024"
    assert build_week_file_name(TRACK_6, MONDAY, False) == "6-lane running track 03-06_-_09-06-2024.xlsx"
    assert build_week_file_name(TRACK_6, MONDAY, True).endswith("_anonymized.xlsx")


def test_export_week_service_returns_xlsx(make_booking):
    # Arrange
    store = InMemoryBookingStore([make_booking(sections=[1, 2])])
    contractor_store = InMemoryContractorStore([Contractor(name="OKS SKRA", color="#fca5a5")])

    # Act
    file_name, content = ScheduleService.export_week("track-6", MONDAY, store, contractor_store)

    # Assert
    assert file_name.endswith(".xlsx")
    workbook = openpyxl.load_workbook(BytesIO(content))
    assert workbook.sheetnames == ["Schedule", "Bookings"]
    assert "B8:C9" in get_merged_ranges(workbook["Schedule"])
    assert workbook["Schedule"]["B8"].fill.start_color.rgb.endswith("FCA5A5")


def test_request_colors_override_contractor_registry(make_booking):
    # Arrange
    store = InMemoryBookingStore([make_booking(sections=[1, 2])])
    contractor_store = InMemoryContractorStore([Contractor(name="OKS SKRA", color="#fca5a5")])

    # Act
    _, content = ScheduleService.export_week(
        "track-6", MONDAY, store, contractor_store, color_map={"OKS SKRA": "#86EFAC"})

    # Assert
    worksheet = openpyxl.load_workbook(BytesIO(content))["Schedule"]
    assert worksheet["B8"].fill.start_color.rgb.endswith("86EFAC")
