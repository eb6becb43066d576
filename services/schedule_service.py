from datetime import date
from models.grid.week_grid import WeekGrid
from models.facility.facility_profiles import get_facility_profile
from stores.booking_store import BookingStore, ContractorStore
from utils.colors import build_color_map
from utils.export import (
    build_week_file_name,
    export_week_to_workbook,
    get_bookings_in_week,
    workbook_to_bytes,
)
from utils.grid import render_week_grid


class ScheduleService:

    @staticmethod
    def render_week(
        facility_type: str,
        week_start: date,
        booking_store: BookingStore
    ) -> WeekGrid:
        profile = get_facility_profile(facility_type)
        week_bookings = get_bookings_in_week(booking_store.list(profile.id), week_start)
        return render_week_grid(week_bookings, week_start, profile)

    @staticmethod
    def export_week(
        facility_type: str,
        week_start: date,
        booking_store: BookingStore,
        contractor_store: ContractorStore,
        color_map: dict[str, str] | None = None,
        anonymized: bool = False
    ) -> tuple[str, bytes]:
        profile = get_facility_profile(facility_type)
        week_bookings = get_bookings_in_week(booking_store.list(profile.id), week_start)

        workbook = export_week_to_workbook(
            week_bookings, week_start, profile, build_color_map(contractor_store.list(), color_map), anonymized)

        return build_week_file_name(profile, week_start, anonymized), workbook_to_bytes(workbook)
