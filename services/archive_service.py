from datetime import date, timedelta
from models.archive.archive_snapshot import ArchiveSnapshot
from models.facility.facility_profiles import get_facility_profile
from stores.booking_store import ArchiveStore, BookingStore, ContractorStore
from utils.colors import build_color_map
from utils.datetime import get_week_start
from utils.export import (
    build_week_file_name,
    export_archives_to_workbook,
    export_week_to_workbook,
    workbook_to_bytes,
)


class ArchiveService:

    @staticmethod
    def save_week(
        facility_type: str,
        week_start: date,
        booking_store: BookingStore,
        archive_store: ArchiveStore
    ) -> ArchiveSnapshot:
        """
        Copy the facility's bookings of one Monday-Sunday week into the archive.
        Saving the same week again replaces the earlier snapshot.
        """
        profile = get_facility_profile(facility_type)
        monday = get_week_start(week_start)
        sunday = monday + timedelta(days=6)

        week_bookings = [
            booking for booking in booking_store.list(profile.id)
            if monday <= booking.date <= sunday
        ]

        snapshot = archive_store.save(monday, sunday, profile.id, week_bookings)
        print(f"Archived {len(week_bookings)} bookings for {profile.id} week {monday.isoformat()}")
        return snapshot

    @staticmethod
    def list_archives(
        archive_store: ArchiveStore,
        facility_type: str | None = None
    ) -> list[ArchiveSnapshot]:
        if facility_type:
            facility_type = get_facility_profile(facility_type).id
        return archive_store.list(facility_type)

    @staticmethod
    def delete_archive(archive_id: str, archive_store: ArchiveStore) -> None:
        archive_store.delete(archive_id)

    @staticmethod
    def export_archives(archive_store: ArchiveStore) -> bytes:
        workbook = export_archives_to_workbook(archive_store.list())
        return workbook_to_bytes(workbook)

    @staticmethod
    def export_archived_week(
        archive_id: str,
        archive_store: ArchiveStore,
        contractor_store: ContractorStore,
        anonymized: bool = False
    ) -> tuple[str, bytes]:
        """Render a saved snapshot with the same workbook layout as a live week."""
        snapshot = archive_store.get(archive_id)
        profile = get_facility_profile(snapshot.facility_type)
        color_map = build_color_map(contractor_store.list())

        workbook = export_week_to_workbook(
            snapshot.bookings, snapshot.week_start, profile, color_map, anonymized)

        return build_week_file_name(profile, snapshot.week_start, anonymized), workbook_to_bytes(workbook)
