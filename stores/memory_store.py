from __future__ import annotations
import uuid
from datetime import date, datetime
from errors import ArchiveNotFoundError, BookingNotFoundError, ContractorNotFoundError
from models.archive.archive_snapshot import ArchiveSnapshot
from models.booking.booking import Booking
from models.contractor.contractor import Contractor


class InMemoryBookingStore:

    def __init__(self, bookings: list[Booking] | None = None):
        self._bookings: dict[str, Booking] = {}
        for booking in bookings or []:
            self.create(booking)

    def list(self, facility_type: str | None = None, booking_date: date | None = None) -> list[Booking]:
        return [
            booking.model_copy(deep=True)
            for booking in sorted(self._bookings.values(), key=lambda booking: (booking.date, booking.start_time))
            if (facility_type is None or booking.facility_type == facility_type)
            and (booking_date is None or booking.date == booking_date)
        ]

    def get(self, booking_id: str) -> Booking:
        booking = self._bookings.get(booking_id)
        if booking is None:
            raise BookingNotFoundError(f"Booking '{booking_id}' not found")
        return booking.model_copy(deep=True)

    def create(self, booking: Booking) -> Booking:
        created = booking.model_copy(deep=True, update={"id": booking.id or str(uuid.uuid4())})
        self._bookings[created.id] = created
        return created.model_copy(deep=True)

    def create_many(self, bookings: list[Booking]) -> list[Booking]:
        return [self.create(booking) for booking in bookings]

    def update(self, booking_id: str, **fields) -> Booking:
        booking = self.get(booking_id)
        updated = Booking.model_validate({**booking.model_dump(), **fields, "id": booking_id})
        self._bookings[booking_id] = updated
        return updated.model_copy(deep=True)

    def update_sections(self, changes: dict[str, list[int]]) -> list[Booking]:
        missing = [booking_id for booking_id in changes if booking_id not in self._bookings]
        if missing:
            raise BookingNotFoundError(f"Bookings not found: {', '.join(missing)}")

        updated = []
        for booking_id, sections in changes.items():
            booking = self._bookings[booking_id].model_copy(update={"sections": list(sections)})
            self._bookings[booking_id] = booking
            updated.append(booking.model_copy(deep=True))
        return updated

    def delete(self, booking_id: str) -> None:
        if self._bookings.pop(booking_id, None) is None:
            raise BookingNotFoundError(f"Booking '{booking_id}' not found")

    def delete_all(self, facility_type: str | None = None) -> int:
        booking_ids = [
            booking.id for booking in self._bookings.values()
            if facility_type is None or booking.facility_type == facility_type
        ]
        for booking_id in booking_ids:
            del self._bookings[booking_id]
        return len(booking_ids)


class InMemoryArchiveStore:

    def __init__(self):
        self._snapshots: dict[str, ArchiveSnapshot] = {}

    def list(self, facility_type: str | None = None) -> list[ArchiveSnapshot]:
        snapshots = [
            snapshot for snapshot in self._snapshots.values()
            if facility_type is None or snapshot.facility_type == facility_type
        ]
        return sorted(snapshots, key=lambda snapshot: snapshot.week_start, reverse=True)

    def get(self, archive_id: str) -> ArchiveSnapshot:
        snapshot = self._snapshots.get(archive_id)
        if snapshot is None:
            raise ArchiveNotFoundError(f"Archive '{archive_id}' not found")
        return snapshot.model_copy(deep=True)

    def save(
        self,
        week_start: date,
        week_end: date,
        facility_type: str,
        bookings: list[Booking]
    ) -> ArchiveSnapshot:
        existing = next(
            (
                snapshot for snapshot in self._snapshots.values()
                if snapshot.week_start == week_start and snapshot.facility_type == facility_type
            ),
            None
        )
        snapshot = ArchiveSnapshot(
            id=existing.id if existing else str(uuid.uuid4()),
            week_start=week_start,
            week_end=week_end,
            facility_type=facility_type,
            bookings=[booking.model_copy(deep=True) for booking in bookings],
            saved_at=datetime.now()
        )
        self._snapshots[snapshot.id] = snapshot
        return snapshot

    def delete(self, archive_id: str) -> None:
        if self._snapshots.pop(archive_id, None) is None:
            raise ArchiveNotFoundError(f"Archive '{archive_id}' not found")


class InMemoryContractorStore:

    def __init__(self, contractors: list[Contractor] | None = None):
        self._contractors: dict[str, Contractor] = {}
        for contractor in contractors or []:
            self.create(contractor)

    def list(self) -> list[Contractor]:
        return [
            contractor.model_copy()
            for contractor in sorted(self._contractors.values(), key=lambda contractor: contractor.name)
        ]

    def create(self, contractor: Contractor) -> Contractor:
        created = contractor.model_copy(update={"id": contractor.id or str(uuid.uuid4())})
        self._contractors[created.id] = created
        return created.model_copy()

    def update_color(self, contractor_id: str, color: str) -> Contractor:
        contractor = self._contractors.get(contractor_id)
        if contractor is None:
            raise ContractorNotFoundError(f"Contractor '{contractor_id}' not found")
        updated = Contractor.model_validate({**contractor.model_dump(), "color": color})
        self._contractors[contractor_id] = updated
        return updated.model_copy()

    def delete(self, contractor_id: str) -> None:
        if self._contractors.pop(contractor_id, None) is None:
            raise ContractorNotFoundError(f"Contractor '{contractor_id}' not found")
