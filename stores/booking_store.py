from __future__ import annotations
from datetime import date
from typing import Protocol
from models.archive.archive_snapshot import ArchiveSnapshot
from models.booking.booking import Booking
from models.contractor.contractor import Contractor


class BookingStore(Protocol):
    """Persistence boundary for bookings. Implementations assign booking ids."""

    def list(self, facility_type: str | None = None, booking_date: date | None = None) -> list[Booking]:
        ...

    def get(self, booking_id: str) -> Booking:
        ...

    def create(self, booking: Booking) -> Booking:
        ...

    def create_many(self, bookings: list[Booking]) -> list[Booking]:
        """Create all bookings together or none of them."""
        ...

    def update(self, booking_id: str, **fields) -> Booking:
        """Change fields of one booking, keeping every Booking invariant."""
        ...

    def update_sections(self, changes: dict[str, list[int]]) -> list[Booking]:
        """Rewrite the sections of several bookings together or not at all."""
        ...

    def delete(self, booking_id: str) -> None:
        ...

    def delete_all(self, facility_type: str | None = None) -> int:
        ...


class ArchiveStore(Protocol):
    """Persistence boundary for weekly archive snapshots."""

    def list(self, facility_type: str | None = None) -> list[ArchiveSnapshot]:
        ...

    def get(self, archive_id: str) -> ArchiveSnapshot:
        ...

    def save(
        self,
        week_start: date,
        week_end: date,
        facility_type: str,
        bookings: list[Booking]
    ) -> ArchiveSnapshot:
        """Upsert the snapshot of (week_start, facility_type)."""
        ...

    def delete(self, archive_id: str) -> None:
        ...


class ContractorStore(Protocol):
    """Persistence boundary for the contractor colour registry."""

    def list(self) -> list[Contractor]:
        """All contractors ordered by name."""
        ...

    def create(self, contractor: Contractor) -> Contractor:
        ...

    def update_color(self, contractor_id: str, color: str) -> Contractor:
        ...

    def delete(self, contractor_id: str) -> None:
        ...
