from __future__ import annotations
from datetime import date, datetime
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker
from errors import ArchiveNotFoundError, PersistenceError
from models.archive.archive_snapshot import ArchiveSnapshot
from models.booking.booking import Booking
from stores.sql.tables import ArchiveRow


def convert_row_to_snapshot(row: ArchiveRow) -> ArchiveSnapshot:
    return ArchiveSnapshot(
        id=row.id,
        week_start=row.week_start,
        week_end=row.week_end,
        facility_type=row.facility_type,
        bookings=[Booking.model_validate(item) for item in row.archived_data],
        saved_at=row.saved_at
    )


class SqlArchiveStore:

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def list(self, facility_type: str | None = None) -> list[ArchiveSnapshot]:
        stmt = select(ArchiveRow).order_by(ArchiveRow.week_start.desc())
        if facility_type:
            stmt = stmt.where(ArchiveRow.facility_type == facility_type)

        try:
            with self._session_factory() as session:
                return [convert_row_to_snapshot(row) for row in session.scalars(stmt)]
        except SQLAlchemyError as e:
            print(f"ERROR: Failed to fetch weekly archives: {e}")
            raise PersistenceError(f"Failed to fetch weekly archives: {e}") from e

    def get(self, archive_id: str) -> ArchiveSnapshot:
        try:
            with self._session_factory() as session:
                row = session.get(ArchiveRow, archive_id)
                if row is None:
                    raise ArchiveNotFoundError(f"Archive '{archive_id}' not found")
                return convert_row_to_snapshot(row)
        except SQLAlchemyError as e:
            print(f"ERROR: Failed to fetch weekly archive {archive_id}: {e}")
            raise PersistenceError(f"Failed to fetch weekly archive: {e}") from e

    def save(
        self,
        week_start: date,
        week_end: date,
        facility_type: str,
        bookings: list[Booking]
    ) -> ArchiveSnapshot:
        archived_data = [booking.model_dump(mode="json") for booking in bookings]

        try:
            with self._session_factory() as session:
                with session.begin():
                    row = session.scalar(
                        select(ArchiveRow).where(
                            ArchiveRow.week_start == week_start,
                            ArchiveRow.facility_type == facility_type
                        )
                    )
                    if row is None:
                        row = ArchiveRow(week_start=week_start, facility_type=facility_type)
                        session.add(row)

                    row.week_end = week_end
                    row.archived_data = archived_data
                    row.saved_at = datetime.now()
                    session.flush()
                return convert_row_to_snapshot(row)
        except SQLAlchemyError as e:
            print(f"ERROR: Failed to save weekly archive: {e}")
            raise PersistenceError(f"Failed to save weekly archive: {e}") from e

    def delete(self, archive_id: str) -> None:
        try:
            with self._session_factory() as session:
                with session.begin():
                    row = session.get(ArchiveRow, archive_id)
                    if row is None:
                        raise ArchiveNotFoundError(f"Archive '{archive_id}' not found")
                    session.delete(row)
        except SQLAlchemyError as e:
            print(f"ERROR: Failed to delete weekly archive {archive_id}: {e}")
            raise PersistenceError(f"Failed to delete weekly archive: {e}") from e
