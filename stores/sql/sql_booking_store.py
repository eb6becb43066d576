from __future__ import annotations
import uuid
from datetime import date
from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker
from errors import BookingNotFoundError, PersistenceError
from models.booking.booking import Booking
from stores.sql.tables import BookingRow


def convert_row_to_booking(row: BookingRow) -> Booking:
    return Booking(
        id=row.id,
        facility_type=row.facility_type,
        date=row.date,
        start_time=row.start_time,
        end_time=row.end_time,
        sections=list(row.sections),
        occupant_label=row.occupant_label,
        category=row.category,
        is_closed=row.is_closed,
        closed_reason=row.closed_reason
    )


def convert_booking_to_row(booking: Booking) -> BookingRow:
    return BookingRow(
        id=booking.id or str(uuid.uuid4()),
        facility_type=booking.facility_type,
        date=booking.date,
        start_time=booking.start_time,
        end_time=booking.end_time,
        sections=list(booking.sections),
        occupant_label=booking.occupant_label,
        category=booking.category,
        is_closed=booking.is_closed,
        closed_reason=booking.closed_reason
    )


class SqlBookingStore:

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def list(self, facility_type: str | None = None, booking_date: date | None = None) -> list[Booking]:
        stmt = select(BookingRow).order_by(BookingRow.date, BookingRow.start_time)
        if facility_type:
            stmt = stmt.where(BookingRow.facility_type == facility_type)
        if booking_date:
            stmt = stmt.where(BookingRow.date == booking_date)

        try:
            with self._session_factory() as session:
                return [convert_row_to_booking(row) for row in session.scalars(stmt)]
        except SQLAlchemyError as e:
            print(f"ERROR: Failed to fetch bookings: {e}")
            raise PersistenceError(f"Failed to fetch bookings: {e}") from e

    def get(self, booking_id: str) -> Booking:
        try:
            with self._session_factory() as session:
                row = session.get(BookingRow, booking_id)
                if row is None:
                    raise BookingNotFoundError(f"Booking '{booking_id}' not found")
                return convert_row_to_booking(row)
        except SQLAlchemyError as e:
            print(f"ERROR: Failed to fetch booking {booking_id}: {e}")
            raise PersistenceError(f"Failed to fetch booking: {e}") from e

    def create(self, booking: Booking) -> Booking:
        return self.create_many([booking])[0]

    def create_many(self, bookings: list[Booking]) -> list[Booking]:
        rows = [convert_booking_to_row(booking) for booking in bookings]
        try:
            with self._session_factory() as session:
                with session.begin():
                    session.add_all(rows)
                return [convert_row_to_booking(row) for row in rows]
        except SQLAlchemyError as e:
            print(f"ERROR: Failed to create {len(rows)} bookings: {e}")
            raise PersistenceError(f"Failed to create bookings: {e}") from e

    def update(self, booking_id: str, **fields) -> Booking:
        try:
            with self._session_factory() as session:
                with session.begin():
                    row = session.get(BookingRow, booking_id)
                    if row is None:
                        raise BookingNotFoundError(f"Booking '{booking_id}' not found")

                    booking = convert_row_to_booking(row)
                    updated = Booking.model_validate({**booking.model_dump(), **fields, "id": booking_id})
                    for name, value in updated.model_dump(exclude={"id"}).items():
                        setattr(row, name, value)
                return updated
        except SQLAlchemyError as e:
            print(f"ERROR: Failed to update booking {booking_id}: {e}")
            raise PersistenceError(f"Failed to update booking: {e}") from e

    def update_sections(self, changes: dict[str, list[int]]) -> list[Booking]:
        try:
            with self._session_factory() as session:
                with session.begin():
                    updated_rows = []
                    for booking_id, sections in changes.items():
                        row = session.get(BookingRow, booking_id)
                        if row is None:
                            raise BookingNotFoundError(f"Booking '{booking_id}' not found")
                        row.sections = list(sections)
                        updated_rows.append(row)
                return [convert_row_to_booking(row) for row in updated_rows]
        except SQLAlchemyError as e:
            print(f"ERROR: Failed to update sections of {len(changes)} bookings: {e}")
            raise PersistenceError(f"Failed to update bookings: {e}") from e

    def delete(self, booking_id: str) -> None:
        try:
            with self._session_factory() as session:
                with session.begin():
                    row = session.get(BookingRow, booking_id)
                    if row is None:
                        raise BookingNotFoundError(f"Booking '{booking_id}' not found")
                    session.delete(row)
        except SQLAlchemyError as e:
            print(f"ERROR: Failed to delete booking {booking_id}: {e}")
            raise PersistenceError(f"Failed to delete booking: {e}") from e

    def delete_all(self, facility_type: str | None = None) -> int:
        stmt = delete(BookingRow)
        if facility_type:
            stmt = stmt.where(BookingRow.facility_type == facility_type)

        try:
            with self._session_factory() as session:
                with session.begin():
                    result = session.execute(stmt)
                return result.rowcount
        except SQLAlchemyError as e:
            print(f"ERROR: Failed to delete bookings: {e}")
            raise PersistenceError(f"Failed to delete bookings: {e}") from e
