from datetime import date
import pytest
from sqlalchemy import text
from models.booking.booking import Booking
from stores.sql import create_database_engine, create_session_factory, init_db


@pytest.fixture
def make_booking():
    def _make_booking(
        sections: list[int],
        start_time: str = "09:00",
        end_time: str = "10:00",
        booking_date: date = date(2024, 6, 3),
        occupant_label: str = "OKS SKRA",
        booking_id: str | None = None,
        facility_type: str = "track-6",
        is_closed: bool = False,
        closed_reason: str | None = None,
        category: str | None = None,
    ) -> Booking:
        return Booking(
            id=booking_id,
            facility_type=facility_type,
            date=booking_date,
            start_time=start_time,
            end_time=end_time,
            sections=sections,
            occupant_label=occupant_label,
            category=category,
            is_closed=is_closed,
            closed_reason=closed_reason,
        )

    return _make_booking


@pytest.fixture
def session_factory():
    engine = create_database_engine("sqlite:///:memory:")
    init_db(engine)
    yield create_session_factory(engine)
    engine.dispose()


@pytest.fixture
def failing_session_factory(session_factory):
    """Session factory whose database aborts every booking insert."""
    with session_factory() as session:
        with session.begin():
            session.execute(text(
                "CREATE TRIGGER reject_booking_insert BEFORE INSERT ON bookings "
                "BEGIN SELECT RAISE(ABORT, 'disk is full'); END"
            ))
    return session_factory
