from functools import lru_cache
from sqlalchemy.orm import sessionmaker
from config import get_settings
from stores.booking_store import ArchiveStore, BookingStore, ContractorStore
from stores.sql import (
    SqlArchiveStore,
    SqlBookingStore,
    SqlContractorStore,
    create_database_engine,
    create_session_factory,
    init_db,
)


@lru_cache
def get_session_factory() -> sessionmaker:
    settings = get_settings()
    engine = create_database_engine(settings.database_url)

    # Create tables on first use
    init_db(engine)
    print(f"Database ready: {engine.url.render_as_string(hide_password=True)}")

    return create_session_factory(engine)


def get_booking_store() -> BookingStore:
    return SqlBookingStore(get_session_factory())


def get_archive_store() -> ArchiveStore:
    return SqlArchiveStore(get_session_factory())


def get_contractor_store() -> ContractorStore:
    return SqlContractorStore(get_session_factory())
