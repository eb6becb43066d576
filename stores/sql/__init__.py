from stores.sql.database import create_database_engine, create_session_factory, init_db
from stores.sql.sql_archive_store import SqlArchiveStore
from stores.sql.sql_booking_store import SqlBookingStore
from stores.sql.sql_contractor_store import SqlContractorStore

__all__ = [
    "SqlArchiveStore",
    "SqlBookingStore",
    "SqlContractorStore",
    "create_database_engine",
    "create_session_factory",
    "init_db",
]
