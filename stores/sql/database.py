from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from stores.sql.tables import Base


def create_database_engine(database_url: str) -> Engine:
    if database_url.startswith("sqlite"):
        # In-memory SQLite only lives as long as its single connection
        pool_options = {"poolclass": StaticPool} if ":memory:" in database_url else {}
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            **pool_options,
        )

    return create_engine(
        database_url,
        pool_pre_ping=True,
        pool_recycle=1800,
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        bind=engine,
        autoflush=False,
        expire_on_commit=False,
    )


def init_db(engine: Engine) -> None:
    """Bootstrap schema for environments without migrations."""
    Base.metadata.create_all(bind=engine)
