import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal
from dotenv import load_dotenv


# Load environment variables
load_dotenv()


@dataclass(frozen=True)
class Settings:
    database_url: str
    batch_allocation_mode: Literal["incremental", "snapshot"]
    max_conflict_messages: int


def _get_database_url() -> str:
    database_url = os.getenv("DATABASE_URL", "").strip() or "sqlite:///./reservations.db"

    # Heroku/Render style URLs are not accepted by SQLAlchemy 2
    if database_url.startswith("postgres://"):
        database_url = database_url.replace("postgres://", "postgresql://", 1)
    return database_url


def _get_batch_allocation_mode() -> Literal["incremental", "snapshot"]:
    mode = os.getenv("BATCH_ALLOCATION_MODE", "incremental").strip().lower()
    if mode not in ("incremental", "snapshot"):
        print(f"WARNING: Unknown BATCH_ALLOCATION_MODE '{mode}', using 'incremental'")
        return "incremental"
    return mode


def _get_max_conflict_messages() -> int:
    value = os.getenv("MAX_CONFLICT_MESSAGES", "3").strip()
    try:
        max_conflict_messages = int(value)
    except ValueError:
        print(f"WARNING: MAX_CONFLICT_MESSAGES '{value}' is not an integer, using 3")
        return 3

    if max_conflict_messages < 1:
        print(f"WARNING: MAX_CONFLICT_MESSAGES must be at least 1, got {max_conflict_messages}, using 3")
        return 3
    return max_conflict_messages


@lru_cache
def get_settings() -> Settings:
    return Settings(
        database_url=_get_database_url(),
        batch_allocation_mode=_get_batch_allocation_mode(),
        max_conflict_messages=_get_max_conflict_messages(),
    )
