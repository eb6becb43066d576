from pydantic import BaseModel, ConfigDict


class TimeSlot(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: str  # HH:MM, inclusive
    end: str  # HH:MM, exclusive
