from datetime import date
from pydantic import BaseModel
from models.booking.weekday_pattern import WeekdayPattern


class BatchReservationPayload(BaseModel):
    date_from: date
    date_to: date
    weekday_patterns: list[WeekdayPattern]
    occupant_label: str = ""
    category: str | None = None
    is_closed: bool = False
    closed_reason: str | None = None
