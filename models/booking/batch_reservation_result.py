from typing import Literal
from pydantic import BaseModel
from models.booking.booking import Booking


class BatchReservationResult(BaseModel):
    result: Literal["accepted", "rejected"]
    duration_ms: float
    bookings: list[Booking]
    conflicts: list[str]  # Only the first few messages are surfaced
    conflict_count: int
