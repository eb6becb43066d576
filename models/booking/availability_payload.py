from datetime import date
from pydantic import BaseModel


class AvailabilityPayload(BaseModel):
    date: date
    start_time: str
    end_time: str
    requested_count: int
    consecutive: bool = False


class AvailabilityResult(BaseModel):
    sections: list[int]  # Empty when the request cannot be satisfied
    free_sections: list[int]
