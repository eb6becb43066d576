from pydantic import BaseModel, Field, field_validator
from utils.datetime import is_valid_time_string


class WeekdayPattern(BaseModel):
    weekday: int = Field(ge=0, le=6)  # 0 = Sunday ... 6 = Saturday
    start_time: str
    end_time: str
    requested_count: int = 0  # Ignored for closed batches

    @field_validator("start_time", "end_time")
    @classmethod
    def time_must_be_zero_padded(cls, value: str) -> str:
        if not is_valid_time_string(value):
            raise ValueError(f"'{value}' is not a zero-padded HH:MM time")
        return value
