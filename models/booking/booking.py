from datetime import date
from pydantic import BaseModel, field_validator, model_validator
from models.facility.facility_profile import FacilityType
from models.facility.facility_profiles import FACILITY_PROFILES
from utils.datetime import is_valid_time_string


class Booking(BaseModel):
    id: str | None = None  # Assigned by the booking store on creation
    facility_type: FacilityType
    date: date
    start_time: str
    end_time: str
    sections: list[int]
    occupant_label: str
    category: str | None = None
    is_closed: bool = False
    closed_reason: str | None = None

    @field_validator("start_time", "end_time")
    @classmethod
    def time_must_be_zero_padded(cls, value: str) -> str:
        if not is_valid_time_string(value):
            raise ValueError(f"'{value}' is not a zero-padded HH:MM time")
        return value

    @field_validator("sections")
    @classmethod
    def sections_must_not_be_empty(cls, sections: list[int]) -> list[int]:
        if not sections:
            raise ValueError("a booking must occupy at least one section")
        return sections

    @model_validator(mode="after")
    def check_booking_invariants(self) -> "Booking":
        valid_sections = FACILITY_PROFILES[self.facility_type].sections
        invalid_sections = [section for section in self.sections if section not in valid_sections]
        if invalid_sections:
            raise ValueError(f"sections {invalid_sections} do not exist on {self.facility_type}")
        if len(set(self.sections)) != len(self.sections):
            raise ValueError("a booking cannot hold the same section twice")

        # Lexicographic comparison is valid for zero-padded HH:MM strings
        if self.start_time >= self.end_time:
            raise ValueError("start_time must be before end_time")
        if not self.is_closed and not self.occupant_label.strip():
            raise ValueError("occupant_label is required for non-closed bookings")
        return self

    @property
    def display_label(self) -> str:
        if self.is_closed:
            return self.closed_reason or self.occupant_label
        return self.occupant_label

    def covers(self, time_str: str) -> bool:
        return self.start_time <= time_str < self.end_time
