from datetime import date, datetime
from pydantic import BaseModel
from models.booking.booking import Booking
from models.facility.facility_profile import FacilityType


class ArchiveSnapshot(BaseModel):
    id: str
    week_start: date
    week_end: date
    facility_type: FacilityType
    bookings: list[Booking]
    saved_at: datetime
