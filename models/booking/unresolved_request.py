from datetime import date
from pydantic import BaseModel
from models.facility.facility_profile import FacilityType


class UnresolvedRequest(BaseModel):
    """A candidate booking whose sections have not been allocated yet."""
    facility_type: FacilityType
    date: date
    start_time: str
    end_time: str
    requested_count: int
    occupant_label: str
    category: str | None = None
    is_closed: bool = False
    closed_reason: str | None = None
