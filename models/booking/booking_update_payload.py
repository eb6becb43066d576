from pydantic import BaseModel


class BookingUpdatePayload(BaseModel):
    """Descriptive fields only. Sections and times change through reorganization or rebooking."""
    occupant_label: str | None = None
    category: str | None = None
    closed_reason: str | None = None
