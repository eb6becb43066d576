from pydantic import BaseModel, field_validator
from utils.colors import normalize_hex_color


class Contractor(BaseModel):
    id: str | None = None  # Assigned by the contractor store on creation
    name: str  # Matches Booking.occupant_label
    category: str | None = None
    color: str  # #RRGGBB

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, name: str) -> str:
        name = name.strip()
        if not name:
            raise ValueError("contractor name is required")
        return name

    @field_validator("color")
    @classmethod
    def color_must_be_hex(cls, color: str) -> str:
        return normalize_hex_color(color)
