from datetime import date
from pydantic import BaseModel, field_validator
from utils.colors import normalize_hex_color


class ExportPayload(BaseModel):
    week_start: date
    anonymized: bool = False
    color_map: dict[str, str] = {}  # Occupant label -> #RRGGBB

    @field_validator("color_map")
    @classmethod
    def colors_must_be_hex(cls, color_map: dict[str, str]) -> dict[str, str]:
        return {label: normalize_hex_color(color) for label, color in color_map.items()}
