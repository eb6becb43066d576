from typing import Literal
from pydantic import BaseModel, ConfigDict, field_validator


FacilityType = Literal["track-6", "track-8", "rugby"]


class FacilityProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: FacilityType
    name: str
    sections: tuple[int, ...]
    section_label: str  # "Track" or "Half"
    section_label_plural: str

    @field_validator("sections")
    @classmethod
    def sections_must_be_contiguous(cls, sections: tuple[int, ...]) -> tuple[int, ...]:
        if list(sections) != list(range(1, len(sections) + 1)):
            raise ValueError("sections must be contiguous integers starting at 1")
        return sections

    @property
    def total_sections(self) -> int:
        return len(self.sections)
