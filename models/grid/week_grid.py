from datetime import date
from typing import Literal
from pydantic import BaseModel
from models.facility.time_slot import TimeSlot


class MergedBlock(BaseModel):
    booking_id: str | None
    label: str
    occupant_label: str
    category: str | None = None
    is_closed: bool = False
    day_index: int
    slot_index: int
    section_index: int
    row_span: int
    col_span: int


class GridCell(BaseModel):
    state: Literal["empty", "block", "covered"]
    block: MergedBlock | None = None


class WeekGrid(BaseModel):
    week_start: date
    days: list[date]
    sections: list[int]
    time_slots: list[TimeSlot]
    cells: list[list[GridCell]]  # [slot_index][day_index * len(sections) + section_index]
    blocks: list[MergedBlock]
