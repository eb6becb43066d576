from pydantic import BaseModel


class ReorganizationPlan(BaseModel):
    changes: dict[str, list[int]]  # booking id -> new sections
    warnings: list[str]


class ReorganizationResult(BaseModel):
    updated_count: int
    duration_ms: float
    warnings: list[str]
