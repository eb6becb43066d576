from pydantic import BaseModel


class ContractorPayload(BaseModel):
    name: str
    category: str | None = None
    color: str


class ContractorColorPayload(BaseModel):
    color: str
