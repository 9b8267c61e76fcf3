from typing import Literal

from pydantic import BaseModel

SummaryLength = Literal["short", "medium", "long"]


class SummarizeRequest(BaseModel):
    # Emptiness and size are checked by the route so they surface as 400s.
    text: str | None = None
    length: SummaryLength = "medium"


class SummarizeResponse(BaseModel):
    summary: str


class ErrorResponse(BaseModel):
    error: str
    message: str | None = None


class HealthResponse(BaseModel):
    status: str
