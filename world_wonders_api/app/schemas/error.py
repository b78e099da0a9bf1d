"""Error response body shared by all endpoints."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    message: str = Field(..., examples=["No wonder matching the given filters was found"])
