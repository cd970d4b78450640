"""Error body shared by every failing endpoint."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    error: str
