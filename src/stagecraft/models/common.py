"""Pydantic models for error responses."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

TRACE_ID_MIN_LENGTH = 8
TRACE_ID_MAX_LENGTH = 128


class ErrorDetail(BaseModel):
    """Error detail in API responses."""

    model_config = ConfigDict(extra="forbid")

    code: str
    message: str
    details: dict[str, Any] | list[Any] | str | None = None
    trace_id: str = Field(..., min_length=TRACE_ID_MIN_LENGTH, max_length=TRACE_ID_MAX_LENGTH)
    timestamp: datetime


class ErrorResponse(BaseModel):
    """Standard error response envelope."""

    model_config = ConfigDict(extra="forbid")

    schema_version: str = "1.0"
    error: ErrorDetail
