from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class ErrorInfo(BaseModel):
    code: str = Field(
        ...,
        description="Service error code",
        json_schema_extra={"example": "INVALID_ARGS"},
    )
    group: str = Field(
        ...,
        description="Group the error code belongs to",
        json_schema_extra={"example": "BAD_REQUEST"},
    )
    message: str = Field(
        ...,
        json_schema_extra={"example": "Request validation failed"},
    )
    request_id: Optional[str] = Field(
        None,
        json_schema_extra={"example": "7b2b5a2c4f3a4e1fb7f4f44c9c1c2c9a"},
    )
    details: Optional[Dict[str, Any]] = Field(
        None,
        description="Optional structured metadata",
    )


class ErrorResponse(BaseModel):
    error: ErrorInfo
