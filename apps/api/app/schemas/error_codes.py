from __future__ import annotations

from pydantic import BaseModel, Field

from rest_errors.error_codes import ErrorGroup, RestServiceErrorCode


class ErrorCodeOut(BaseModel):
    code: RestServiceErrorCode
    group: ErrorGroup
    http_status: int = Field(..., json_schema_extra={"example": 400})
    log_level: str = Field(..., json_schema_extra={"example": "DEBUG"})
    description: str
