from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from argcheck.errors import ErrorKind


class ErrorResponse(BaseModel):
    error: str
    code: ErrorKind
    param_name: str
    details: dict[str, object] | None = None
    timestamp: datetime
