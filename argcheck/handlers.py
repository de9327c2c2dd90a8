"""FastAPI integration: turn a guard failure escaping a route into HTTP 422.

Guards raise; this module is where a web service decides how a rejected
argument looks on the wire. The guard functions themselves stay log-free.
"""
from __future__ import annotations

import math
from collections.abc import Awaitable, Callable, Mapping
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from argcheck.config import Settings
from argcheck.errors import GuardError
from argcheck.logging import get_logger
from argcheck.models import ErrorResponse
from argcheck.types import LoggerProtocol

Handler = Callable[[Request, Exception], Awaitable[JSONResponse]]

_SCALARS = (str, int, float, bool)


def _json_value(value: object) -> object:
    if isinstance(value, float) and not math.isfinite(value):
        return repr(value)
    if value is None or isinstance(value, _SCALARS):
        return value
    return repr(value)


def _json_safe(details: Mapping[str, object]) -> dict[str, object]:
    return {key: _json_value(value) for key, value in details.items()}


def build_error_response(exc: GuardError, *, expose_details: bool) -> ErrorResponse:
    return ErrorResponse(
        error=exc.message,
        code=exc.kind,
        param_name=exc.param_name,
        details=_json_safe(exc.details) if expose_details else None,
        timestamp=datetime.now(timezone.utc),
    )


def make_guard_exception_handler(
    settings: Settings | None = None,
    logger: LoggerProtocol | None = None,
) -> Handler:
    resolved = settings or Settings.from_env()
    log: LoggerProtocol = logger or get_logger(__name__)

    async def guard_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        if not isinstance(exc, GuardError):
            raise exc
        log.warning(
            "Rejected argument %s on %s",
            exc.param_name,
            request.url.path,
            extra={"param_name": exc.param_name, "error_kind": exc.kind},
        )
        payload = build_error_response(exc, expose_details=resolved.expose_details)
        return JSONResponse(status_code=422, content=payload.model_dump(mode="json"))

    return guard_exception_handler


def install(
    app: FastAPI,
    *,
    settings: Settings | None = None,
    logger: LoggerProtocol | None = None,
) -> FastAPI:
    """Register the guard handler on ``app`` and return it for chaining."""
    app.add_exception_handler(GuardError, make_guard_exception_handler(settings, logger))
    return app
