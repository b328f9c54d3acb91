# symphony/portal/api/errors.py
"""
Error responses for registry and authentication failures.

A failed listing is rendered as a page-level error, never as an empty or
partial list.
"""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from symphony.portal.core.exceptions import (
    AuthenticationError,
    InvalidRegistryResponse,
    PortalError,
    RegistryUnavailable,
)

logger = logging.getLogger(__name__)

_STATUS: list[tuple[type[PortalError], int, str]] = [
    (RegistryUnavailable, 503, RegistryUnavailable.kind),
    (InvalidRegistryResponse, 502, InvalidRegistryResponse.kind),
    (AuthenticationError, 401, "authentication_failed"),
]


def _error_response(status_code: int, kind: str, exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": kind, "detail": str(exc)},
    )


def register_exception_handlers(app: FastAPI) -> None:
    for exc_type, status_code, kind in _STATUS:

        async def handler(
            request: Request,
            exc: Exception,
            status_code: int = status_code,
            kind: str = kind,
        ) -> JSONResponse:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc)
            return _error_response(status_code, kind, exc)

        app.add_exception_handler(exc_type, handler)
