"""
API error type and the handlers that render every failure as
`{"error": ..., "details": ...}`.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator
from uuid import UUID

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core import db

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """
    A failure with a caller-chosen HTTP status.
    """

    def __init__(self, status_code: int, error: str, details: Any = None) -> None:
        super().__init__(error)
        self.status_code = status_code
        self.error = error
        self.details = details


def error_body(error: str, details: Any = None) -> dict[str, Any]:
    return {"error": error, "details": details}


@contextmanager
def database_errors(error: str, *, status_code: int = 500, event: str = "db_error") -> Iterator[None]:
    """
    Translate a database failure inside the block into an ApiError.
    """
    try:
        yield
    except db.DB_ERRORS as exc:
        logger.error("%s error=%s", event, exc)
        raise ApiError(status_code, error, str(exc)) from exc


async def _api_error_handler(_: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=jsonable_encoder(error_body(exc.error, exc.details)),
    )


async def _http_exception_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def _validation_error_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content=jsonable_encoder(error_body("Invalid request", exc.errors())),
    )


def parse_id(raw: str, not_found: str) -> UUID:
    """
    Path id as a UUID. An id that cannot exist is reported as missing.
    """
    try:
        return UUID(str(raw).strip())
    except ValueError as exc:
        raise ApiError(404, not_found) from exc


def install_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, _api_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
