"""Global exception handlers.

    - TaskBoardError -> its own status, {"error": message}
    - RequestValidationError -> 400 with field-level details
    - IntegrityError -> classified (409 / 400 / 500)
    - SQLAlchemyError -> 500, detail logged only
    - routing misses -> 404 {"error": "Not found"}
    - anything else -> 500, never leaks internals
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from taskboard.core.errors import StoreFaultError, TaskBoardError, classify_integrity_error

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TaskBoardError, taskboard_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, generic_error_handler)


def _error_response(error: TaskBoardError) -> JSONResponse:
    return JSONResponse(status_code=error.http_status, content=error.to_response())


async def taskboard_error_handler(request: Request, exc: TaskBoardError):
    if exc.http_status >= 500:
        logger.error("%s on %s %s", exc.message, request.method, request.url.path)
    return _error_response(exc)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning("Validation error on %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "Validation failed",
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    )


async def integrity_error_handler(request: Request, exc: IntegrityError):
    error = classify_integrity_error(exc)
    logger.warning("Integrity error on %s %s: %s", request.method, request.url.path, exc.orig)
    if isinstance(error, StoreFaultError):
        logger.error("Unclassified integrity error", exc_info=exc)
    return _error_response(error)


async def store_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Database error on %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
    return _error_response(StoreFaultError())


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        message = "Not found"
    else:
        message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return JSONResponse(status_code=exc.status_code, content={"error": message}, headers=exc.headers)


async def generic_error_handler(request: Request, exc: Exception):
    logger.error("Unhandled exception on %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )
