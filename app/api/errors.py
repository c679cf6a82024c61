# app/api/errors.py
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.domain.errors import BookstoreError
from app.utils.logging import get_logger

logger = get_logger(__name__)


def _error_body(kind: str, message: str, details: dict | None = None) -> dict:
    body = {"success": False, "error": kind, "message": message}
    if details:
        body["details"] = details
    return body


async def bookstore_error_handler(request: Request, exc: BookstoreError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc!r}")
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.kind, exc.message, exc.details),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    first = errors[0] if errors else {}
    field = ".".join(str(p) for p in first.get("loc", ()) if p not in ("body", "query", "path"))
    message = f"{field}: {first.get('msg', 'invalid value')}" if field else first.get("msg", "Invalid request")
    return JSONResponse(
        status_code=400,
        content=_error_body("validation_error", message, {"fields": [".".join(map(str, e["loc"])) for e in errors]}),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    # bez szczegolow implementacji w odpowiedzi
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=500,
        content=_error_body("internal", "Server error"),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BookstoreError, bookstore_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
