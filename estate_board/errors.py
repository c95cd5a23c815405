"""
Ошибки приложения и их преобразование в JSON-ответы.

Каждая ошибка отдаётся клиенту в виде {"error": <код>, "detail": <сообщение>}.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class AppError(Exception):
    status_code = 500
    code = "internal_error"
    message = "Internal server error"

    def __init__(self, message=None):
        super().__init__(message or self.message)
        self.message = message or self.message


class ValidationError(AppError):
    status_code = 400
    code = "validation_error"
    message = "Invalid request"


class Unauthorized(AppError):
    status_code = 401
    code = "unauthorized"
    message = "Admin authorization required"


class NotFound(AppError):
    status_code = 404
    code = "not_found"
    message = "Not found"


class PayloadTooLarge(AppError):
    status_code = 413
    code = "payload_too_large"
    message = "Upload too large"


class StorageError(AppError):
    status_code = 500
    code = "storage_error"
    message = "Storage failure"


class UpstreamError(AppError):
    status_code = 502
    code = "upstream_error"
    message = "Upstream request failed"


class FeedDisabled(AppError):
    status_code = 503
    code = "feed_disabled"
    message = "Feed is not configured"


def error_response(status_code: int, code: str, detail) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": code, "detail": detail})


async def app_error_handler(request: Request, exc: AppError):
    return error_response(exc.status_code, exc.code, exc.message)


def format_validation_errors(errors) -> str:
    """Склеивает ошибки pydantic в одну строку вида "price: Input should be ..."."""
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in errors
    )


async def request_validation_handler(request: Request, exc: RequestValidationError):
    return error_response(400, ValidationError.code, format_validation_errors(exc.errors()))


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return error_response(exc.status_code, "http_error", exc.detail)


async def storage_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Storage error on {request.method} {request.url.path}", exc_info=exc)
    return error_response(500, StorageError.code, StorageError.message)


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return error_response(500, AppError.code, AppError.message)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(SQLAlchemyError, storage_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
