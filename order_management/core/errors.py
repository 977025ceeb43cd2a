"""
예외 → HTTP 응답 변환 핸들러
"""
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import structlog

from order_management.core.config import get_settings
from order_management.core.exceptions import (
    OrderManagementError,
    PersistenceError,
    TransitionRejected,
)
from order_management.schemas.common import ErrorResponse

logger = structlog.get_logger()


def _error_response(status_code: int, message: str, details=None) -> JSONResponse:
    body = ErrorResponse(message=message, details=details)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


def _is_debug(request: Request) -> bool:
    override = request.app.dependency_overrides.get(get_settings, get_settings)
    return override().DEBUG


async def order_management_error_handler(request: Request, exc: OrderManagementError) -> JSONResponse:
    if isinstance(exc, TransitionRejected):
        logger.warning("Status transition rejected", path=request.url.path,
                       current_status=exc.current_status,
                       requested_status=exc.requested_status,
                       reason=exc.reason)
    elif exc.status_code < 500:
        logger.warning("Request failed", path=request.url.path,
                       status_code=exc.status_code, message=exc.message)
    return _error_response(exc.status_code, exc.message)


async def persistence_error_handler(request: Request, exc: PersistenceError) -> JSONResponse:
    logger.error("Persistence failure", path=request.url.path, error=exc.message,
                 cause=repr(exc.__cause__))
    details = None
    if _is_debug(request):
        details = str(exc.__cause__ or exc)
    return _error_response(500, exc.message, details)


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("Invalid request", path=request.url.path)
    details = jsonable_encoder(exc.errors()) if _is_debug(request) else None
    return _error_response(400, "Invalid request body or parameters", details)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error", path=request.url.path, error=str(exc), exc_info=True)
    details = repr(exc) if _is_debug(request) else None
    return _error_response(500, "An unexpected error occurred", details)


def register_exception_handlers(app: FastAPI) -> None:
    """애플리케이션에 예외 핸들러 등록"""
    app.add_exception_handler(PersistenceError, persistence_error_handler)
    app.add_exception_handler(OrderManagementError, order_management_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
