"""Translate domain errors into API error responses."""

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException

from blog_service.domain.common.exceptions import (
    DomainError,
    InvalidReferenceError,
    NotFoundError,
    ValidationError,
)
from blog_service.infrastructure.common.schemas.response_wrappers import ApiError, ApiResponse

logger = structlog.get_logger(__name__)

# Most specific first
_DOMAIN_ERROR_STATUS: list[tuple[type[DomainError], int, str]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND, "NOT_FOUND"),
    (InvalidReferenceError, status.HTTP_400_BAD_REQUEST, "INVALID_REFERENCE"),
    (ValidationError, status.HTTP_400_BAD_REQUEST, "VALIDATION_ERROR"),
]


def _error_response(
    status_code: int,
    error_code: str,
    message: str,
    details: dict[str, object] | None = None,
) -> JSONResponse:
    body = ApiResponse[None](
        success=False,
        message=message,
        error=ApiError(
            status_code=status_code,
            error_code=error_code,
            message=message,
            details=details or {},
        ),
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def status_for_domain_error(exc: DomainError) -> tuple[int, str]:
    """Get the HTTP status and error code for a domain error."""
    for error_type, status_code, error_code in _DOMAIN_ERROR_STATUS:
        if isinstance(exc, error_type):
            return status_code, error_code
    return status.HTTP_400_BAD_REQUEST, "DOMAIN_ERROR"


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    status_code, error_code = status_for_domain_error(exc)
    logger.info(
        "domain_error",
        path=request.url.path,
        error_code=error_code,
        error=exc.message,
    )
    return _error_response(status_code, error_code, exc.message, exc.details)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.info("request_validation_failed", path=request.url.path, errors=len(exc.errors()))
    return _error_response(
        422,
        "REQUEST_VALIDATION_ERROR",
        "Request validation failed",
        {"errors": [str(error.get("msg")) for error in exc.errors()]},
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return _error_response(exc.status_code, "HTTP_ERROR", str(exc.detail))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("unhandled_error", path=request.url.path, exc_info=exc)
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_ERROR",
        "An unexpected error occurred. Please try again later.",
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register the error handlers on the application."""
    app.add_exception_handler(DomainError, domain_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(
        RequestValidationError,
        request_validation_error_handler,  # type: ignore[arg-type]
    )
    app.add_exception_handler(
        StarletteHTTPException,
        http_exception_handler,  # type: ignore[arg-type]
    )
    app.add_exception_handler(Exception, unhandled_error_handler)
