"""Common infrastructure schemas."""

from blog_service.infrastructure.common.schemas.response_wrappers import (
    ApiError,
    ApiResponse,
    HealthResponse,
)

__all__ = [
    "ApiError",
    "ApiResponse",
    "HealthResponse",
]
