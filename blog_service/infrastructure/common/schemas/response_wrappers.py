"""Common response wrapper schemas for API responses."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ApiError(BaseModel):
    """Error details attached to failed responses."""

    status_code: int
    error_code: str
    message: str
    details: dict[str, object] = Field(default_factory=dict)


class ApiResponse(BaseModel, Generic[T]):
    """Envelope wrapping every API response."""

    success: bool
    message: str
    response: T | None = None
    error: ApiError | None = None


class HealthResponse(BaseModel):
    status: str
