"""Core utilities and shared functionality."""

from riskas.core.timezone import now_utc, to_utc, UTC_TZ
from riskas.core.exceptions import (
    AppError,
    ValidationError,
    NotFoundError,
    StoreFailure,
)

__all__ = [
    "now_utc",
    "to_utc",
    "UTC_TZ",
    "AppError",
    "ValidationError",
    "NotFoundError",
    "StoreFailure",
]
