"""
Core package for the bed management backend.
"""

from .config import Config
from .exceptions import (
    ApiError,
    BadRequestError,
    UnauthorizedError,
    NotFoundError,
    ConflictError,
    ServiceError,
    title_for
)

__all__ = [
    "Config",
    "ApiError",
    "BadRequestError",
    "UnauthorizedError",
    "NotFoundError",
    "ConflictError",
    "ServiceError",
    "title_for"
]
