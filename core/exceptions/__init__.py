"""
core.exceptions: re-exports for convenient imports.

Usage::

    from core.exceptions import ValidationError, NotFoundError
    from core.exceptions import intellibuy_exception_handler
"""

from .base import (
    IntelliBuyError,
    ServiceError,
    ValidationError,
    NotFoundError,
)

from .handlers import intellibuy_exception_handler

__all__ = [
    # Base
    "IntelliBuyError",
    # Service
    "ServiceError",
    # Client
    "ValidationError",
    "NotFoundError",
    # Handler
    "intellibuy_exception_handler",
]
