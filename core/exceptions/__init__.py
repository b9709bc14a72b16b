"""
core.exceptions: re-exports for convenient imports.

Usage::

    from core.exceptions import ValidationError, NotFoundError, ConflictError
    from core.exceptions import quill_exception_handler
"""

from .base import (
    QuillError,
    ValidationError,
    NotFoundError,
    AuthenticationError,
    ConflictError,
)

from .handlers import quill_exception_handler

__all__ = [
    # Base
    "QuillError",
    # Client
    "ValidationError",
    "NotFoundError",
    "AuthenticationError",
    "ConflictError",
    # Handler
    "quill_exception_handler",
]
