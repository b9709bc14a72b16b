"""
Quill Exception Hierarchy
=========================

Domain-specific exceptions for structured error handling across the platform.
Business-rule violations are raised as one of these types and rendered by
``core.exceptions.handlers.quill_exception_handler``.

Usage::

    from core.exceptions import ConflictError, NotFoundError

    # In a service:
    raise ConflictError("Post already exists", resource="post", title=title)

    # Anywhere a lookup misses:
    raise NotFoundError(f"Post {post_id} does not exist", resource="post", id=post_id)
"""

from rest_framework import status


# =============================================================================
# Base Exception
# =============================================================================

class QuillError(Exception):
    """Base exception for all Quill application errors."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code = "server_error"

    def __init__(self, message="An unexpected error occurred", **kwargs):
        self.message = message
        self.details = kwargs
        super().__init__(message)

    def to_dict(self):
        result = {
            "error": self.error_code,
            "message": self.message,
        }
        if self.details:
            result["detail"] = self.details
        return result


# =============================================================================
# Client Errors
# =============================================================================

class ValidationError(QuillError):
    """Invalid input from the client."""

    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "validation_error"

    def __init__(self, message="Invalid request data", field=None, **kwargs):
        if field:
            kwargs["field"] = field
        super().__init__(message, **kwargs)


class NotFoundError(QuillError):
    """Requested resource does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    error_code = "not_found"

    def __init__(self, message="Resource not found", resource=None, **kwargs):
        if resource:
            kwargs["resource"] = resource
        super().__init__(message, **kwargs)


class AuthenticationError(QuillError):
    """Authentication failed."""

    status_code = status.HTTP_401_UNAUTHORIZED
    error_code = "authentication_error"

    def __init__(self, message="Authentication required", **kwargs):
        super().__init__(message, **kwargs)


class ConflictError(QuillError):
    """Resource conflict (duplicate title, etc.)."""

    status_code = status.HTTP_409_CONFLICT
    error_code = "conflict"

    def __init__(self, message="Resource conflict", resource=None, **kwargs):
        if resource:
            kwargs["resource"] = resource
        super().__init__(message, **kwargs)
