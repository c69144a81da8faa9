"""
IntelliBuy Exception Hierarchy
==============================

Every error the API reports on purpose is an ``IntelliBuyError``. Subclasses
only pick an HTTP status, a machine-readable ``error_code`` and a default
message; keyword arguments become the ``detail`` object of the response.

Usage::

    from core.exceptions import ValidationError, NotFoundError

    raise ValidationError("Query must be at least 2 characters long", field="q")
    raise NotFoundError("Product not found", resource="product", id="99")
"""

from rest_framework import status


class IntelliBuyError(Exception):
    """Base exception for all IntelliBuy application errors."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code = "server_error"
    default_message = "An unexpected error occurred"

    def __init__(self, message=None, **details):
        self.message = message or self.default_message
        # None-valued keywords are left out of the response body
        self.details = {key: value for key, value in details.items() if value is not None}
        super().__init__(self.message)

    def to_dict(self):
        body = {"error": self.error_code, "message": self.message}
        if self.details:
            body["detail"] = self.details
        return body


class ServiceError(IntelliBuyError):
    """An upstream API (e.g. OpenAI) failed or answered with garbage. Pass ``vendor=``."""

    status_code = status.HTTP_502_BAD_GATEWAY
    error_code = "service_error"
    default_message = "External service unavailable"


class ValidationError(IntelliBuyError):
    """Unusable client input. Pass ``field=`` to name the parameter."""

    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "validation_error"
    default_message = "Invalid request data"


class NotFoundError(IntelliBuyError):
    """Unknown catalog record. Pass ``resource=`` and ``id=``."""

    status_code = status.HTTP_404_NOT_FOUND
    error_code = "not_found"
    default_message = "Resource not found"
