from .deprecation import APIDeprecationMiddleware
from .request_logging import RequestLoggingMiddleware

__all__ = [
    "APIDeprecationMiddleware",
    "RequestLoggingMiddleware",
]
