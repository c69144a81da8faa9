"""
API Deprecation Middleware
==========================

The storefront API was first served under ``/api/``; ``/api/v1/`` is the
canonical prefix now. Legacy requests still succeed but carry headers
telling clients where the same resource lives and when the old prefix goes.

Enable in MIDDLEWARE after all other middleware.
"""

from django.utils.deprecation import MiddlewareMixin

LEGACY_PREFIX = "/api/"
CURRENT_PREFIX = "/api/v1/"
SUNSET_DATE = "Tue, 01 Jun 2027 00:00:00 GMT"


def successor_path(path: str) -> str:
    """``/api/search/`` -> ``/api/v1/search/``."""
    return CURRENT_PREFIX + path[len(LEGACY_PREFIX):]


def is_legacy_api_path(path: str) -> bool:
    if not path.startswith(LEGACY_PREFIX):
        return False
    first_segment = path[len(LEGACY_PREFIX):].split("/", 1)[0]
    # /api/v1/, /api/v2/ ... are versioned
    return not (first_segment[:1] == "v" and first_segment[1:].isdigit())


class APIDeprecationMiddleware(MiddlewareMixin):
    """
    Headers added to unversioned ``/api/*`` responses:

        Deprecation: true
        Sunset: <SUNSET_DATE>
        Link: </api/v1/...>; rel="successor-version"
    """

    def process_response(self, request, response):
        if is_legacy_api_path(request.path):
            response["Deprecation"] = "true"
            response["Sunset"] = SUNSET_DATE
            response["Link"] = f'<{successor_path(request.path)}>; rel="successor-version"'
        return response
