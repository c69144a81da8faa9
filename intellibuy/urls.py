"""
IntelliBuy URL Configuration
"""

from django.urls import path, include
from django.http import JsonResponse

from core.views import HealthCheckView


def api_root(request):
    """API root: names the service and the search entry point."""
    return JsonResponse({
        "service": "IntelliBuy API",
        "version": "1.0.0",
        "endpoints": {
            "search": "/api/v1/search/?q=<query>",
            "parse": "/api/v1/search/parse/?q=<query>",
            "analyze": "/api/v1/search/analyze/?q=<query>",
            "products": "/api/v1/products/",
            "recommendations": "/api/v1/recommendations/?product_id=<id>",
            "health": "/api/v1/health/",
        },
        "example": "/api/v1/search/?q=red+dress+under+$50",
    })


urlpatterns = [
    path('', api_root, name='api_root'),

    # ── Versioned API (canonical) ─────────────────────────────────────
    path('api/v1/health/', HealthCheckView.as_view(), name='health'),
    path('api/v1/', include('catalog.urls')),
    path('api/v1/', include('search.urls')),

    # ── Legacy unversioned API (deprecated, kept for backward compat) ─
    path('api/health/', HealthCheckView.as_view(), name='health-legacy'),
    path('api/', include(('catalog.urls', 'catalog'), namespace='catalog-legacy')),
    path('api/', include(('search.urls', 'search'), namespace='search-legacy')),
]
