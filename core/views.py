"""
Health check endpoint for deployment platforms.
"""

from django.http import JsonResponse
from django.views import View

from catalog.repositories import product_repository


class HealthCheckView(View):
    """
    Simple health check endpoint for load balancers and deployment platforms.
    Returns 200 OK if the service is running and the catalog is loaded.
    """

    def get(self, request):
        return JsonResponse({
            "status": "healthy",
            "service": "intellibuy-api",
            "version": "1.0.0",
            "catalog_size": product_repository.count(),
        })
