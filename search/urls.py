"""
Search URLs

URL routing for the search app.
"""

from django.urls import path
from .views import SearchView, ParseQueryView, AnalyzeQueryView

urlpatterns = [
    path('search/', SearchView.as_view(), name='search'),
    path('search/parse/', ParseQueryView.as_view(), name='search-parse'),
    path('search/analyze/', AnalyzeQueryView.as_view(), name='search-analyze'),
]
