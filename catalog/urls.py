"""
Catalog URLs

URL routing for the catalog app.
"""

from django.urls import path
from .views import ProductListView, ProductDetailView, RecommendationsView

urlpatterns = [
    path('products/', ProductListView.as_view(), name='product-list'),
    path('products/<str:product_id>/', ProductDetailView.as_view(), name='product-detail'),
    path('recommendations/', RecommendationsView.as_view(), name='recommendations'),
]
