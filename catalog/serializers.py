"""
Catalog Serializers

Serializes catalog products for API responses.
"""

from rest_framework import serializers


class ProductSerializer(serializers.Serializer):
    """Serializer for individual catalog products."""
    id = serializers.CharField()
    name = serializers.CharField()
    price = serializers.FloatField()
    image = serializers.CharField()
    category = serializers.CharField()
    description = serializers.CharField()


class ProductListSerializer(serializers.Serializer):
    """Serializer for product listings."""
    products = ProductSerializer(many=True)
    total = serializers.IntegerField()


class RecommendationsSerializer(serializers.Serializer):
    """Serializer for the recommendations response."""
    recommendations = ProductSerializer(many=True)
