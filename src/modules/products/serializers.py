"""Product DRF serializers for API output.

Business logic lives in the Service Layer, which receives
Pydantic DTOs from ``dtos.py``.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.categories.serializers import CategorySerializer
from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    categories = CategorySerializer(many=True, read_only=True)

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "description",
            "price",
            "image_url",
            "categories",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
