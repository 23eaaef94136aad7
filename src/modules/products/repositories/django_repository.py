"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: methods return ``None``
instead of raising HTTP-level exceptions.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

import structlog
from django.db import transaction

from modules.categories.models import Category
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    @staticmethod
    def _queryset():
        return Product.objects.prefetch_related("categories")

    def get_by_id(self, id: Any) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent or non-numeric IDs.
        """
        try:
            return self._queryset().filter(id=id).first()
        except (ValueError, TypeError):
            return None

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Product]:
        """List products with optional Django ORM look-ups.

        Examples of valid filters::

            {"categories__id": 3}
            {"price__lte": "30.00"}
        """
        queryset = self._queryset()
        if filters:
            queryset = queryset.filter(**filters).distinct()
        return list(queryset)

    def search_by_name(self, name: str) -> List[Product]:
        return list(self._queryset().filter(name__icontains=name))

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product."""
        entity.save()
        logger.info("product.saved", product_id=entity.id, name=entity.name)
        return entity

    @transaction.atomic
    def set_categories(self, entity: Product, categories: Iterable[Category]) -> None:
        entity.categories.set(list(categories))

    @transaction.atomic
    def delete(self, id: Any) -> bool:
        """Delete a product and its category links.

        Returns ``False`` if no product exists with the given ID.
        """
        product = self.get_by_id(id)
        if not product:
            return False
        product.categories.clear()
        product.delete()
        logger.info("product.deleted", product_id=id)
        return True
