"""Django ORM implementation of the Category repository.

Look-ups return ``None`` (Null Object pattern) rather than raising;
the Service Layer turns a miss into ``CategoryNotFound``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from django.db import transaction

from modules.categories.models import Category
from modules.categories.repositories.interfaces import ICategoryRepository

logger = structlog.get_logger(__name__)


class CategoryDjangoRepository(ICategoryRepository):
    """Concrete Category repository backed by Django ORM."""

    def get_by_id(self, id: Any) -> Optional[Category]:
        """Returns ``None`` for non-existent or non-numeric IDs."""
        try:
            return Category.objects.filter(id=id).first()
        except (ValueError, TypeError):
            return None

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Category]:
        queryset = Category.objects.all()
        if filters:
            queryset = queryset.filter(**filters)
        return list(queryset)

    def search_by_name(self, name: str) -> List[Category]:
        return list(Category.objects.filter(name__icontains=name))

    def get_many(self, ids: List[Any]) -> List[Category]:
        try:
            return list(Category.objects.filter(id__in=ids))
        except (ValueError, TypeError):
            return []

    @transaction.atomic
    def save(self, entity: Category) -> Category:
        """Persist (create or update) a category."""
        entity.save()
        logger.info("category.saved", category_id=entity.id, name=entity.name)
        return entity

    @transaction.atomic
    def delete(self, id: Any) -> bool:
        """Delete a category; its products stay, only the links go.

        Returns ``False`` if no category exists with the given ID.
        """
        category = self.get_by_id(id)
        if not category:
            return False
        category.products.clear()
        category.delete()
        logger.info("category.deleted", category_id=id)
        return True
