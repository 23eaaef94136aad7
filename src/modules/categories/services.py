"""Category service layer (Use Cases).

Plain CRUD over menu categories, delegating persistence to the
injected ``ICategoryRepository``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional

import structlog
from django.db import transaction

from modules.categories.exceptions import CategoryNotFound
from modules.categories.models import Category

if TYPE_CHECKING:
    from modules.categories.dtos import CategoryDTO
    from modules.categories.repositories.interfaces import ICategoryRepository

logger = structlog.get_logger(__name__)


class CategoryService:
    """Application service for Category use-cases."""

    def __init__(self, repository: ICategoryRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_category(self, dto: CategoryDTO) -> Category:
        category = self._repo.save(
            Category(name=dto.name, description=dto.description)
        )
        logger.info("category.created", category_id=category.id)
        return category

    @transaction.atomic
    def replace_category(self, id: Any, dto: CategoryDTO) -> Category:
        """Overwrite name and description.

        Raises:
            CategoryNotFound: if the category does not exist.
        """
        category = self.get_category(id)
        category.name = dto.name
        category.description = dto.description
        category = self._repo.save(category)
        logger.info("category.replaced", category_id=category.id)
        return category

    @transaction.atomic
    def delete_category(self, id: Any) -> None:
        """Raises:
            CategoryNotFound: if the category does not exist.
        """
        self.get_category(id)
        self._repo.delete(id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_categories(
        self, filters: Optional[Dict[str, Any]] = None
    ) -> List[Category]:
        return self._repo.list(filters)

    def get_category(self, id: Any) -> Category:
        """Raises:
            CategoryNotFound: if the category does not exist.
        """
        category = self._repo.get_by_id(id)
        if not category:
            raise CategoryNotFound(f"Category {id} not found.")
        return category

    def find_categories_by_name(self, name: str) -> List[Category]:
        """Raises:
            CategoryNotFound: when no category name contains ``name``.
        """
        categories = self._repo.search_by_name(name)
        if not categories:
            raise CategoryNotFound("No categories found with this name.")
        return categories
