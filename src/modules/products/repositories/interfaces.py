"""Product repository interface.

Extends ``IRepository[Product]`` with category linking.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.categories.models import Category
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for products."""

    @abstractmethod
    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Product]:
        """List products with optional filters."""

    @abstractmethod
    def set_categories(self, entity: Product, categories: Iterable[Category]) -> None:
        """Replace the category links of a saved product."""
