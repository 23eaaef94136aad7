"""Product service layer (Use Cases).

Orchestrates business logic for products, delegating persistence to the
injected ``IProductRepository`` and category look-ups to the injected
``ICategoryRepository``.

Business rules enforced here:
- RN-PRO-001: Price must be greater than zero (validated by DTO).
- RN-PRO-002: Every referenced category must exist.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional

import structlog
from django.db import transaction

from modules.categories.exceptions import CategoryNotFound
from modules.products.exceptions import ProductNotFound
from modules.products.models import Product

if TYPE_CHECKING:
    from modules.categories.models import Category
    from modules.categories.repositories.interfaces import ICategoryRepository
    from modules.products.dtos import ProductDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives its repositories via constructor injection (DIP).
    """

    def __init__(
        self,
        repository: IProductRepository,
        category_repository: ICategoryRepository,
    ) -> None:
        self._repo = repository
        self._categories = category_repository

    def _resolve_categories(self, ids: List[int]) -> List[Category]:
        if not ids:
            return []
        categories = self._categories.get_many(ids)
        missing = set(ids) - {category.id for category in categories}
        if missing:
            raise CategoryNotFound(
                f"Categories not found: {', '.join(str(i) for i in sorted(missing))}."
            )
        return categories

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_product(self, dto: ProductDTO) -> Product:
        """Create a product linked to the given categories.

        Raises:
            CategoryNotFound: if any category id is unknown (RN-PRO-002).
        """
        categories = self._resolve_categories(dto.category_ids)

        product = Product(
            name=dto.name,
            price=dto.price,
            description=dto.description,
            image_url=dto.image_url,
        )
        product = self._repo.save(product)
        self._repo.set_categories(product, categories)
        logger.info("product.created", product_id=product.id)
        return product

    @transaction.atomic
    def replace_product(self, id: Any, dto: ProductDTO) -> Product:
        """Overwrite every field and the category set of a product.

        Raises:
            ProductNotFound: if the product does not exist.
            CategoryNotFound: if any category id is unknown.
        """
        product = self.get_product(id)
        categories = self._resolve_categories(dto.category_ids)

        product.name = dto.name
        product.price = dto.price
        product.description = dto.description
        product.image_url = dto.image_url
        product = self._repo.save(product)
        self._repo.set_categories(product, categories)
        logger.info("product.replaced", product_id=product.id)
        return product

    @transaction.atomic
    def delete_product(self, id: Any) -> None:
        """Raises:
            ProductNotFound: if the product does not exist.
        """
        self.get_product(id)
        self._repo.delete(id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self, filters: Optional[Dict[str, Any]] = None) -> List[Product]:
        """Return a list of products, optionally filtered."""
        return self._repo.list(filters)

    def get_product(self, id: Any) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if not product:
            raise ProductNotFound(f"Product {id} not found.")
        return product

    def find_products_by_name(self, name: str) -> List[Product]:
        """Raises:
            ProductNotFound: when no product name contains ``name``.
        """
        products = self._repo.search_by_name(name)
        if not products:
            raise ProductNotFound("No products found with this name.")
        return products
