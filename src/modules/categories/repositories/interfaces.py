"""Category repository interface."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.categories.models import Category


class ICategoryRepository(IRepository["Category"]):
    """Repository contract for categories."""

    @abstractmethod
    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Category]:
        """List categories with optional filters."""

    @abstractmethod
    def get_many(self, ids: List[Any]) -> List[Category]:
        """Retrieve the categories matching ``ids``; unknown ids are skipped."""
