"""Customer repository interface.

Extends ``IRepository[Customer]`` with the look-ups required by
RN-CLI-001 (unique email) and with page-wise listing.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from django.core.paginator import Page

    from modules.customers.models import Customer


class ICustomerRepository(IRepository["Customer"]):
    """Repository contract for the Customer aggregate.

    ``save`` and ``delete`` act on the whole aggregate: the customer row
    plus its owned phone and addresses, in one transaction.
    """

    @abstractmethod
    def list_page(self, page_number: int, page_size: int) -> Page:
        """Return one page of customers.

        Raises ``django.core.paginator.InvalidPage`` for out-of-range or
        malformed page numbers.
        """

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[Customer]:
        """Retrieve a customer by email address."""
