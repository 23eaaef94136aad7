"""Django ORM implementation of the Customer repository.

Satisfies ``ICustomerRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: methods return ``None``
instead of raising HTTP-level exceptions; the Service Layer decides
how to translate a missing entity into an API response.

Owned entities are written and removed explicitly inside the same
transaction as the root; nothing relies on ORM cascades.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from django.core.exceptions import ValidationError
from django.core.paginator import Page, Paginator
from django.db import transaction

from modules.customers.models import Address, Customer, Phone
from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerDjangoRepository(ICustomerRepository):
    """Concrete Customer repository backed by Django ORM."""

    @staticmethod
    def _queryset():
        return Customer.objects.select_related("phone").prefetch_related("addresses")

    def get_by_id(self, id: Any) -> Optional[Customer]:
        """Retrieve a customer by primary key.

        Returns ``None`` for non-existent or invalid IDs (e.g. malformed UUID).
        """
        try:
            return self._queryset().filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Customer]:
        """List customers with optional Django ORM look-ups.

        Examples of valid filters::

            {"email__iendswith": "@gmail.com"}
            {"name__icontains": "isa"}
        """
        queryset = self._queryset()
        if filters:
            queryset = queryset.filter(**filters)
        return list(queryset)

    def list_page(self, page_number: int, page_size: int) -> Page:
        paginator = Paginator(self._queryset(), page_size)
        return paginator.page(page_number)

    def search_by_name(self, name: str) -> List[Customer]:
        """Customers whose name contains ``name``, ignoring case."""
        return list(self._queryset().filter(name__icontains=name))

    def get_by_email(self, email: str) -> Optional[Customer]:
        """Retrieve a customer by email address."""
        return self._queryset().filter(email=email).first()

    @transaction.atomic
    def save(self, entity: Customer) -> Customer:
        """Persist the aggregate: the root, then its staged phone and addresses.

        A staged address set replaces the stored one entirely.
        """
        is_new = entity._state.adding
        entity.save()

        phone = entity.pending_phone
        if phone is not None:
            phone.customer = entity
            phone.save()
            entity.phone = phone

        addresses = entity.pending_addresses
        if addresses is not None:
            removed, _ = Address.objects.filter(customer=entity).delete()
            for address in addresses:
                address.customer = entity
                address.save()
            getattr(entity, "_prefetched_objects_cache", {}).pop("addresses", None)
            logger.info(
                "customer.addresses_replaced",
                customer_id=str(entity.id),
                removed=removed,
                added=len(addresses),
            )

        entity.clear_pending()
        logger.info("customer.saved", customer_id=str(entity.id), is_new=is_new)
        return entity

    @transaction.atomic
    def delete(self, id: Any) -> bool:
        """Delete a customer together with its phone and addresses.

        Returns ``True`` if the customer was found and deleted,
        ``False`` if no customer exists with the given ID.
        """
        customer = self.get_by_id(id)
        if not customer:
            return False
        Phone.objects.filter(customer=customer).delete()
        Address.objects.filter(customer=customer).delete()
        customer.delete()
        logger.info("customer.deleted", customer_id=str(id))
        return True
