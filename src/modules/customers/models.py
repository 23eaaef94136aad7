"""Customer aggregate: Customer root with its owned Phone and Addresses.

Business rules implemented:
- RN-CLI-001: Email must be unique in the system (DB backstop).
- RN-CLI-002: Password is stored only in hashed form.
- RN-CLI-003: Phone and Address never exist without their owning Customer.

Ownership is explicit: the root stages its phone and address set in memory
(``attach_phone`` / ``replace_addresses``) and the repository writes the
staged entities in the same transaction as the root.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from django.core.exceptions import ObjectDoesNotExist
from django.db import models

from modules.core.models import BaseModel


class Customer(BaseModel):
    """Customer aggregate root.

    ``unique=True`` on ``email`` is the storage-level guard for RN-CLI-001;
    the service pre-checks it to report a clean conflict.
    """

    name = models.CharField(max_length=255)
    email = models.EmailField(max_length=254, unique=True)
    password = models.CharField(max_length=128)

    class Meta:
        db_table = "customers"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["-created_at"], name="customers_created_idx"),
        ]

    # ------------------------------------------------------------------
    # Owned entities
    # ------------------------------------------------------------------

    @property
    def current_phone(self) -> Optional[Phone]:
        """The owned phone, or ``None`` when the customer has none."""
        pending = getattr(self, "_pending_phone", None)
        if pending is not None:
            return pending
        if self._state.adding:
            return None
        try:
            return self.phone
        except ObjectDoesNotExist:
            return None

    @property
    def address_list(self) -> List[Address]:
        """The owned addresses, staged ones included."""
        pending = getattr(self, "_pending_addresses", None)
        if pending is not None:
            return list(pending)
        if self._state.adding:
            return []
        return list(self.addresses.all())

    @property
    def pending_phone(self) -> Optional[Phone]:
        return getattr(self, "_pending_phone", None)

    @property
    def pending_addresses(self) -> Optional[List[Address]]:
        return getattr(self, "_pending_addresses", None)

    def attach_phone(self, number: str) -> Phone:
        """Set the phone number, reusing the existing Phone when there is one."""
        phone = self.current_phone
        if phone is None:
            phone = Phone(customer=self)
        phone.number = number
        self._pending_phone = phone
        return phone

    def replace_addresses(self, addresses: Iterable[Address]) -> List[Address]:
        """Stage a full replacement of the address set (no merge)."""
        staged = []
        for address in addresses:
            address.customer = self
            staged.append(address)
        self._pending_addresses = staged
        return staged

    def clear_pending(self) -> None:
        """Forget staged entities once they have been written."""
        self._pending_phone = None
        self._pending_addresses = None

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"


class Phone(BaseModel):
    """Phone owned exclusively by one Customer."""

    customer = models.OneToOneField(
        Customer,
        on_delete=models.CASCADE,
        related_name="phone",
    )
    number = models.CharField(max_length=20)

    class Meta:
        db_table = "phones"

    def __str__(self) -> str:
        return self.number


class Address(BaseModel):
    """Address owned exclusively by one Customer."""

    customer = models.ForeignKey(
        Customer,
        on_delete=models.CASCADE,
        related_name="addresses",
    )
    number = models.CharField(max_length=20)
    street = models.CharField(max_length=255)
    neighborhood = models.CharField(max_length=255)

    class Meta:
        db_table = "addresses"
        ordering = ["created_at"]

    def __str__(self) -> str:
        return f"{self.street}, {self.number} - {self.neighborhood}"
