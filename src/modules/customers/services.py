"""Customer service layer (Use Cases).

Orchestrates business logic for the Customer aggregate (customer, owned
phone and owned addresses), delegating persistence to the injected
``ICustomerRepository`` and password hashing to the injected encoder.

Business rules enforced here:
- RN-CLI-001: Email must be unique on creation.
- RN-CLI-002: Passwords are hashed before they reach the repository.
- RN-CLI-003: Addresses are fully replaced on update, never merged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Dict, Iterable, List, Optional

import structlog
from django.contrib.auth.hashers import make_password
from django.db import IntegrityError, transaction

from modules.customers.exceptions import CustomerAlreadyExists, CustomerNotFound
from modules.customers.models import Address, Customer

if TYPE_CHECKING:
    from django.core.paginator import Page

    from modules.customers.dtos import (
        AddressDTO,
        CreateCustomerDTO,
        ReplaceCustomerDTO,
    )
    from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)

PasswordEncoder = Callable[[str], str]


def _build_addresses(dtos: Optional[Iterable[AddressDTO]]) -> List[Address]:
    return [
        Address(number=dto.number, street=dto.street, neighborhood=dto.neighborhood)
        for dto in dtos or ()
    ]


class CustomerService:
    """Application service for Customer use-cases.

    Receives an ``ICustomerRepository`` and a password encoder via
    constructor injection (DIP).
    """

    def __init__(
        self,
        repository: ICustomerRepository,
        password_encoder: PasswordEncoder = make_password,
    ) -> None:
        self._repo = repository
        self._encode_password = password_encoder

    def _email_taken_by_other(self, email: str, customer_id: Any) -> bool:
        """Whether a failed write collided with another customer's email."""
        other = self._repo.get_by_email(email)
        return other is not None and other.id != customer_id

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_customer(self, dto: CreateCustomerDTO) -> Customer:
        """Create a customer with its phone and addresses.

        Raises:
            CustomerAlreadyExists: if the email is already taken (RN-CLI-001),
                either by the pre-check or by the storage constraint.
            IntegrityError: for any other storage integrity failure.
        """
        log = logger.bind(email=dto.email)

        if self._repo.get_by_email(dto.email):
            log.warning("customer.duplicate_email")
            raise CustomerAlreadyExists("Email already registered.")

        customer = Customer(
            name=dto.name,
            email=dto.email,
            password=self._encode_password(dto.password),
        )
        customer.attach_phone(dto.phone.number)
        customer.replace_addresses(_build_addresses(dto.addresses))

        try:
            customer = self._repo.save(customer)
        except IntegrityError as exc:
            if not self._email_taken_by_other(dto.email, customer.id):
                raise
            log.warning("customer.duplicate_email", source="storage")
            raise CustomerAlreadyExists("Email already registered.") from exc

        log.info("customer.created", customer_id=str(customer.id))
        return customer

    @transaction.atomic
    def replace_customer(self, dto: ReplaceCustomerDTO) -> None:
        """Overwrite an existing customer and its owned entities.

        The email is not checked against other customers; a collision
        surfaces only through the storage constraint.

        Raises:
            CustomerNotFound: if the customer does not exist.
            CustomerAlreadyExists: if the storage constraint rejects the email.
            IntegrityError: for any other storage integrity failure.
        """
        customer = self.get_customer(dto.id)
        log = logger.bind(customer_id=str(dto.id))

        customer.name = dto.name
        customer.email = dto.email
        customer.password = self._encode_password(dto.password)
        customer.attach_phone(dto.phone.number)
        customer.replace_addresses(_build_addresses(dto.addresses))

        try:
            self._repo.save(customer)
        except IntegrityError as exc:
            if not self._email_taken_by_other(dto.email, customer.id):
                raise
            log.warning("customer.duplicate_email", source="storage")
            raise CustomerAlreadyExists("Email already registered.") from exc

        log.info("customer.replaced")

    @transaction.atomic
    def delete_customer(self, id: Any) -> None:
        """Delete a customer together with its phone and addresses.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        self.get_customer(id)
        self._repo.delete(id)
        logger.info("customer.deleted", customer_id=str(id))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_customers(
        self, filters: Optional[Dict[str, Any]] = None
    ) -> List[Customer]:
        """Return every customer, optionally filtered."""
        return self._repo.list(filters)

    def list_customers_page(self, page_number: int, page_size: int) -> Page:
        """Return one page of customers."""
        return self._repo.list_page(page_number, page_size)

    def get_customer(self, id: Any) -> Customer:
        """Retrieve a single customer by ID.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        customer = self._repo.get_by_id(id)
        if not customer:
            raise CustomerNotFound(f"Customer {id} not found.")
        return customer

    def get_customer_by_email(self, email: str) -> Customer:
        """Raises:
            CustomerNotFound: if no customer has this email.
        """
        customer = self._repo.get_by_email(email)
        if not customer:
            raise CustomerNotFound("Customer not found with this email.")
        return customer

    def find_customers_by_name(self, name: str) -> List[Customer]:
        """Customers whose name contains ``name`` (case-insensitive).

        Raises:
            CustomerNotFound: when nobody matches; never returns an empty list.
        """
        customers = self._repo.search_by_name(name)
        if not customers:
            raise CustomerNotFound("No customers found with this name.")
        return customers
