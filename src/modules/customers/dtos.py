"""Customer DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF Views)
and the Service layer.  DTOs are immutable (``frozen=True``).

- ``CreateCustomerDTO``: input for customer creation.
- ``ReplaceCustomerDTO``: input for a full replacement of the aggregate.
- ``PhoneDTO`` / ``AddressDTO``: owned entities nested in both.
"""

from __future__ import annotations

from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, field_validator

# ---------------------------------------------------------------------------
# Owned entities
# ---------------------------------------------------------------------------


class PhoneDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    number: str

    @field_validator("number")
    @classmethod
    def number_must_not_be_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Phone number must not be blank.")
        return v.strip()


class AddressDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    number: str
    street: str
    neighborhood: str


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateCustomerDTO(BaseModel):
    """Immutable DTO for customer creation requests.

    Validates:
    - ``name`` and ``password`` are non-blank.
    - ``email`` is a well-formed address (Pydantic ``EmailStr``).
    - ``phone`` is required; ``addresses`` defaults to an empty list.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    email: EmailStr
    password: str
    phone: PhoneDTO
    addresses: List[AddressDTO] = []

    @field_validator("name", "password")
    @classmethod
    def must_not_be_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Field must not be blank.")
        return v


class ReplaceCustomerDTO(CreateCustomerDTO):
    """Immutable DTO for a full customer replacement.

    ``addresses`` may be omitted: the customer then ends up with none.
    """

    id: UUID
    addresses: Optional[List[AddressDTO]] = None
