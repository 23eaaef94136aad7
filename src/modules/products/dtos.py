"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
DTOs are immutable (``frozen=True``).
"""

from __future__ import annotations

from decimal import Decimal
from typing import List

from pydantic import BaseModel, ConfigDict, field_validator


class ProductDTO(BaseModel):
    """Immutable DTO for product creation and full replacement.

    Validates:
    - ``name`` is non-blank.
    - ``price`` is a Decimal greater than zero (RN-PRO-001).
    - ``category_ids`` holds no duplicates.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    price: Decimal
    description: str = ""
    image_url: str = ""
    category_ids: List[int] = []

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Product name must not be blank.")
        return v.strip()

    @field_validator("price")
    @classmethod
    def price_must_be_positive(cls, v: Decimal) -> Decimal:
        if v <= 0:
            raise ValueError("Price must be greater than zero.")
        return v

    @field_validator("category_ids")
    @classmethod
    def drop_duplicate_categories(cls, v: List[int]) -> List[int]:
        return list(dict.fromkeys(v))
