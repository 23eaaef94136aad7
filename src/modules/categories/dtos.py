"""Category DTOs for the Service Layer (Pydantic v2, immutable)."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


class CategoryDTO(BaseModel):
    """Input for category creation and full replacement."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Category name must not be blank.")
        return v.strip()
