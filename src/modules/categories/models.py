"""Category model.

A category groups products on the menu (e.g. "Uramaki", "Temaki").
Identity is the store-assigned integer key: two categories are equal
only when both are saved and share the same id; unsaved instances are
equal to themselves alone.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import TimestampedModel


class Category(TimestampedModel):
    name = models.CharField(max_length=120)
    description = models.TextField(null=True, blank=True, default=None)  # noqa: DJ01

    class Meta:
        db_table = "categories"
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name
