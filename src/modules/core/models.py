"""Base abstract models for the Sushi API.

Provides:
- ``TimestampedModel``: ``created_at`` / ``updated_at`` bookkeeping.
- ``BaseModel``: Extends TimestampedModel with a UUIDv7 primary key.

Design decisions:
- The UUIDv7 key is generated at instantiation, so an aggregate root has an
  identity before it is persisted and owned entities can reference it.
- ``save()`` guard ensures ``updated_at`` is included when ``update_fields``
  is specified (Django skips ``auto_now`` fields otherwise).
"""

from __future__ import annotations

import uuid6
from django.db import models

# ---------------------------------------------------------------------------
# TimestampedModel
# ---------------------------------------------------------------------------


class TimestampedModel(models.Model):
    """Abstract base with timestamp bookkeeping (store-assigned PK)."""

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True

    def save(self, *args, **kwargs) -> None:
        """Ensure ``updated_at`` is refreshed even when ``update_fields`` is passed."""
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "updated_at" not in update_fields:
            kwargs["update_fields"] = list(update_fields) + ["updated_at"]
        super().save(*args, **kwargs)


# ---------------------------------------------------------------------------
# BaseModel
# ---------------------------------------------------------------------------


class BaseModel(TimestampedModel):
    """Abstract base with UUIDv7 PK and timestamp bookkeeping."""

    id = models.UUIDField(
        primary_key=True,
        default=uuid6.uuid7,
        editable=False,
    )

    class Meta:
        abstract = True
