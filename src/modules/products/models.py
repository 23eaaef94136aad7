"""Product model: a menu item.

Business rules implemented:
- RN-PRO-001: Price must be greater than zero.
- RN-PRO-002: A product belongs to zero or more categories; deleting a
  category only unlinks its products.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models

from modules.categories.models import Category
from modules.core.models import TimestampedModel


class Product(TimestampedModel):
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, default="")
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.01"))],
    )
    image_url = models.URLField(max_length=500, blank=True, default="")
    categories = models.ManyToManyField(
        Category,
        related_name="products",
        blank=True,
        db_table="products_categories",
    )

    class Meta:
        db_table = "products"
        ordering = ["name"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gt=0),
                name="products_price_positive",
            ),
        ]

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def clean(self) -> None:
        super().clean()
        if self.price is not None and self.price <= 0:
            raise ValidationError({"price": "Price must be greater than zero."})

    def __str__(self) -> str:
        return f"{self.name} ({self.price})"
