"""Category domain exceptions."""

from __future__ import annotations


class CategoryNotFound(Exception):
    """The requested category does not exist."""
