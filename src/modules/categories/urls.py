"""Category routes (``/api/v1/categories/...``)."""

from __future__ import annotations

from rest_framework.routers import SimpleRouter

from modules.categories.views import CategoryViewSet

router = SimpleRouter(trailing_slash=True)
router.register("categories", CategoryViewSet, basename="category")

urlpatterns = router.urls
