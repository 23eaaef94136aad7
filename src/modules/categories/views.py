"""Category API views.

Exposes the ``CategoryService`` via HTTP using DRF ViewSets.
Domain exceptions are translated into HTTP status codes.
"""

from __future__ import annotations

from collections.abc import Mapping

from django_filters.rest_framework import DjangoFilterBackend
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.filters import OrderingFilter
from rest_framework.mixins import ListModelMixin
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.categories.dtos import CategoryDTO
from modules.categories.exceptions import CategoryNotFound
from modules.categories.filters import CategoryFilter
from modules.categories.models import Category
from modules.categories.repositories.django_repository import CategoryDjangoRepository
from modules.categories.serializers import CategorySerializer
from modules.categories.services import CategoryService
from modules.core.pagination import StandardPagination


class CategoryViewSet(ListModelMixin, GenericViewSet):
    """ViewSet for Category CRUD operations.

    Listing runs through DRF filtering/pagination; every other action
    goes through ``CategoryService``.
    """

    filterset_class = CategoryFilter
    ordering_fields = ["name", "created_at"]
    ordering = ["name"]
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    pagination_class = StandardPagination
    queryset = Category.objects.all()
    serializer_class = CategorySerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CategoryService(repository=CategoryDjangoRepository())

    @staticmethod
    def _not_found() -> Response:
        return Response(
            {"detail": "Category not found."},
            status=status.HTTP_404_NOT_FOUND,
        )

    @staticmethod
    def _parse(data) -> CategoryDTO:
        if not isinstance(data, Mapping):
            raise ValueError("Request body must be a JSON object.")
        return CategoryDTO(
            name=data.get("name", ""),
            description=data.get("description"),
        )

    # ------------------------------------------------------------------
    # Retrieve / Search
    # ------------------------------------------------------------------

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/categories/{pk}/"""
        try:
            category = self._service.get_category(pk)
        except CategoryNotFound:
            return self._not_found()
        return Response(CategorySerializer(category).data)

    @action(detail=False, methods=["get"], url_path="find")
    def find_by_name(self, request: Request) -> Response:
        """GET /api/v1/categories/find/?name=..."""
        name = request.query_params.get("name")
        if not name:
            return Response(
                {"detail": "Query parameter 'name' is required."},
                status=status.HTTP_400_BAD_REQUEST,
            )
        try:
            categories = self._service.find_categories_by_name(name)
        except CategoryNotFound as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        return Response(CategorySerializer(categories, many=True).data)

    # ------------------------------------------------------------------
    # Create / Replace / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/categories/"""
        try:
            dto = self._parse(request.data)
        except (PydanticValidationError, ValueError) as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        category = self._service.create_category(dto)
        return Response(
            CategorySerializer(category).data, status=status.HTTP_201_CREATED
        )

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/v1/categories/{pk}/"""
        try:
            dto = self._parse(request.data)
        except (PydanticValidationError, ValueError) as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        try:
            category = self._service.replace_category(pk, dto)
        except CategoryNotFound:
            return self._not_found()
        return Response(CategorySerializer(category).data)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/categories/{pk}/"""
        try:
            self._service.delete_category(pk)
        except CategoryNotFound:
            return self._not_found()
        return Response(status=status.HTTP_204_NO_CONTENT)
