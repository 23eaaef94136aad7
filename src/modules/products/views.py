"""Product API views.

Exposes the ``ProductService`` via HTTP using DRF ViewSets.
Domain exceptions are caught and translated into appropriate
HTTP status codes; the view never swallows generic exceptions.
"""

from __future__ import annotations

from collections.abc import Mapping

from django_filters.rest_framework import DjangoFilterBackend
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.filters import OrderingFilter, SearchFilter
from rest_framework.mixins import ListModelMixin
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.categories.exceptions import CategoryNotFound
from modules.categories.repositories.django_repository import CategoryDjangoRepository
from modules.core.pagination import StandardPagination
from modules.products.dtos import ProductDTO
from modules.products.exceptions import ProductNotFound
from modules.products.filters import ProductFilter
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductSerializer
from modules.products.services import ProductService


class ProductViewSet(ListModelMixin, GenericViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with the Django repositories (DIP).
    Listing goes through DRF filtering and pagination.
    """

    filterset_class = ProductFilter
    search_fields = ["name", "description"]
    ordering_fields = ["name", "price", "created_at"]
    ordering = ["name"]
    filter_backends = [DjangoFilterBackend, SearchFilter, OrderingFilter]
    pagination_class = StandardPagination
    queryset = Product.objects.prefetch_related("categories")
    serializer_class = ProductSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(
            repository=ProductDjangoRepository(),
            category_repository=CategoryDjangoRepository(),
        )

    def get_queryset(self):
        return super().get_queryset().distinct()

    @staticmethod
    def _not_found() -> Response:
        return Response(
            {"detail": "Product not found."},
            status=status.HTTP_404_NOT_FOUND,
        )

    @staticmethod
    def _parse(data) -> ProductDTO:
        if not isinstance(data, Mapping):
            raise ValueError("Request body must be a JSON object.")
        return ProductDTO(
            name=data.get("name", ""),
            price=data.get("price", 0),
            description=data.get("description", ""),
            image_url=data.get("image_url", ""),
            category_ids=data.get("category_ids", []),
        )

    # ------------------------------------------------------------------
    # Retrieve / Search
    # ------------------------------------------------------------------

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/products/{pk}/"""
        try:
            product = self._service.get_product(pk)
        except ProductNotFound:
            return self._not_found()
        return Response(ProductSerializer(product).data)

    @action(detail=False, methods=["get"], url_path="find")
    def find_by_name(self, request: Request) -> Response:
        """GET /api/v1/products/find/?name=..."""
        name = request.query_params.get("name")
        if not name:
            return Response(
                {"detail": "Query parameter 'name' is required."},
                status=status.HTTP_400_BAD_REQUEST,
            )
        try:
            products = self._service.find_products_by_name(name)
        except ProductNotFound as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        return Response(ProductSerializer(products, many=True).data)

    # ------------------------------------------------------------------
    # Create / Replace / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/products/"""
        try:
            dto = self._parse(request.data)
        except (PydanticValidationError, ValueError) as exc:
            return Response(
                {"detail": str(exc)},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            product = self._service.create_product(dto)
        except CategoryNotFound as exc:
            return Response(
                {"detail": str(exc)},
                status=status.HTTP_404_NOT_FOUND,
            )

        out = ProductSerializer(product)
        return Response(out.data, status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/v1/products/{pk}/"""
        try:
            dto = self._parse(request.data)
        except (PydanticValidationError, ValueError) as exc:
            return Response(
                {"detail": str(exc)},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            product = self._service.replace_product(pk, dto)
        except ProductNotFound:
            return self._not_found()
        except CategoryNotFound as exc:
            return Response(
                {"detail": str(exc)},
                status=status.HTTP_404_NOT_FOUND,
            )

        out = ProductSerializer(product)
        return Response(out.data)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/products/{pk}/"""
        try:
            self._service.delete_product(pk)
        except ProductNotFound:
            return self._not_found()
        return Response(status=status.HTTP_204_NO_CONTENT)
