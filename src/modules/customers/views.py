"""Customer API views.

Exposes the ``CustomerService`` via HTTP using DRF ViewSets.
Domain exceptions are caught and translated into appropriate
HTTP status codes; the view never swallows generic exceptions.
"""

from __future__ import annotations

from collections.abc import Mapping

from django.core.paginator import InvalidPage
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.core.pagination import StandardPagination
from modules.customers.dtos import CreateCustomerDTO, ReplaceCustomerDTO
from modules.customers.exceptions import CustomerAlreadyExists, CustomerNotFound
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.serializers import CustomerSerializer
from modules.customers.services import CustomerService


def _not_found(detail: str = "Customer not found.") -> Response:
    return Response({"detail": detail}, status=status.HTTP_404_NOT_FOUND)


class CustomerViewSet(ViewSet):
    """ViewSet for Customer aggregate operations.

    Uses ``CustomerService`` with ``CustomerDjangoRepository`` (DIP).
    All ORM access goes through the service/repository layer, paging
    included.
    """

    pagination_class = StandardPagination

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CustomerService(repository=CustomerDjangoRepository())

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/v1/customers/?page=N&page_size=M"""
        paginator = self.pagination_class()
        page_size = paginator.get_page_size(request)
        try:
            page = self._service.list_customers_page(
                request.query_params.get(paginator.page_query_param, 1),
                page_size,
            )
        except InvalidPage as exc:
            return _not_found(str(exc))

        return Response(
            {
                "count": page.paginator.count,
                "page": page.number,
                "num_pages": page.paginator.num_pages,
                "results": CustomerSerializer(page.object_list, many=True).data,
            }
        )

    @action(detail=False, methods=["get"], url_path="all")
    def list_all(self, request: Request) -> Response:
        """GET /api/v1/customers/all/"""
        customers = self._service.list_customers()
        return Response(CustomerSerializer(customers, many=True).data)

    @action(detail=False, methods=["get"], url_path="find")
    def find_by_name(self, request: Request) -> Response:
        """GET /api/v1/customers/find/?name=..."""
        name = request.query_params.get("name")
        if not name:
            return Response(
                {"detail": "Query parameter 'name' is required."},
                status=status.HTTP_400_BAD_REQUEST,
            )
        try:
            customers = self._service.find_customers_by_name(name)
        except CustomerNotFound as exc:
            return _not_found(str(exc))
        return Response(CustomerSerializer(customers, many=True).data)

    @action(detail=False, methods=["get"], url_path="by-email")
    def find_by_email(self, request: Request) -> Response:
        """GET /api/v1/customers/by-email/?email=..."""
        email = request.query_params.get("email")
        if not email:
            return Response(
                {"detail": "Query parameter 'email' is required."},
                status=status.HTTP_400_BAD_REQUEST,
            )
        try:
            customer = self._service.get_customer_by_email(email)
        except CustomerNotFound as exc:
            return _not_found(str(exc))
        return Response(CustomerSerializer(customer).data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/customers/{pk}/"""
        try:
            customer = self._service.get_customer(pk)
        except CustomerNotFound:
            return _not_found()
        return Response(CustomerSerializer(customer).data)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/customers/"""
        try:
            dto = CreateCustomerDTO.model_validate(request.data)
        except (PydanticValidationError, ValueError) as exc:
            return Response(
                {"detail": str(exc)},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            customer = self._service.create_customer(dto)
        except CustomerAlreadyExists as exc:
            return Response(
                {"detail": str(exc)},
                status=status.HTTP_409_CONFLICT,
            )

        out = CustomerSerializer(customer)
        return Response(out.data, status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/v1/customers/{pk}/

        Full replacement of the aggregate; no body is returned.
        """
        if not isinstance(request.data, Mapping):
            return Response(
                {"detail": "Request body must be a JSON object."},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            dto = ReplaceCustomerDTO.model_validate({**request.data, "id": pk})
        except (PydanticValidationError, ValueError) as exc:
            return Response(
                {"detail": str(exc)},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            self._service.replace_customer(dto)
        except CustomerNotFound:
            return _not_found()
        except CustomerAlreadyExists as exc:
            return Response(
                {"detail": str(exc)},
                status=status.HTTP_409_CONFLICT,
            )
        return Response(status=status.HTTP_204_NO_CONTENT)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/customers/{pk}/"""
        try:
            self._service.delete_customer(pk)
        except CustomerNotFound:
            return _not_found()
        return Response(status=status.HTTP_204_NO_CONTENT)
