"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.

- Request bodies and query parameters are validated structurally (Pydantic
  DTOs / ``PageRequest``) before the service is called; failures return 400
  with a per-field message map.
- ``ProductNotFound`` is translated into 404 here.  ``StoreFailure`` is left
  to the project exception handler (500).  The view never swallows generic
  exceptions.
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from django.conf import settings
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from catalog.core.validation import field_errors, validation_response
from catalog.products.dtos import CreateProductDTO, ProductOutputDTO, UpdateProductDTO
from catalog.products.exceptions import ProductNotFound
from catalog.products.queries import PageRequest, ProductPage
from catalog.products.repositories.django_repository import ProductDjangoRepository
from catalog.products.services import ProductService

_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off", ""}


def _parse_id(pk: Optional[str]) -> Optional[UUID]:
    try:
        return UUID(str(pk))
    except ValueError:
        return None


def _parse_flag(raw: Optional[str]) -> Optional[bool]:
    if raw is None:
        return False
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return None


def _invalid_id() -> Response:
    return validation_response({"id": ["Must be a valid UUID."]})


def _not_found() -> Response:
    return Response(
        {"detail": "Product not found."},
        status=status.HTTP_404_NOT_FOUND,
    )


class ProductViewSet(ViewSet):
    """ViewSet for Product CRUD + soft deactivation.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).  All ORM
    access goes through the service/repository layer.
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    @extend_schema(
        parameters=[
            OpenApiParameter(
                "name",
                OpenApiTypes.STR,
                description="Case-insensitive substring; takes precedence over onlyActive.",
            ),
            OpenApiParameter("onlyActive", OpenApiTypes.BOOL),
            OpenApiParameter("page", OpenApiTypes.INT, description="Zero-based page."),
            OpenApiParameter(
                "size", OpenApiTypes.INT, description="Capped at MAX_PAGE_SIZE."
            ),
            OpenApiParameter(
                "sort", OpenApiTypes.STR, many=True, description="property[,asc|desc]"
            ),
        ],
        responses={200: ProductPage},
    )
    def list(self, request: Request) -> Response:
        """GET /api/products"""
        params = request.query_params

        only_active = _parse_flag(params.get("onlyActive"))
        if only_active is None:
            return validation_response({"onlyActive": ["Must be a boolean."]})

        try:
            page_request = PageRequest.from_query_params(
                params, default_size=settings.DEFAULT_PAGE_SIZE
            )
        except PydanticValidationError as exc:
            return validation_response(field_errors(exc))

        page = self._service.list_products(
            name=params.get("name"),
            only_active=only_active,
            page_request=page_request,
        )
        return Response(page.model_dump(by_alias=True))

    @extend_schema(responses={200: ProductOutputDTO})
    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/products/{pk}"""
        product_id = _parse_id(pk)
        if product_id is None:
            return _invalid_id()
        try:
            product = self._service.get_product(product_id)
        except ProductNotFound:
            return _not_found()
        return Response(product.model_dump(by_alias=True))

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @extend_schema(request=CreateProductDTO, responses={201: ProductOutputDTO})
    def create(self, request: Request) -> Response:
        """POST /api/products"""
        try:
            dto = CreateProductDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return validation_response(field_errors(exc))

        product = self._service.create_product(dto)
        return Response(product.model_dump(by_alias=True), status=status.HTTP_201_CREATED)

    @extend_schema(request=UpdateProductDTO, responses={200: ProductOutputDTO})
    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/products/{pk}"""
        product_id = _parse_id(pk)
        if product_id is None:
            return _invalid_id()

        try:
            dto = UpdateProductDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return validation_response(field_errors(exc))

        try:
            product = self._service.update_product(product_id, dto)
        except ProductNotFound:
            return _not_found()
        return Response(product.model_dump(by_alias=True))

    @extend_schema(responses={204: None})
    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/products/{pk}"""
        product_id = _parse_id(pk)
        if product_id is None:
            return _invalid_id()
        try:
            self._service.delete_product(product_id)
        except ProductNotFound:
            return _not_found()
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(request=None, responses={204: None})
    @action(detail=True, methods=["patch"], url_path="deactivate")
    def deactivate(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/products/{pk}/deactivate

        Idempotent: an already inactive product also answers 204.
        """
        product_id = _parse_id(pk)
        if product_id is None:
            return _invalid_id()
        try:
            self._service.deactivate_product(product_id)
        except ProductNotFound:
            return _not_found()
        return Response(status=status.HTTP_204_NO_CONTENT)
