"""Order API views.

Exposes the ``OrderService`` via HTTP using a DRF ViewSet.
Service results (``Ok`` / ``Err``) are translated into HTTP status
codes here; unexpected exceptions are never swallowed.
"""

from __future__ import annotations

from typing import Optional

from django.apps import apps
from django.conf import settings
from drf_spectacular.utils import OpenApiParameter, extend_schema
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.core.exceptions import error_response
from modules.orders.constants import DEFAULT_PAGE
from modules.orders.dtos import CreateOrderDTO, UpdateStatusDTO
from modules.orders.exceptions import OrderNotFound
from modules.orders.serializers import (
    OrderPageSerializer,
    OrderSerializer,
    OrderStatsSerializer,
)
from modules.orders.services import OrderService
from shared.domain.result import Ok
from shared.infrastructure.bus import event_bus

HEALTH_MESSAGE = "Order Service Running"


def _not_found() -> Response:
    return Response(
        {"detail": "Order not found."},
        status=status.HTTP_404_NOT_FOUND,
    )


def _pydantic_error(exc: PydanticValidationError) -> Response:
    first = exc.errors()[0]
    attr = ".".join(str(part) for part in first.get("loc", ())) or None
    return error_response("invalid", first.get("msg", str(exc)), attr)


class OrderViewSet(ViewSet):
    """ViewSet for Order operations.

    Uses ``OrderService`` over the process-wide ``OrderStore`` held by
    the orders app config.
    """

    lookup_value_regex = "[^/]+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = OrderService(
            store=apps.get_app_config("orders").store,
            event_bus=event_bus,
        )

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    @extend_schema(request=None, responses={201: OrderSerializer})
    def create(self, request: Request) -> Response:
        """POST /api/orders/"""
        try:
            dto = CreateOrderDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return _pydantic_error(exc)

        result = self._service.create_order(dto)
        if not isinstance(result, Ok):
            error = result.error
            return error_response(error.code, error.message, error.field)

        out = OrderSerializer(result.value)
        return Response(out.data, status=status.HTTP_201_CREATED)

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    @extend_schema(
        parameters=[
            OpenApiParameter("page", int, default=DEFAULT_PAGE),
            OpenApiParameter("size", int, default=settings.ORDERS_DEFAULT_PAGE_SIZE),
            OpenApiParameter("status", str),
            OpenApiParameter("customerId", str),
        ],
        responses=OrderPageSerializer,
    )
    def list(self, request: Request) -> Response:
        """GET /api/orders/?page=&size=&status=&customerId="""
        params = request.query_params
        page = _int_param(params.get("page"), DEFAULT_PAGE)
        size = _int_param(params.get("size"), settings.ORDERS_DEFAULT_PAGE_SIZE)
        if page is None or page < 0:
            return error_response("invalid", "'page' must be an integer >= 0.", "page")
        if size is None or size <= 0:
            return error_response("invalid", "'size' must be an integer > 0.", "size")

        listing = self._service.list_orders(
            page,
            size,
            status=params.get("status"),
            customer_id=params.get("customerId"),
        )
        return Response(OrderPageSerializer(listing).data)

    @extend_schema(responses={200: OrderSerializer})
    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/orders/{pk}/"""
        if pk is None:
            return _not_found()
        result = self._service.get_order(pk)
        if not isinstance(result, Ok):
            return _not_found()
        return Response(OrderSerializer(result.value).data)

    # ------------------------------------------------------------------
    # Status Update
    # ------------------------------------------------------------------

    @extend_schema(request=None, responses={200: OrderSerializer})
    @action(detail=True, methods=["patch"], url_path="status")
    def update_status(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/orders/{pk}/status/

        Any recognised status may be set from any other status.
        """
        if pk is None:
            return _not_found()
        try:
            dto = UpdateStatusDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return _pydantic_error(exc)

        result = self._service.update_status(pk, dto.status)
        if not isinstance(result, Ok):
            error = result.error
            if isinstance(error, OrderNotFound):
                return _not_found()
            return error_response(error.code, error.message, error.field)

        return Response(OrderSerializer(result.value).data)

    # ------------------------------------------------------------------
    # Destroy
    # ------------------------------------------------------------------

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/orders/{pk}/ (idempotent)."""
        if pk is not None:
            self._service.delete_order(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    # ------------------------------------------------------------------
    # Misc
    # ------------------------------------------------------------------

    @extend_schema(responses={200: OrderStatsSerializer})
    @action(detail=False, methods=["get"])
    def stats(self, request: Request) -> Response:
        """GET /api/orders/stats/"""
        return Response(OrderStatsSerializer(self._service.stats()).data)

    @extend_schema(responses={200: str})
    @action(detail=False, methods=["get"])
    def health(self, request: Request) -> Response:
        """GET /api/orders/health/"""
        return Response(HEALTH_MESSAGE)


def _int_param(raw: Optional[str], default: int) -> Optional[int]:
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return None
