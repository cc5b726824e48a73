"""Order service layer (Use Cases).

Orchestrates the order lifecycle on top of ``OrderStore``: logging,
domain-event publication and pagination metadata.  Store failures are
returned as explicit ``Ok`` / ``Err`` values instead of propagating as
exceptions, so every caller handles the failure branch on purpose.

Business rules enforced (by the store / validator):
- Candidate orders need a customer, at least one item, and every item
  needs a product, a positive quantity and a positive price.
- Status values must be one of the recognised statuses.
- Ids are assigned once by the store and never reused.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List, Optional, Union

import structlog

from modules.orders.constants import OrderStatus
from modules.orders.events import OrderCreated, OrderDeleted, OrderStatusChanged
from modules.orders.exceptions import OrderNotFound, OrderValidationError
from shared.domain.result import Err, Ok, Result

if TYPE_CHECKING:
    from modules.orders.dtos import CreateOrderDTO
    from modules.orders.models import Order
    from modules.orders.store import OrderStore
    from shared.domain.bus import IEventBus
    from shared.domain.events import DomainEvent

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class OrderListing:
    """One page of orders plus the metadata the API returns with it."""

    orders: List[Order]
    page: int
    size: int
    total: int
    total_pages: int


@dataclass(frozen=True)
class OrderStats:
    total: int
    by_status: Dict[str, int]


class OrderService:
    """Application service for Order use-cases.

    Receives the store and the event bus via constructor injection.
    """

    def __init__(self, store: OrderStore, event_bus: IEventBus) -> None:
        self._store = store
        self._event_bus = event_bus

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_order(self, dto: CreateOrderDTO) -> Result[Order, OrderValidationError]:
        log = logger.bind(customer_id=dto.customer_id)
        log.info("order.creation_started")

        try:
            order = self._store.create(dto.to_candidate())
        except OrderValidationError as exc:
            log.warning(
                "order.validation_failed", code=exc.code, field=exc.field
            )
            return Err(exc)

        self._publish(OrderCreated(aggregate_id=order.id))

        log.info("order.created", order_id=order.id, items=len(order.items))
        return Ok(order)

    def update_status(
        self, order_id: str, new_status: Optional[str]
    ) -> Result[Order, Union[OrderValidationError, OrderNotFound]]:
        """Set a new status.

        An unrecognised status is reported before a missing order.
        """
        log = logger.bind(order_id=order_id, new_status=new_status)

        try:
            change = self._store.change_status(order_id, new_status)
        except OrderValidationError as exc:
            log.warning("order.invalid_status")
            return Err(exc)

        if change is None:
            log.info("order.not_found")
            return Err(OrderNotFound(order_id))

        order = change.order
        self._publish(
            OrderStatusChanged(
                aggregate_id=order.id,
                old_status=change.old_status,
                new_status=change.new_status,
            )
        )

        log.info("order.status_updated", old_status=change.old_status)
        return Ok(order)

    def delete_order(self, order_id: str) -> None:
        """Remove an order.  Deleting an unknown id is a no-op."""
        order = self._store.delete(order_id)
        if order is None:
            logger.info("order.delete_noop", order_id=order_id)
            return

        self._publish(OrderDeleted(aggregate_id=order_id))
        logger.info("order.deleted", order_id=order_id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_order(self, order_id: str) -> Result[Order, OrderNotFound]:
        order = self._store.get_by_id(order_id)
        if order is None:
            return Err(OrderNotFound(order_id))
        return Ok(order)

    def list_orders(
        self,
        page: int,
        size: int,
        status: Optional[str] = None,
        customer_id: Optional[str] = None,
    ) -> OrderListing:
        """Return one page of orders.

        ``total`` is the number of live orders in the store regardless of
        the filters; ``total_pages`` is derived from it.  ``size`` must be
        positive, the API layer rejects anything else.
        """
        result = self._store.query(page, size, status=status, customer_id=customer_id)
        total = self._store.count()
        return OrderListing(
            orders=result.orders,
            page=result.page,
            size=result.size,
            total=total,
            total_pages=math.ceil(total / size),
        )

    def stats(self) -> OrderStats:
        return OrderStats(
            total=self._store.count(),
            by_status={
                status: self._store.count_by_status(status)
                for status in OrderStatus.values
            },
        )

    # ------------------------------------------------------------------
    # Domain events
    # ------------------------------------------------------------------

    def _publish(self, *events: DomainEvent) -> None:
        self._event_bus.publish_all(list(events))
