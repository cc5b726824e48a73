"""In-memory order store.

``OrderStore`` is the single owner of the order map and of the id
counter.  Every operation runs under one re-entrant lock that covers
both, so ids stay unique and gapless under concurrent callers and no
reader observes a half-applied write.

The store is built once per process by ``OrdersConfig.ready()``; state
lives for the lifetime of that object and is never persisted.
"""

from __future__ import annotations

import threading
from typing import Dict, List, NamedTuple, Optional

import structlog

from modules.orders.constants import ORDER_ID_PREFIX, OrderStatus
from modules.orders.exceptions import InvalidOrderStatus
from modules.orders.models import Order
from modules.orders.validators import OrderValidator

logger = structlog.get_logger(__name__)


class OrderPage(NamedTuple):
    orders: List[Order]
    page: int
    size: int


class StatusChange(NamedTuple):
    """Before and after values of one status update, taken under the lock."""

    order: Order
    old_status: str
    new_status: str


class OrderStore:
    """Authoritative id → order mapping.

    ``validator`` is consulted on ``create``; a store built with
    ``validator=None`` accepts candidates unchecked.  Status values are
    always checked.
    """

    def __init__(self, validator: Optional[OrderValidator] = None) -> None:
        self._validator = validator
        self._orders: Dict[str, Order] = {}
        self._next_id = 1
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create(self, candidate: Order) -> Order:
        """Validate, assign id and ``PENDING`` status, then insert.

        The returned object is the one held by the store, not a copy.

        Raises:
            OrderValidationError: the candidate is rejected; nothing is
                stored and the counter is not advanced.
        """
        with self._lock:
            if self._validator is not None:
                self._validator.validate_order(candidate)

            candidate.id = f"{ORDER_ID_PREFIX}{self._next_id}"
            self._next_id += 1
            candidate.status = OrderStatus.PENDING.value
            self._orders[candidate.id] = candidate

        logger.debug("store.order_inserted", order_id=candidate.id)
        return candidate

    def update_status(self, order_id: str, new_status: str) -> Optional[Order]:
        """Change an order's status in place.

        The status value is checked before the id is looked up, so an
        invalid status is reported even for an unknown order.

        Raises:
            InvalidOrderStatus: ``new_status`` is not a recognised status.
        """
        change = self.change_status(order_id, new_status)
        return change.order if change is not None else None

    def change_status(self, order_id: str, new_status: str) -> Optional[StatusChange]:
        """Like ``update_status`` but also reports the status it replaced.

        Both values are read in the same locked section as the write, so
        concurrent updates each see their own predecessor.
        """
        if not OrderValidator.is_valid_status(new_status):
            raise InvalidOrderStatus(new_status)

        with self._lock:
            order = self._orders.get(order_id)
            if order is None:
                return None
            old_status = order.status
            order.status = new_status
            return StatusChange(order, old_status, new_status)

    def delete(self, order_id: str) -> Optional[Order]:
        """Remove an order; unknown ids are ignored.

        Returns the removed order, or ``None`` when nothing was removed.
        """
        with self._lock:
            return self._orders.pop(order_id, None)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_by_id(self, order_id: str) -> Optional[Order]:
        with self._lock:
            return self._orders.get(order_id)

    def list(self) -> List[Order]:
        """Snapshot of all orders, in no particular order."""
        with self._lock:
            return list(self._orders.values())

    def query(
        self,
        page: int,
        size: int,
        status: Optional[str] = None,
        customer_id: Optional[str] = None,
    ) -> OrderPage:
        """Filter, sort and paginate.

        Filters are exact-match and AND-combined.  Results are sorted by
        descending *string* comparison of ids, so ``ORD-9`` comes before
        ``ORD-10``.  A page starting past the end, a negative page or a
        non-positive size gives an empty page.
        """
        with self._lock:
            filtered = [
                order
                for order in self._orders.values()
                if (status is None or order.status == status)
                and (customer_id is None or order.customer_id == customer_id)
            ]

        filtered.sort(key=lambda order: order.id, reverse=True)

        if page < 0 or size <= 0:
            return OrderPage([], page, size)

        start = page * size
        end = min(start + size, len(filtered))
        if start >= len(filtered):
            return OrderPage([], page, size)
        return OrderPage(filtered[start:end], page, size)

    def count(self) -> int:
        with self._lock:
            return len(self._orders)

    def count_by_status(self, status: str) -> int:
        with self._lock:
            return sum(1 for order in self._orders.values() if order.status == status)
