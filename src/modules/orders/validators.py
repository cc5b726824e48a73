"""Order validation rules.

``OrderValidator`` is stateless and fail-fast: each check raises on the
first violation it finds instead of collecting every problem.
"""

from __future__ import annotations

from typing import Optional

from modules.orders.constants import VALID_STATUSES
from modules.orders.exceptions import InvalidValue, MissingField
from modules.orders.models import Order


class OrderValidator:
    """Gatekeeper consulted by ``OrderStore`` before any mutation."""

    def validate_order(self, order: Order) -> None:
        """Check a candidate order.

        Raises:
            MissingField: ``customerId``, ``items`` or an item's
                ``productId`` is absent or empty.
            InvalidValue: an item's ``quantity`` or ``price`` is absent
                or not greater than zero.
        """
        if not order.customer_id:
            raise MissingField("customerId", "Customer ID is required.")

        if not order.items:
            raise MissingField("items", "Order must have at least one item.")

        for item in order.items:
            if not item.product_id:
                raise MissingField(
                    "productId", "Product ID is required for all items."
                )
            if item.quantity is None or item.quantity <= 0:
                raise InvalidValue(
                    "quantity", "Item quantity must be greater than 0."
                )
            if item.price is None or item.price <= 0:
                raise InvalidValue("price", "Item price must be greater than 0.")

    @staticmethod
    def is_valid_status(status: Optional[str]) -> bool:
        """Exact, case-sensitive membership in the status set."""
        return status is not None and status in VALID_STATUSES
