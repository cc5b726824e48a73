"""Order DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF views) and the
Service layer.  DTOs are immutable (``frozen=True``).

The DTOs only check *shape* (types).  Business rules such as
"at least one item" or "price greater than zero" belong to
``OrderValidator`` so that every caller gets the same fail-fast
ordering of errors.

- ``CreateOrderItemDTO``: input for a single order line item.
- ``CreateOrderDTO``: input for order creation (nested items).
- ``UpdateStatusDTO``: input for a status change.
"""

from __future__ import annotations

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from modules.orders.models import Order, OrderItem

# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateOrderItemDTO(BaseModel):
    """Immutable DTO for a single order item in a creation request."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    product_id: Optional[str] = Field(default=None, alias="productId")
    quantity: Optional[int] = None
    price: Optional[Decimal] = None

    def to_entity(self) -> OrderItem:
        return OrderItem(
            product_id=self.product_id,
            quantity=self.quantity,
            price=self.price,
        )


class CreateOrderDTO(BaseModel):
    """Immutable DTO for order creation requests."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    customer_id: Optional[str] = Field(default=None, alias="customerId")
    items: Optional[List[CreateOrderItemDTO]] = None

    def to_candidate(self) -> Order:
        """Build an unsaved order; the store assigns ``id`` and ``status``."""
        items = None
        if self.items is not None:
            items = [item.to_entity() for item in self.items]
        return Order(customer_id=self.customer_id, items=items)


class UpdateStatusDTO(BaseModel):
    """Immutable DTO for ``{"status": ...}`` requests."""

    model_config = ConfigDict(frozen=True)

    status: Optional[str] = None
