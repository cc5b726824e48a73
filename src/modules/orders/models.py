"""Order aggregate.

Plain dataclasses held in process memory by ``OrderStore``; there are
no database tables behind them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional


@dataclass
class OrderItem:
    """A single line of an order, owned by its parent order."""

    product_id: Optional[str]
    quantity: Optional[int]
    price: Optional[Decimal]

    @property
    def subtotal(self) -> Decimal:
        return Decimal(self.quantity or 0) * (self.price or Decimal("0"))


@dataclass(eq=False)
class Order:
    """Order aggregate root.

    ``id`` and ``status`` are ``None`` on a candidate and are filled in
    by the store when the order is created.
    """

    customer_id: Optional[str]
    items: Optional[List[OrderItem]] = field(default_factory=list)
    id: Optional[str] = None
    status: Optional[str] = None

    @property
    def total_amount(self) -> Decimal:
        return sum((item.subtotal for item in self.items or []), Decimal("0"))

    def __str__(self) -> str:
        return f"{self.id} ({self.status})"
