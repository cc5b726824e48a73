"""Domain events for the Orders bounded context."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from shared.domain.events import DomainEvent


@dataclass(frozen=True)
class OrderCreated(DomainEvent):
    """Raised when an order is created."""


@dataclass(frozen=True)
class OrderStatusChanged(DomainEvent):
    """Raised when an order status changes."""

    old_status: Optional[str] = None
    new_status: Optional[str] = None


@dataclass(frozen=True)
class OrderDeleted(DomainEvent):
    """Raised when an order is removed from the store."""
