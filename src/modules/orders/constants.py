"""Order domain constants.

Defines the recognised order statuses.  There is no transition graph:
any status may be set from any other status.
"""

from django.db import models


class OrderStatus(models.TextChoices):
    PENDING = "PENDING", "Pending"
    CONFIRMED = "CONFIRMED", "Confirmed"
    SHIPPED = "SHIPPED", "Shipped"
    DELIVERED = "DELIVERED", "Delivered"
    CANCELLED = "CANCELLED", "Cancelled"


VALID_STATUSES: frozenset[str] = frozenset(OrderStatus.values)

ORDER_ID_PREFIX = "ORD-"

DEFAULT_PAGE = 0
