"""Order domain exceptions.

Raised by the store and validator when business rules are violated.
The service layer turns them into ``Err`` results and the API layer
(Views) translates those into appropriate HTTP responses.
"""

from __future__ import annotations


class OrderValidationError(Exception):
    """A caller-correctable problem with the submitted data.

    ``field`` names the offending attribute using its API spelling
    (``customerId``, ``items``, ``productId``, ``quantity``, ``price``,
    ``status``).
    """

    code = "validation_error"

    def __init__(self, field: str, message: str | None = None) -> None:
        self.field = field
        self.message = message or f"Invalid value for '{field}'."
        super().__init__(self.message)


class MissingField(OrderValidationError):
    """A required field is absent or empty."""

    code = "missing_field"

    def __init__(self, field: str, message: str | None = None) -> None:
        super().__init__(field, message or f"Field '{field}' is required.")


class InvalidValue(OrderValidationError):
    """A field is present but holds a value outside its allowed range."""

    code = "invalid_value"

    def __init__(self, field: str, message: str | None = None) -> None:
        super().__init__(field, message or f"Field '{field}' must be greater than 0.")


class InvalidOrderStatus(OrderValidationError):
    """The requested status is not one of the recognised order statuses."""

    code = "invalid_status"

    def __init__(self, status: str | None) -> None:
        self.status = status
        super().__init__("status", f"Invalid order status: {status}")


class OrderNotFound(Exception):
    """The requested order does not exist."""

    def __init__(self, order_id: str) -> None:
        self.order_id = order_id
        super().__init__(f"Order not found with id: {order_id}")
