from django.apps import AppConfig


class OrdersConfig(AppConfig):
    name = "modules.orders"
    label = "orders"

    def ready(self) -> None:
        from modules.orders.events import (
            OrderCreated,
            OrderDeleted,
            OrderStatusChanged,
        )
        from modules.orders.handlers import (
            order_created_handler,
            order_deleted_handler,
            order_status_changed_handler,
        )
        from modules.orders.store import OrderStore
        from modules.orders.validators import OrderValidator
        from shared.infrastructure.bus import event_bus

        event_bus.subscribe(OrderCreated, order_created_handler)
        event_bus.subscribe(OrderStatusChanged, order_status_changed_handler)
        event_bus.subscribe(OrderDeleted, order_deleted_handler)

        # The one store for this process; views reach it through the
        # app registry.
        self.store = OrderStore(validator=OrderValidator())
