from decimal import Decimal

import pytest

from django.apps import apps
from rest_framework.test import APIClient

from modules.orders.models import Order, OrderItem
from modules.orders.store import OrderStore
from modules.orders.validators import OrderValidator


@pytest.fixture(autouse=True)
def _fresh_order_store(monkeypatch):
    """Give every test its own empty store (ids restart at ORD-1)."""
    config = apps.get_app_config("orders")
    monkeypatch.setattr(config, "store", OrderStore(validator=OrderValidator()))
    return config.store


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def make_order():
    """Factory for unsaved candidate orders."""

    def _make(customer_id="C1", quantity=2, price="10.0", product_id="P1"):
        return Order(
            customer_id=customer_id,
            items=[
                OrderItem(
                    product_id=product_id,
                    quantity=quantity,
                    price=Decimal(price) if price is not None else None,
                )
            ],
        )

    return _make
