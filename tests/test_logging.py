import logging
import uuid

import structlog
from django.http import HttpResponse


class TestCorrelationIdMiddleware:
    def test_returns_provided_request_id(self, client):
        custom_id = "my-custom-request-id-123"
        response = client.get("/health", HTTP_X_REQUEST_ID=custom_id)
        assert response["X-Request-ID"] == custom_id

    def test_generates_uuid_when_no_request_id(self, client):
        response = client.get("/health")
        request_id = response["X-Request-ID"]
        parsed = uuid.UUID(request_id, version=4)
        assert str(parsed) == request_id

    def test_correlation_id_in_logs(self, client, caplog):
        custom_id = "log-test-correlation-456"
        with caplog.at_level(logging.INFO):
            client.get("/health", HTTP_X_REQUEST_ID=custom_id)
        found = any(custom_id in record.getMessage() for record in caplog.records)
        assert found, (
            f"correlation_id '{custom_id}' not found in log records: "
            f"{[r.getMessage() for r in caplog.records]}"
        )

    def test_service_logs_carry_correlation_id(self, api_client, caplog):
        custom_id = "order-log-correlation-789"
        payload = {
            "customerId": "C1",
            "items": [{"productId": "P1", "quantity": 1, "price": 5}],
        }
        with caplog.at_level(logging.INFO):
            api_client.post(
                "/api/orders/", payload, format="json", HTTP_X_REQUEST_ID=custom_id
            )
        messages = [record.getMessage() for record in caplog.records]
        assert any("order.created" in m and custom_id in m for m in messages)

    def test_request_id_bound_to_structlog_context(self, rf):
        from modules.core.middleware import CorrelationIdMiddleware

        seen = {}

        def get_response(request):
            seen.update(structlog.contextvars.get_contextvars())
            return HttpResponse()

        request = rf.get("/health", HTTP_X_REQUEST_ID="bound-id-321")
        response = CorrelationIdMiddleware(get_response)(request)

        assert seen["correlation_id"] == "bound-id-321"
        assert response["X-Request-ID"] == "bound-id-321"


class TestStructlogConfiguration:
    def test_loggers_are_stdlib_bound(self):
        logger = structlog.get_logger("modules.orders.test")
        assert logger.bind(order_id="ORD-1") is not None
        config = structlog.get_config()
        assert config["wrapper_class"] is structlog.stdlib.BoundLogger
