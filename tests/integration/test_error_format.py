"""Integration tests for standardized error responses."""

import pytest

pytestmark = pytest.mark.integration


class TestStandardizedErrors:
    def test_malformed_json_has_standard_format(self, api_client):
        response = api_client.post(
            "/api/orders/", data="{", content_type="application/json"
        )
        assert response.status_code == 400
        data = response.json()
        assert data["type"] == "validation_error"
        assert isinstance(data["errors"], list)
        assert data["errors"][0]["code"] == "parse_error"
        assert "detail" in data["errors"][0]

    def test_method_not_allowed_has_standard_format(self, api_client):
        response = api_client.put("/api/orders/", {}, format="json")
        assert response.status_code == 405
        data = response.json()
        assert data["type"] == "client_error"
        assert data["errors"][0]["code"] == "method_not_allowed"

    def test_unsupported_media_type_has_standard_format(self, api_client):
        response = api_client.post(
            "/api/orders/", data="customerId=C1", content_type="text/plain"
        )
        assert response.status_code == 415
        assert response.json()["errors"][0]["code"] == "unsupported_media_type"

    def test_domain_validation_error_has_standard_format(self, api_client):
        response = api_client.post("/api/orders/", {"items": []}, format="json")
        assert response.status_code == 400
        data = response.json()
        assert data == {
            "type": "validation_error",
            "errors": [
                {
                    "code": "missing_field",
                    "detail": "Customer ID is required.",
                    "attr": "customerId",
                }
            ],
        }


class TestFormatErrors:
    def test_nested_field_errors_are_flattened(self):
        from rest_framework.exceptions import ErrorDetail

        from modules.core.exceptions import format_errors

        detail = {"items": [{"quantity": [ErrorDetail("bad", code="invalid")]}]}
        assert format_errors(400, detail) == {
            "type": "validation_error",
            "errors": [{"code": "invalid", "detail": "bad", "attr": "items.quantity"}],
        }

    def test_server_errors_typed(self):
        from modules.core.exceptions import format_errors

        assert format_errors(500, {"detail": "boom"})["type"] == "server_error"
