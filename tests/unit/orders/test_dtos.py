"""Unit tests for Order DTOs.

Covers:
- CreateOrderDTO: camelCase aliases, optional fields, type errors.
- Conversion to an unsaved ``Order`` candidate.
- UpdateStatusDTO: optional status, frozen immutability.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from modules.orders.dtos import CreateOrderDTO, CreateOrderItemDTO, UpdateStatusDTO

pytestmark = pytest.mark.unit


class TestCreateOrderDTO:
    def test_parses_camel_case_payload(self):
        dto = CreateOrderDTO.model_validate(
            {
                "customerId": "C1",
                "items": [{"productId": "P1", "quantity": 2, "price": 10.5}],
            }
        )
        assert dto.customer_id == "C1"
        assert dto.items[0].product_id == "P1"
        assert dto.items[0].price == Decimal("10.5")

    def test_accepts_snake_case_names(self):
        dto = CreateOrderDTO(customer_id="C1", items=[CreateOrderItemDTO(product_id="P1")])
        assert dto.items[0].product_id == "P1"

    def test_missing_fields_are_none(self):
        dto = CreateOrderDTO.model_validate({})
        assert dto.customer_id is None
        assert dto.items is None

    def test_business_rules_not_enforced_here(self):
        dto = CreateOrderDTO.model_validate(
            {"customerId": "", "items": [{"productId": "P1", "quantity": 0, "price": -1}]}
        )
        assert dto.items[0].quantity == 0

    def test_non_numeric_quantity_raises(self):
        with pytest.raises(ValidationError):
            CreateOrderDTO.model_validate(
                {"customerId": "C1", "items": [{"productId": "P1", "quantity": "two"}]}
            )

    def test_items_must_be_a_list(self):
        with pytest.raises(ValidationError):
            CreateOrderDTO.model_validate({"customerId": "C1", "items": "P1"})

    def test_is_immutable(self):
        dto = CreateOrderDTO.model_validate({"customerId": "C1", "items": []})
        with pytest.raises(ValidationError):
            dto.customer_id = "C2"


class TestToCandidate:
    def test_builds_unsaved_order(self):
        dto = CreateOrderDTO.model_validate(
            {
                "customerId": "C1",
                "items": [
                    {"productId": "P1", "quantity": 2, "price": "10.00"},
                    {"productId": "P2", "quantity": 1, "price": "2.50"},
                ],
            }
        )
        order = dto.to_candidate()
        assert order.id is None
        assert order.status is None
        assert order.customer_id == "C1"
        assert [item.product_id for item in order.items] == ["P1", "P2"]
        assert order.total_amount == Decimal("22.50")

    def test_missing_items_stay_none(self):
        order = CreateOrderDTO.model_validate({"customerId": "C1"}).to_candidate()
        assert order.items is None


class TestUpdateStatusDTO:
    def test_status_value(self):
        assert UpdateStatusDTO.model_validate({"status": "SHIPPED"}).status == "SHIPPED"

    def test_missing_status_is_none(self):
        assert UpdateStatusDTO.model_validate({}).status is None
