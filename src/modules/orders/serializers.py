"""Order DRF serializers for API output.

The serializers operate at the Interface layer (API Views) and only
render ``Order`` dataclasses; request parsing goes through the Pydantic
DTOs in ``dtos.py``.
"""

from __future__ import annotations

from rest_framework import serializers


class OrderItemSerializer(serializers.Serializer):
    """Read serializer for a single order line."""

    productId = serializers.CharField(source="product_id", read_only=True)
    quantity = serializers.IntegerField(read_only=True)
    price = serializers.DecimalField(
        max_digits=None, decimal_places=None, read_only=True
    )


class OrderSerializer(serializers.Serializer):
    """Read serializer for orders with nested items."""

    id = serializers.CharField(read_only=True)
    customerId = serializers.CharField(source="customer_id", read_only=True)
    status = serializers.CharField(read_only=True)
    items = OrderItemSerializer(many=True, read_only=True)
    totalAmount = serializers.DecimalField(
        source="total_amount", max_digits=None, decimal_places=None, read_only=True
    )


class OrderPageSerializer(serializers.Serializer):
    """Paginated listing envelope: ``content`` plus pagination metadata."""

    content = OrderSerializer(source="orders", many=True, read_only=True)
    page = serializers.IntegerField(read_only=True)
    size = serializers.IntegerField(read_only=True)
    total = serializers.IntegerField(read_only=True)
    totalPages = serializers.IntegerField(source="total_pages", read_only=True)


class OrderStatsSerializer(serializers.Serializer):
    total = serializers.IntegerField(read_only=True)
    byStatus = serializers.DictField(
        source="by_status", child=serializers.IntegerField(), read_only=True
    )
