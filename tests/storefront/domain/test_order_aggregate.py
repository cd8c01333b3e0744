"""Tests for the Order and OrderItem aggregates."""

import pytest
from protean.exceptions import ValidationError
from storefront.orders.events import OrderPlaced, OrderStatusChanged
from storefront.orders.order import Order, OrderStatus
from storefront.orders.order_item import OrderItem

SHIPPING = {
    "first_name": "Amina",
    "last_name": "Otieno",
    "email": "amina@example.com",
    "address": "12 Moi Avenue",
    "city": "Nairobi",
    "county": "Nairobi",
    "postal_code": "",
    "country": "Kenya",
}


def _place(**overrides):
    defaults = {
        "user_id": "user-001",
        "total_amount": 270.0,
        "shipping_address": SHIPPING,
        "payment_method": "mpesa",
        "currency": "KES",
    }
    defaults.update(overrides)
    return Order.place(**defaults)


class TestPlaceOrder:
    def test_new_order_is_pending(self):
        order = _place()
        assert order.status == OrderStatus.PENDING.value
        assert order.total_amount == 270.0
        assert order.shipping_address.city == "Nairobi"
        assert order.created_at is not None

    def test_raises_order_placed(self):
        order = _place()
        assert len(order._events) == 1
        event = order._events[0]
        assert isinstance(event, OrderPlaced)
        assert event.order_id == str(order.id)
        assert event.total_amount == 270.0

    def test_shipping_address_requires_name(self):
        with pytest.raises(ValidationError):
            _place(shipping_address={**SHIPPING, "first_name": None})


class TestOrderStatusChanges:
    @pytest.mark.parametrize("target", ["processing", "shipped", "delivered", "cancelled"])
    def test_any_known_status_from_pending(self, target):
        order = _place()
        order.change_status(target)
        assert order.status == target

    @pytest.mark.parametrize(
        "path",
        [
            ["shipped", "processing"],
            ["cancelled", "pending"],
            ["delivered", "shipped"],
        ],
    )
    def test_admin_can_correct_a_status(self, path):
        order = _place()
        for status in path:
            order.change_status(status)
        assert order.status == path[-1]

    def test_unknown_status(self):
        with pytest.raises(ValidationError) as exc:
            _place().change_status("lost")
        assert "Unknown order status: lost" in exc.value.messages["status"]

    def test_status_change_raises_event(self):
        order = _place()
        order._events.clear()
        order.change_status("shipped")
        event = order._events[0]
        assert isinstance(event, OrderStatusChanged)
        assert event.previous_status == "pending"
        assert event.new_status == "shipped"

    def test_same_status_raises_no_event(self):
        order = _place()
        order._events.clear()
        order.change_status("pending")
        assert order._events == []

    def test_start_processing(self):
        order = _place()
        assert order.start_processing() is True
        assert order.status == "processing"
        assert order.start_processing() is False

    def test_start_processing_reopens_cancelled_order(self):
        order = _place()
        order.change_status("cancelled")
        assert order.start_processing() is True
        assert order.status == "processing"


class TestOrderItem:
    def test_snapshot(self):
        item = OrderItem.snapshot(
            order_id="ord-1",
            product_id="A",
            product_name="Denim Jacket",
            price=100.0,
            quantity=2,
            size="M",
        )
        assert item.product_name == "Denim Jacket"
        assert item.line_total == 200.0

    def test_keeps_cart_quantity_as_is(self):
        item = OrderItem.snapshot(order_id="ord-1", product_id="A", product_name="A", price=10.0, quantity=0)
        assert item.quantity == 0
        assert item.line_total == 0.0

    def test_price_cannot_be_negative(self):
        with pytest.raises(ValidationError):
            OrderItem.snapshot(order_id="ord-1", product_id="A", product_name="A", price=-1.0, quantity=1)
