"""Tests for the Order aggregate: placement, totals and the tracking ledger."""

from datetime import timedelta

import pytest
from protean.exceptions import ValidationError

from fashionexpress.order.events import OrderPlaced, OrderStatusUpdated
from fashionexpress.order.order import Order, TrackingEntry

_ADDRESS = {"address": "12 MG Road", "city": "Bengaluru", "state": "Karnataka", "pincode": "560001"}


def _place(lines=None, **overrides):
    defaults = {
        "user_id": "user-001",
        "lines": lines
        or [
            {"product_id": "prod-a", "quantity": 2, "price": 50.0},
            {"product_id": "prod-b", "quantity": 1, "price": 30.0},
        ],
        "shipping_address": _ADDRESS,
        "phone": "9876543210",
        "payment_method": "cod",
    }
    defaults.update(overrides)
    return Order.place(**defaults)


class TestOrderPlacement:
    def test_total_is_sum_of_line_totals(self):
        assert _place().total == 130.0

    def test_total_is_rounded_to_cents(self):
        order = _place(lines=[{"product_id": "p", "quantity": 3, "price": 0.1}])
        assert order.total == 0.3

    def test_items_keep_unit_price(self):
        order = _place()
        prices = {str(item.product_id): item.price for item in order.items}
        assert prices == {"prod-a": 50.0, "prod-b": 30.0}

    def test_defaults(self):
        order = _place()
        assert order.status == "pending"
        assert order.payment_status == "pending"
        assert order.payment_method == "cod"

    def test_shipping_address_is_captured(self):
        order = _place()
        assert order.shipping_address.city == "Bengaluru"
        assert order.shipping_address.pincode == "560001"

    def test_delivery_window(self):
        order = _place(delivery_window_hours=48)
        assert order.delivery_expected_by - order.created_at == timedelta(hours=48)

    def test_initial_tracking_entry(self):
        order = _place()
        assert len(order.tracking) == 1
        entry = order.tracking[0]
        assert entry.status == "Order Placed"
        assert entry.description == "Your order has been placed successfully."
        assert entry.timestamp == order.created_at

    def test_raises_order_placed(self):
        order = _place()
        event = order._events[-1]
        assert isinstance(event, OrderPlaced)
        assert event.total == 130.0
        assert event.item_count == 2

    def test_incomplete_address_is_rejected(self):
        with pytest.raises(ValidationError):
            _place(shipping_address={"address": "12 MG Road", "city": "Bengaluru", "state": "Karnataka"})


class TestTrackingLedger:
    def test_append_mirrors_status(self):
        order = _place()
        entry = order.append_status("Shipped", "Handed to courier")

        assert isinstance(entry, TrackingEntry)
        assert order.status == "Shipped"
        assert order.latest_entry().status == "Shipped"
        assert order.latest_entry().description == "Handed to courier"

    def test_default_description(self):
        order = _place()
        entry = order.append_status("Packed")
        assert entry.description == "Order status updated to Packed"

    def test_status_whitespace_is_normalized(self):
        order = _place()
        order.append_status("  Out   for  delivery ")
        assert order.status == "Out for delivery"

    def test_unknown_status_is_rejected(self):
        order = _place()
        with pytest.raises(ValidationError):
            order.append_status("Teleported")
        assert order.status == "pending"
        assert len(order.tracking) == 1

    def test_timestamps_strictly_increase(self):
        order = _place()
        for status in ("Processing", "Packed", "Shipped", "Out for Delivery", "Delivered"):
            order.append_status(status)

        stamps = [entry.timestamp for entry in order.history()]
        assert all(earlier < later for earlier, later in zip(stamps, stamps[1:], strict=False))

    def test_history_order(self):
        order = _place()
        order.append_status("Processing")
        order.append_status("Shipped")

        assert [e.status for e in order.history()] == ["Order Placed", "Processing", "Shipped"]
        assert [e.status for e in order.history(latest_first=True)] == ["Shipped", "Processing", "Order Placed"]

    def test_backward_move_is_recorded(self):
        order = _place()
        order.append_status("Shipped")
        order.append_status("Processing")
        assert order.status == "Processing"
        assert len(order.tracking) == 3

    def test_append_raises_status_updated(self):
        order = _place()
        order._events.clear()
        order.append_status("Delivered")
        event = order._events[0]
        assert isinstance(event, OrderStatusUpdated)
        assert event.status == "Delivered"


class TestProgress:
    @pytest.mark.parametrize(
        "status,expected",
        [
            ("Processing", (40, 1)),
            ("Packed", (40, 1)),
            ("Shipped", (60, 2)),
            ("Out for Delivery", (80, 3)),
            ("Delivered", (100, 4)),
        ],
    )
    def test_progress_follows_status(self, status, expected):
        order = _place()
        order.append_status(status)
        assert order.progress() == expected

    def test_new_order_is_at_first_step(self):
        assert _place().progress() == (20, 0)
