"""Order aggregate — a placed order with its line items and tracking ledger.

Line items are written once at placement and never change; each carries the
unit price the shopper paid. The tracking ledger is append-only: every status
change adds one entry and copies its status onto the order, so
``Order.status`` always equals the status of the latest entry appended
through ``append_status``.
"""

from datetime import UTC, datetime, timedelta

import structlog
from protean.exceptions import ValidationError
from protean.fields import (
    DateTime,
    Float,
    HasMany,
    Identifier,
    Integer,
    String,
    Text,
    ValueObject,
)

from fashionexpress.domain import fashionexpress
from fashionexpress.order.events import OrderPlaced, OrderStatusUpdated
from fashionexpress.order.status import (
    INITIAL_TRACKING_DESCRIPTION,
    INITIAL_TRACKING_STATUS,
    default_description,
    progress_for,
    stage_of,
)

logger = structlog.get_logger(__name__)

_ONE_TICK = timedelta(microseconds=1)


def as_utc(moment):
    # Relational providers may hand back naive datetimes
    if moment is not None and moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@fashionexpress.value_object(part_of="Order")
class ShippingAddress:
    """Where the order ships, captured at checkout and never updated."""

    address = String(required=True, max_length=255)
    city = String(required=True, max_length=100)
    state = String(required=True, max_length=100)
    pincode = String(required=True, max_length=20)


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@fashionexpress.entity(part_of="Order")
class OrderItem:
    """One product line of an order with the unit price paid for it."""

    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    price = Float(required=True, min_value=0.0)


@fashionexpress.entity(part_of="Order")
class TrackingEntry:
    """One step in an order's tracking history."""

    status = String(required=True, max_length=50)
    description = Text(required=True)
    timestamp = DateTime(required=True)


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@fashionexpress.aggregate
class Order:
    user_id = Identifier(required=True)
    status = String(max_length=50, default="pending")
    total = Float(required=True, min_value=0.0)
    shipping_address = ValueObject(ShippingAddress)
    phone = String(required=True, max_length=20)
    payment_method = String(required=True, max_length=50)
    payment_status = String(max_length=50, default="pending")
    items = HasMany(OrderItem)
    tracking = HasMany(TrackingEntry)
    created_at = DateTime()
    delivery_expected_by = DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def place(cls, user_id, lines, shipping_address, phone, payment_method, delivery_window_hours=24):
        """Create an order from priced lines.

        Args:
            user_id: The shopper placing the order.
            lines: List of dicts with product_id, quantity and price (unit
                price already resolved from the catalogue).
            shipping_address: Dict with address, city, state, pincode.
            phone: Contact number for delivery.
            payment_method: Stored label, e.g. "cod" or "card".
            delivery_window_hours: Hours from now until expected delivery.
        """
        now = datetime.now(UTC)
        total = round(sum(line["price"] * line["quantity"] for line in lines), 2)

        order = cls(
            user_id=user_id,
            status="pending",
            total=total,
            shipping_address=ShippingAddress(**shipping_address),
            phone=phone,
            payment_method=payment_method,
            payment_status="pending",
            created_at=now,
            delivery_expected_by=now + timedelta(hours=delivery_window_hours),
        )
        for line in lines:
            order.add_items(
                OrderItem(
                    product_id=line["product_id"],
                    quantity=line["quantity"],
                    price=line["price"],
                )
            )
        order.add_tracking(
            TrackingEntry(
                status=INITIAL_TRACKING_STATUS,
                description=INITIAL_TRACKING_DESCRIPTION,
                timestamp=now,
            )
        )

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                user_id=str(user_id),
                total=total,
                item_count=len(lines),
                placed_at=now,
            )
        )
        return order

    # -------------------------------------------------------------------
    # Tracking ledger
    # -------------------------------------------------------------------
    def history(self, latest_first=False):
        return sorted(self.tracking, key=lambda entry: as_utc(entry.timestamp), reverse=latest_first)

    def latest_entry(self):
        entries = self.history()
        return entries[-1] if entries else None

    def append_status(self, status, description=None):
        """Append a tracking entry and mirror its status onto the order."""
        status = " ".join((status or "").split())
        if stage_of(status) is None:
            raise ValidationError({"status": [f"Unknown order status '{status}'"]})

        _, current_step = progress_for(self.status)
        _, new_step = progress_for(status)
        if new_step < current_step:
            logger.warning(
                "order_status_moved_backward",
                order_id=str(self.id),
                from_status=self.status,
                to_status=status,
            )

        timestamp = datetime.now(UTC)
        latest = self.latest_entry()
        if latest is not None and timestamp <= as_utc(latest.timestamp):
            timestamp = as_utc(latest.timestamp) + _ONE_TICK

        entry = TrackingEntry(
            status=status,
            description=description or default_description(status),
            timestamp=timestamp,
        )
        self.add_tracking(entry)
        self.status = status

        self.raise_(
            OrderStatusUpdated(
                order_id=str(self.id),
                status=status,
                description=entry.description,
                updated_at=timestamp,
            )
        )
        return entry

    def progress(self):
        return progress_for(self.status)
