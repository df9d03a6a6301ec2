"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String, Text

from fashionexpress.domain import fashionexpress


@fashionexpress.event(part_of="Order")
class OrderPlaced:
    """Checkout succeeded: stock was taken, the order stored and the cart emptied."""

    __version__ = 1

    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    total = Float(required=True)
    item_count = Integer(required=True)
    placed_at = DateTime(required=True)


@fashionexpress.event(part_of="Order")
class OrderStatusUpdated:
    """A tracking entry was appended and the order's status changed with it."""

    __version__ = 1

    order_id = Identifier(required=True)
    status = String(required=True)
    description = Text()
    updated_at = DateTime(required=True)
