"""PlaceOrder — checkout.

Placement runs in two phases inside one unit of work:

1. Validation. The delivery details must all be present. Every requested
   line is checked against the catalogue in input order: the product must
   exist and have enough stock left after the earlier lines of the same
   request. The unit price is snapshotted (discount price when set) and the
   total accumulated. Nothing is written.
2. Commit. Stock is decremented per line, the order is stored with its
   items and the initial tracking entry, and the shopper's cart is emptied.
   Any exception rolls back every write.

The product rows are locked before phase 1 reads them and stay locked until
the unit of work ends, so concurrent checkouts of the same product queue up
and phase 1's stock check still holds when phase 2 runs. A Product saved by
someone else in between fails its version check and the whole command is
retried.
"""

import json

import structlog
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Identifier, Text
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from fashionexpress.cart.cart import CartItem
from fashionexpress.domain import fashionexpress
from fashionexpress.order.order import Order
from fashionexpress.product.product import Product
from fashionexpress.product.stock import adjust_stock
from fashionexpress.shared.commands import dispatch
from fashionexpress.shared.errors import EmptyOrderError, InsufficientStockError, ProductNotFoundError
from fashionexpress.utils.config import setting
from fashionexpress.utils.db import lock_rows

logger = structlog.get_logger(__name__)

DELIVERY_FIELDS = ("address", "city", "state", "pincode", "phone", "payment_method")


@fashionexpress.command(part_of="Order")
class PlaceOrder:
    user_id = Identifier(required=True)
    order_data = Text(required=True)  # JSON: address, city, state, pincode, phone, payment_method
    items = Text(required=True)  # JSON array of {product_id, quantity}


def delivery_details(order_data: dict) -> dict:
    """The delivery fields of ``order_data``; raises ``ValidationError`` naming each missing one."""
    missing = [field for field in DELIVERY_FIELDS if not str(order_data.get(field) or "").strip()]
    if missing:
        raise ValidationError({field: ["is required"] for field in missing})
    return {field: order_data[field] for field in DELIVERY_FIELDS}


def validate_lines(items):
    """Phase 1: resolve products, check stock and price every line.

    Returns the priced lines (product_id, quantity, price) in input order.
    Raises ``EmptyOrderError``, ``ProductNotFoundError`` or
    ``InsufficientStockError`` for the first offending line.
    """
    if not items:
        raise EmptyOrderError()

    repo = current_domain.repository_for(Product)
    remaining: dict[str, int] = {}
    priced = []

    for item in items:
        product_id = str(item["product_id"])
        quantity = int(item["quantity"])

        try:
            product = repo.get(product_id)
        except ObjectNotFoundError:
            raise ProductNotFoundError(product_id) from None

        available = remaining.get(product_id, product.stock)
        if quantity > available:
            raise InsufficientStockError(
                product_id=product_id,
                product_name=product.name,
                available=available,
                requested=quantity,
            )
        remaining[product_id] = available - quantity

        priced.append({"product_id": product_id, "quantity": quantity, "price": product.unit_price})

    return priced


@fashionexpress.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        details = delivery_details(json.loads(command.order_data))
        items = json.loads(command.items)

        lock_rows(Product, [item["product_id"] for item in items])
        lines = validate_lines(items)

        taken: dict[str, int] = {}
        for line in lines:
            taken[line["product_id"]] = taken.get(line["product_id"], 0) + line["quantity"]
        for product_id, quantity in taken.items():
            adjust_stock(product_id, -quantity)

        order = Order.place(
            user_id=command.user_id,
            lines=lines,
            shipping_address={
                "address": details["address"],
                "city": details["city"],
                "state": details["state"],
                "pincode": details["pincode"],
            },
            phone=details["phone"],
            payment_method=details["payment_method"],
            delivery_window_hours=int(setting("DELIVERY_WINDOW_HOURS")),
        )
        current_domain.repository_for(Order).add(order)

        cleared = current_domain.repository_for(CartItem).clear(command.user_id)

        logger.info(
            "order_placed",
            order_id=str(order.id),
            user_id=str(command.user_id),
            total=order.total,
            lines=len(lines),
            cart_lines_cleared=cleared,
        )
        return str(order.id)


def place_order(user_id, order_data: dict, items: list[dict]) -> Order:
    """Place an order for ``items`` and return it.

    ``order_data`` carries address, city, state, pincode, phone and
    payment_method. ``items`` is a list of ``{"product_id", "quantity"}``.
    """
    if not items:
        raise EmptyOrderError()

    order_id = dispatch(
        PlaceOrder(
            user_id=user_id,
            order_data=json.dumps(order_data),
            items=json.dumps(items),
        )
    )
    return current_domain.repository_for(Order).get(order_id)
