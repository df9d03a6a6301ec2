"""Order reads scoped to the shopper who placed them."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from fashionexpress.order.order import Order, as_utc
from fashionexpress.product.queries import find_product
from fashionexpress.shared.errors import ForbiddenError, NotFoundError


def orders_for_user(user_id) -> list[Order]:
    """The user's orders, newest first."""
    orders = current_domain.repository_for(Order)._dao.query.filter(user_id=str(user_id)).limit(None).all().items
    return sorted(orders, key=lambda o: as_utc(o.created_at), reverse=True)


def order_for_user(user_id, order_id) -> Order:
    try:
        order = current_domain.repository_for(Order).get(order_id)
    except ObjectNotFoundError:
        raise NotFoundError("Order not found") from None

    if str(order.user_id) != str(user_id):
        raise ForbiddenError("Not authorized to view this order")
    return order


def items_with_products(order: Order):
    """Return ``[(OrderItem, Product | None)]``; the product is None once it is gone."""
    return [(item, find_product(item.product_id)) for item in order.items]
