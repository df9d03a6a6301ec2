"""Cart operations that need more than a single command.

Two concurrent adds of the same product end up as one line with the summed
quantity. The line's id is derived from (user, product), so when both adds
find no line and insert, the store rejects the second insert; that add is
then retried once and merges into the line the first one created.
"""

import structlog
from protean.exceptions import TransactionError, ValidationError
from protean.utils.globals import current_domain

from fashionexpress.cart.cart import CartItem
from fashionexpress.cart.items import AddToCart, UpdateCartItem, owned_line
from fashionexpress.product.queries import find_product, get_product
from fashionexpress.shared.commands import dispatch
from fashionexpress.shared.errors import StorefrontError

logger = structlog.get_logger(__name__)


def _line_already_inserted(exc) -> bool:
    if isinstance(exc, ValidationError):
        return "id" in exc.messages
    return True


def add_to_cart(user_id, product_id, quantity: int = 1) -> CartItem:
    command = AddToCart(user_id=user_id, product_id=product_id, quantity=quantity)
    try:
        item_id = dispatch(command)
    except (TransactionError, ValidationError) as exc:
        if not _line_already_inserted(exc):
            raise
        logger.info("cart_line_insert_conflict", user_id=str(user_id), product_id=str(product_id))
        item_id = dispatch(command)
    return current_domain.repository_for(CartItem).get(item_id)


def ensure_in_stock(product, quantity: int) -> None:
    """Reject a cart quantity the product cannot currently cover.

    This is an early check for shoppers only; checkout re-validates stock.
    """
    if quantity > product.stock:
        raise StorefrontError("Not enough stock available")


def update_quantity(user_id, item_id, quantity: int) -> CartItem:
    repo = current_domain.repository_for(CartItem)
    line = owned_line(repo, user_id, item_id)
    ensure_in_stock(get_product(line.product_id), quantity)

    dispatch(UpdateCartItem(user_id=user_id, item_id=item_id, quantity=quantity))
    return repo.get(item_id)


def list_with_products(user_id):
    """Return ``[(CartItem, Product)]`` for the user's cart.

    Lines whose product no longer exists are left out of the listing.
    """
    rows = []
    for line in current_domain.repository_for(CartItem).for_user(user_id):
        product = find_product(line.product_id)
        if product is None:
            logger.warning("cart_line_orphaned", item_id=str(line.id), product_id=str(line.product_id))
            continue
        rows.append((line, product))
    return rows
