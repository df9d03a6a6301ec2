"""Wishlist management — commands, handler and listing.

Adding a product that is already on the list returns the existing entry.
"""

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from fashionexpress.domain import fashionexpress
from fashionexpress.product.queries import find_product, get_product
from fashionexpress.shared.errors import NotFoundError
from fashionexpress.wishlist.item import WishlistItem

logger = structlog.get_logger(__name__)


@fashionexpress.command(part_of="WishlistItem")
class AddToWishlist:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)


@fashionexpress.command(part_of="WishlistItem")
class RemoveFromWishlist:
    user_id = Identifier(required=True)
    item_id = Identifier(required=True)


def _items_for(user_id, **filters):
    return (
        current_domain.repository_for(WishlistItem)
        ._dao.query.filter(user_id=str(user_id), **filters)
        .limit(None)
        .all()
        .items
    )


@fashionexpress.command_handler(part_of=WishlistItem)
class ManageWishlistHandler:
    @handle(AddToWishlist)
    def add_to_wishlist(self, command):
        get_product(command.product_id)

        existing = _items_for(command.user_id, product_id=str(command.product_id))
        if existing:
            return str(existing[0].id)

        item = WishlistItem.add(user_id=command.user_id, product_id=command.product_id)
        current_domain.repository_for(WishlistItem).add(item)
        return str(item.id)

    @handle(RemoveFromWishlist)
    def remove_from_wishlist(self, command):
        repo = current_domain.repository_for(WishlistItem)
        try:
            item = repo.get(command.item_id)
        except ObjectNotFoundError:
            item = None

        # Someone else's entry is reported the same as a missing one
        if item is None or str(item.user_id) != str(command.user_id):
            raise NotFoundError("Item not found in wishlist")

        repo._dao.delete(item)


def wishlist_with_products(user_id):
    """Return ``[(WishlistItem, Product)]``, skipping entries whose product is gone."""
    rows = []
    for item in _items_for(user_id):
        product = find_product(item.product_id)
        if product is None:
            logger.warning("wishlist_item_orphaned", item_id=str(item.id), product_id=str(item.product_id))
            continue
        rows.append((item, product))
    return rows
