"""Domain events for the WishlistItem aggregate."""

from protean.fields import Identifier

from fashionexpress.domain import fashionexpress


@fashionexpress.event(part_of="WishlistItem")
class WishlistItemAdded:
    __version__ = 1

    item_id = Identifier(required=True)
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
