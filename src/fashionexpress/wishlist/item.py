"""WishlistItem aggregate — a product a shopper saved for later."""

from datetime import UTC, datetime

from protean.fields import DateTime, Identifier

from fashionexpress.domain import fashionexpress
from fashionexpress.wishlist.events import WishlistItemAdded


@fashionexpress.aggregate
class WishlistItem:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    added_at = DateTime()

    @classmethod
    def add(cls, user_id, product_id):
        item = cls(user_id=user_id, product_id=product_id, added_at=datetime.now(UTC))
        item.raise_(
            WishlistItemAdded(
                item_id=str(item.id),
                user_id=str(user_id),
                product_id=str(product_id),
            )
        )
        return item
