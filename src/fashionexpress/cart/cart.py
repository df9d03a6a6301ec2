"""CartItem aggregate — one line of a shopper's cart.

A cart is the set of CartItem rows for a user. There is at most one row per
(user, product): the row id is derived from the pair, so a second insert for
the same product collides at the store. Adding a product already in the cart
increases that row's quantity instead.
"""

from datetime import UTC, datetime
from uuid import NAMESPACE_URL, uuid5

from protean.fields import DateTime, Identifier, Integer

from fashionexpress.cart.events import CartItemAdded, CartItemQuantityUpdated
from fashionexpress.domain import fashionexpress


def cart_line_id(user_id, product_id) -> str:
    return str(uuid5(NAMESPACE_URL, f"fashionexpress:cart-line:{user_id}:{product_id}"))


@fashionexpress.aggregate
class CartItem:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    added_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, user_id, product_id, quantity=1):
        now = datetime.now(UTC)
        item = cls(
            id=cart_line_id(user_id, product_id),
            user_id=user_id,
            product_id=product_id,
            quantity=quantity,
            added_at=now,
            updated_at=now,
        )
        item.raise_(
            CartItemAdded(
                item_id=str(item.id),
                user_id=str(user_id),
                product_id=str(product_id),
                quantity=quantity,
                line_quantity=quantity,
            )
        )
        return item

    # -------------------------------------------------------------------
    # Quantity changes
    # -------------------------------------------------------------------
    def increase(self, quantity):
        """Merge a repeated add into this line."""
        self.quantity = self.quantity + quantity
        self.updated_at = datetime.now(UTC)
        self.raise_(
            CartItemAdded(
                item_id=str(self.id),
                user_id=str(self.user_id),
                product_id=str(self.product_id),
                quantity=quantity,
                line_quantity=self.quantity,
            )
        )

    def change_quantity(self, new_quantity):
        previous_quantity = self.quantity
        self.quantity = new_quantity
        self.updated_at = datetime.now(UTC)
        self.raise_(
            CartItemQuantityUpdated(
                item_id=str(self.id),
                user_id=str(self.user_id),
                previous_quantity=previous_quantity,
                new_quantity=new_quantity,
            )
        )
