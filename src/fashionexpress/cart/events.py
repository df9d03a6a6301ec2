"""Domain events for the CartItem aggregate."""

from protean.fields import Identifier, Integer

from fashionexpress.domain import fashionexpress


@fashionexpress.event(part_of="CartItem")
class CartItemAdded:
    """A product was added to a cart, as a new line or merged into an existing one."""

    __version__ = 1

    item_id = Identifier(required=True)
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True)
    line_quantity = Integer(required=True)


@fashionexpress.event(part_of="CartItem")
class CartItemQuantityUpdated:
    """A shopper set a new quantity on a cart line."""

    __version__ = 1

    item_id = Identifier(required=True)
    user_id = Identifier(required=True)
    previous_quantity = Integer(required=True)
    new_quantity = Integer(required=True)
