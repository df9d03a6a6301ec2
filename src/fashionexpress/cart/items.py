"""Cart line management — commands and handler."""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from fashionexpress.cart.cart import CartItem, cart_line_id
from fashionexpress.domain import fashionexpress
from fashionexpress.shared.errors import ForbiddenError, NotFoundError
from fashionexpress.utils.db import lock_rows


@fashionexpress.command(part_of="CartItem")
class AddToCart:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1, default=1)


@fashionexpress.command(part_of="CartItem")
class UpdateCartItem:
    user_id = Identifier(required=True)
    item_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@fashionexpress.command(part_of="CartItem")
class RemoveCartItem:
    user_id = Identifier(required=True)
    item_id = Identifier(required=True)


@fashionexpress.command(part_of="CartItem")
class ClearCart:
    user_id = Identifier(required=True)


def owned_line(repo, user_id, item_id) -> CartItem:
    try:
        line = repo.get(item_id)
    except ObjectNotFoundError:
        raise NotFoundError("Cart item not found") from None

    if str(line.user_id) != str(user_id):
        raise ForbiddenError("Not authorized to modify this cart item")
    return line


@fashionexpress.command_handler(part_of=CartItem)
class ManageCartItemsHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        lock_rows(CartItem, [cart_line_id(command.user_id, command.product_id)])
        repo = current_domain.repository_for(CartItem)
        line = repo.find_line(command.user_id, command.product_id)
        if line is None:
            line = CartItem.create(
                user_id=command.user_id,
                product_id=command.product_id,
                quantity=command.quantity,
            )
        else:
            line.increase(command.quantity)
        repo.add(line)
        return str(line.id)

    @handle(UpdateCartItem)
    def update_cart_item(self, command):
        lock_rows(CartItem, [command.item_id])
        repo = current_domain.repository_for(CartItem)
        line = owned_line(repo, command.user_id, command.item_id)
        line.change_quantity(command.quantity)
        repo.add(line)
        return str(line.id)

    @handle(RemoveCartItem)
    def remove_cart_item(self, command):
        repo = current_domain.repository_for(CartItem)
        line = owned_line(repo, command.user_id, command.item_id)
        repo._dao.delete(line)

    @handle(ClearCart)
    def clear_cart(self, command):
        return current_domain.repository_for(CartItem).clear(command.user_id)
