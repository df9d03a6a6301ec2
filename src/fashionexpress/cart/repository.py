"""Repository for the CartItem aggregate."""

from fashionexpress.cart.cart import CartItem, cart_line_id
from fashionexpress.domain import fashionexpress


@fashionexpress.repository(part_of=CartItem)
class CartItemRepository:
    def for_user(self, user_id) -> list[CartItem]:
        return self._dao.query.filter(user_id=str(user_id)).limit(None).all().items

    def find_line(self, user_id, product_id) -> CartItem | None:
        """The user's line for ``product_id``, if there is one."""
        lines = self._dao.query.filter(id=cart_line_id(user_id, product_id)).all().items
        return lines[0] if lines else None

    def clear(self, user_id) -> int:
        lines = self.for_user(user_id)
        for line in lines:
            self._dao.delete(line)
        return len(lines)
