"""Stock adjustment.

``adjust_stock`` performs the write only; callers that need "enough stock"
semantics (checkout) lock the product row, check, then call it inside the
same unit of work.
"""

from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from fashionexpress.domain import fashionexpress
from fashionexpress.product.product import Product
from fashionexpress.shared.commands import dispatch
from fashionexpress.utils.db import lock_rows


def adjust_stock(product_id, delta: int) -> Product:
    """Apply ``delta`` to the product's stock and persist it.

    Raises ``ObjectNotFoundError`` for an unknown product and
    ``ValidationError`` if the result would be negative.
    """
    repo = current_domain.repository_for(Product)
    product = repo.get(product_id)
    product.adjust_stock(delta)
    repo.add(product)
    return product


@fashionexpress.command(part_of="Product")
class AdjustStock:
    product_id: Identifier(required=True)
    delta: Integer(required=True)


@fashionexpress.command_handler(part_of=Product)
class AdjustStockHandler:
    @handle(AdjustStock)
    def adjust(self, command):
        lock_rows(Product, [command.product_id])
        return adjust_stock(command.product_id, command.delta).stock


def restock(product_id, delta: int) -> int:
    """Run ``AdjustStock``; returns the new stock."""
    return dispatch(AdjustStock(product_id=product_id, delta=delta))
