"""Order tracking ledger — status updates and history reads."""

from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from fashionexpress.domain import fashionexpress
from fashionexpress.order.order import Order, TrackingEntry
from fashionexpress.shared.commands import dispatch
from fashionexpress.utils.db import lock_rows


@fashionexpress.command(part_of="Order")
class UpdateOrderStatus:
    order_id = Identifier(required=True)
    status = String(required=True, max_length=50)
    description = Text()


@fashionexpress.command_handler(part_of=Order)
class UpdateOrderStatusHandler:
    @handle(UpdateOrderStatus)
    def update_status(self, command):
        lock_rows(Order, [command.order_id])
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        entry = order.append_status(command.status, command.description)
        repo.add(order)
        return str(entry.id)


def append_status(order_id, status: str, description: str | None = None) -> TrackingEntry:
    """Append a tracking entry and set the order's status in one save."""
    entry_id = dispatch(UpdateOrderStatus(order_id=order_id, status=status, description=description))
    order = current_domain.repository_for(Order).get(order_id)
    return next(entry for entry in order.tracking if str(entry.id) == entry_id)


def history(order_id, latest_first: bool = False) -> list[TrackingEntry]:
    return current_domain.repository_for(Order).get(order_id).history(latest_first=latest_first)
