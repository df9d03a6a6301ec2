"""Order status vocabulary and the progress mapping shown to shoppers.

Statuses are free-form labels on the wire but must name one of the known
stages (compared case-insensitively). Each stage maps to a progress
percentage and a step on the five-step tracker.
"""

from enum import Enum


class TrackingStage(Enum):
    PENDING = "pending"
    ORDER_PLACED = "order placed"
    PROCESSING = "processing"
    PACKED = "packed"
    SHIPPED = "shipped"
    OUT_FOR_DELIVERY = "out for delivery"
    DELIVERED = "delivered"


STEP_LABELS = ("Ordered", "Packed", "Shipped", "Out for delivery", "Delivered")

INITIAL_TRACKING_STATUS = "Order Placed"
INITIAL_TRACKING_DESCRIPTION = "Your order has been placed successfully."

# stage -> (percent complete, step index into STEP_LABELS)
_PROGRESS = {
    TrackingStage.PENDING: (20, 0),
    TrackingStage.ORDER_PLACED: (20, 0),
    TrackingStage.PROCESSING: (40, 1),
    TrackingStage.PACKED: (40, 1),
    TrackingStage.SHIPPED: (60, 2),
    TrackingStage.OUT_FOR_DELIVERY: (80, 3),
    TrackingStage.DELIVERED: (100, 4),
}
_DEFAULT_PROGRESS = (20, 0)


def stage_of(status: str | None) -> TrackingStage | None:
    """Return the stage a status label names, or None if it names none."""
    if not status:
        return None
    try:
        return TrackingStage(" ".join(status.split()).lower())
    except ValueError:
        return None


def progress_for(status: str | None) -> tuple[int, int]:
    """``(percent, step_index)`` for a status label; unknown labels count as just ordered."""
    stage = stage_of(status)
    if stage is None:
        return _DEFAULT_PROGRESS
    return _PROGRESS[stage]


def default_description(status: str) -> str:
    return f"Order status updated to {status}"
