"""Ordering API package."""

from fashionexpress.api.ordering.routes import cart_router, order_router

__all__ = ["cart_router", "order_router"]
