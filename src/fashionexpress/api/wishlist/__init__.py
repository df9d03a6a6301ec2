"""Wishlist API package."""

from fashionexpress.api.wishlist.routes import wishlist_router

__all__ = ["wishlist_router"]
