"""Catalogue API package."""

from fashionexpress.api.catalogue.routes import category_router, product_router

__all__ = ["product_router", "category_router"]
