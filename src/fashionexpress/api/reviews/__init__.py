"""Reviews API package."""

from fashionexpress.api.reviews.routes import review_router

__all__ = ["review_router"]
