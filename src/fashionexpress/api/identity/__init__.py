"""Identity API package."""

from fashionexpress.api.identity.routes import auth_router, user_router

__all__ = ["auth_router", "user_router"]
