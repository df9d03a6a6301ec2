"""FastAPI dependencies resolving the shopper behind the session cookie."""

from fastapi import Request

from fashionexpress.session.auth import resolve_session
from fashionexpress.utils.config import setting


def session_token(request: Request) -> str | None:
    return request.cookies.get(setting("SESSION_COOKIE"))


async def current_user_id(request: Request) -> str:
    """The logged-in user's id; raises ``UnauthenticatedError`` (401) otherwise."""
    return resolve_session(session_token(request))
