"""Authentication: credential checks and session lifecycle."""

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from fashionexpress.session.lifecycle import CloseSession, OpenSession, PurgeExpiredSessions
from fashionexpress.session.session import Session
from fashionexpress.shared.commands import dispatch
from fashionexpress.shared.errors import UnauthenticatedError
from fashionexpress.user.user import User

logger = structlog.get_logger(__name__)


def authenticate(username: str, password: str) -> User:
    user = current_domain.repository_for(User).by_username(username)
    if user is None or not user.check_password(password):
        logger.info("login_failed", username=username)
        raise UnauthenticatedError("Invalid username or password")
    return user


def open_session(user_id) -> Session:
    session_id = dispatch(OpenSession(user_id=user_id))
    logger.info("session_opened", user_id=str(user_id))
    return current_domain.repository_for(Session).get(session_id)


def resolve_session(token: str | None) -> str:
    """Return the user id behind ``token``; expired sessions are discarded."""
    session = current_domain.repository_for(Session).by_token(token)
    if session is None:
        raise UnauthenticatedError()

    if session.is_expired():
        dispatch(CloseSession(token=token))
        raise UnauthenticatedError()

    return str(session.user_id)


def close_session(token: str | None) -> None:
    session = current_domain.repository_for(Session).by_token(token)
    if session is not None:
        dispatch(CloseSession(token=session.token))


def purge_expired_sessions(before=None) -> int:
    """Delete every session that expired at or before ``before`` (default: now)."""
    return dispatch(PurgeExpiredSessions(before=before))


def current_user(token: str | None) -> User:
    user_id = resolve_session(token)
    try:
        return current_domain.repository_for(User).get(user_id)
    except ObjectNotFoundError:
        raise UnauthenticatedError() from None
