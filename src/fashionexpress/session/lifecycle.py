"""Session lifecycle — commands and handler.

Opening a session also purges every expired one, so the table only holds
live logins plus whatever expired since the last login.
"""

from datetime import UTC, datetime

import structlog
from protean import handle
from protean.fields import DateTime, Identifier, String
from protean.utils.globals import current_domain

from fashionexpress.domain import fashionexpress
from fashionexpress.session.session import Session
from fashionexpress.utils.config import setting

logger = structlog.get_logger(__name__)


@fashionexpress.command(part_of="Session")
class OpenSession:
    user_id = Identifier(required=True)


@fashionexpress.command(part_of="Session")
class CloseSession:
    token = String(required=True, max_length=64)


@fashionexpress.command(part_of="Session")
class PurgeExpiredSessions:
    before = DateTime()  # defaults to now


def purge_expired(repo, now=None) -> int:
    now = now or datetime.now(UTC)
    if now.tzinfo is None:
        now = now.replace(tzinfo=UTC)

    expired = repo.expired(now)
    for session in expired:
        repo._dao.delete(session)
    if expired:
        logger.info("sessions_purged", count=len(expired))
    return len(expired)


@fashionexpress.command_handler(part_of=Session)
class SessionLifecycleHandler:
    @handle(OpenSession)
    def open_session(self, command):
        repo = current_domain.repository_for(Session)
        purge_expired(repo)

        session = Session.open(user_id=str(command.user_id), ttl_hours=int(setting("SESSION_TTL_HOURS")))
        repo.add(session)
        return str(session.id)

    @handle(CloseSession)
    def close_session(self, command):
        repo = current_domain.repository_for(Session)
        session = repo.by_token(command.token)
        if session is not None:
            repo._dao.delete(session)

    @handle(PurgeExpiredSessions)
    def purge(self, command):
        return purge_expired(current_domain.repository_for(Session), command.before)
