"""Repository for the Session aggregate."""

from fashionexpress.domain import fashionexpress
from fashionexpress.session.session import Session


@fashionexpress.repository(part_of=Session)
class SessionRepository:
    def by_token(self, token: str) -> Session | None:
        if not token:
            return None
        matches = self._dao.query.filter(token=token).all().items
        return matches[0] if matches else None

    def expired(self, now) -> list[Session]:
        return self._dao.query.filter(expires_at__lte=now).limit(None).all().items
