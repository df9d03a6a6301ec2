"""Session aggregate — a server-side login bound to an opaque cookie token."""

import secrets
from datetime import UTC, datetime, timedelta

from protean.fields import DateTime, Identifier, String

from fashionexpress.domain import fashionexpress


@fashionexpress.aggregate
class Session:
    token = String(required=True, max_length=64, unique=True)
    user_id = Identifier(required=True)
    created_at = DateTime(required=True)
    expires_at = DateTime(required=True)

    @classmethod
    def open(cls, user_id, ttl_hours: int):
        now = datetime.now(UTC)
        return cls(
            token=secrets.token_urlsafe(32),
            user_id=user_id,
            created_at=now,
            expires_at=now + timedelta(hours=ttl_hours),
        )

    def is_expired(self, now=None) -> bool:
        now = now or datetime.now(UTC)
        expires_at = self.expires_at
        # Relational providers may hand back naive datetimes
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=UTC)
        return now >= expires_at
