"""Repository for the User aggregate."""

from fashionexpress.domain import fashionexpress
from fashionexpress.user.user import User


@fashionexpress.repository(part_of=User)
class UserRepository:
    def by_username(self, username: str) -> User | None:
        return self._first(username=username)

    def by_email(self, email: str) -> User | None:
        return self._first(email=email)

    def _first(self, **filters) -> User | None:
        matches = self._dao.query.filter(**filters).all().items
        return matches[0] if matches else None
