"""Domain events for the User aggregate."""

from protean.fields import DateTime, Identifier, String

from fashionexpress.domain import fashionexpress


@fashionexpress.event(part_of="User")
class UserRegistered:
    """A shopper created an account."""

    __version__ = 1

    user_id: Identifier(required=True)
    username: String(required=True)
    email: String(required=True)
    registered_at: DateTime(required=True)


@fashionexpress.event(part_of="User")
class ProfileUpdated:
    __version__ = 1

    user_id: Identifier(required=True)
    changed_fields: String()
