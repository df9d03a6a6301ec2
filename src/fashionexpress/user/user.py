"""User aggregate root: a shopper account with contact and delivery details."""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, String

from fashionexpress.domain import fashionexpress
from fashionexpress.user.events import ProfileUpdated, UserRegistered
from fashionexpress.user.passwords import hash_password, verify_password

# Profile fields a shopper may change. Username and password are fixed here.
_PROFILE_FIELDS = ("name", "email", "phone", "address", "city", "state", "pincode")


@fashionexpress.aggregate
class User:
    """A registered shopper.

    ``username`` and ``email`` are unique across users. The store enforces it;
    the registration and profile handlers check first so the shopper gets a
    readable message. The saved address fields pre-fill checkout.
    """

    username: String(required=True, max_length=50, unique=True)
    email: String(required=True, max_length=254, unique=True)
    name: String(required=True, max_length=100)
    password_hash: String(required=True, max_length=255)
    phone: String(max_length=20)
    address: String(max_length=255)
    city: String(max_length=100)
    state: String(max_length=100)
    pincode: String(max_length=20)
    created_at: DateTime()

    @invariant.post
    def email_must_look_valid(self):
        email = self.email or ""
        if email.count("@") != 1:
            raise ValidationError({"email": ["Invalid email address"]})
        local_part, domain_part = email.split("@")
        if not local_part or "." not in domain_part or " " in email:
            raise ValidationError({"email": ["Invalid email address"]})

    @classmethod
    def register(cls, username, email, name, password, **contact):
        now = datetime.now(UTC)
        user = cls(
            username=username,
            email=email,
            name=name,
            password_hash=hash_password(password),
            created_at=now,
            **{field: contact.get(field) for field in ("phone", "address", "city", "state", "pincode")},
        )
        user.raise_(
            UserRegistered(
                user_id=str(user.id),
                username=username,
                email=email,
                registered_at=now,
            )
        )
        return user

    def check_password(self, password: str) -> bool:
        return verify_password(password, self.password_hash)

    def update_profile(self, **changes):
        unknown = set(changes) - set(_PROFILE_FIELDS)
        if unknown:
            raise ValidationError({field: ["Field cannot be updated"] for field in sorted(unknown)})

        for field, value in changes.items():
            setattr(self, field, value)

        self.raise_(
            ProfileUpdated(
                user_id=str(self.id),
                changed_fields=",".join(sorted(changes)),
            )
        )
