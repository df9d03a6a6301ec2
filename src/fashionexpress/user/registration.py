"""User registration and profile updates — commands and handlers."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from fashionexpress.domain import fashionexpress
from fashionexpress.user.user import User


@fashionexpress.command(part_of="User")
class RegisterUser:
    """Create a shopper account."""

    username: String(required=True, max_length=50)
    password: String(required=True, max_length=128)
    email: String(required=True, max_length=254)
    name: String(required=True, max_length=100)
    phone: String(max_length=20)
    address: String(max_length=255)
    city: String(max_length=100)
    state: String(max_length=100)
    pincode: String(max_length=20)


@fashionexpress.command(part_of="User")
class UpdateProfile:
    """Partial update: only the fields that are set change."""

    user_id: Identifier(required=True)
    name: String(max_length=100)
    email: String(max_length=254)
    phone: String(max_length=20)
    address: String(max_length=255)
    city: String(max_length=100)
    state: String(max_length=100)
    pincode: String(max_length=20)


def _ensure_unique(repo, username=None, email=None, exclude_id=None):
    if username is not None:
        existing = repo.by_username(username)
        if existing is not None and str(existing.id) != str(exclude_id):
            raise ValidationError({"username": ["Username already exists"]})
    if email is not None:
        existing = repo.by_email(email)
        if existing is not None and str(existing.id) != str(exclude_id):
            raise ValidationError({"email": ["Email already exists"]})


@fashionexpress.command_handler(part_of=User)
class ManageUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        repo = current_domain.repository_for(User)
        _ensure_unique(repo, username=command.username, email=command.email)

        user = User.register(
            username=command.username,
            email=command.email,
            name=command.name,
            password=command.password,
            phone=command.phone,
            address=command.address,
            city=command.city,
            state=command.state,
            pincode=command.pincode,
        )
        repo.add(user)
        return str(user.id)

    @handle(UpdateProfile)
    def update_profile(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)

        changes = {
            field: getattr(command, field)
            for field in ("name", "email", "phone", "address", "city", "state", "pincode")
            if getattr(command, field) is not None
        }
        if "email" in changes:
            _ensure_unique(repo, email=changes["email"], exclude_id=user.id)

        user.update_profile(**changes)
        repo.add(user)
