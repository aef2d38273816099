"""User aggregate: the accounts that buy, sell and administer the store."""

from datetime import datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, String
from werkzeug.security import check_password_hash, generate_password_hash

from storefront.domain import storefront

MIN_PASSWORD_LENGTH = 6


class UserRole(Enum):
    """Enumeration of account roles."""

    CUSTOMER = "customer"
    ADMIN = "admin"


def normalize_email(email):
    return email.strip().lower() if email else email


@storefront.aggregate
class User:
    """A registered account, identified by a system ID and a unique email.

    Every account can sell (products carry the creator's ID) and buy. The role
    is fixed at creation: self-registration always yields a customer, and
    admins are only created by another admin.
    """

    name: String(required=True, max_length=100)
    email: String(required=True, max_length=254, unique=True)
    password_hash: String(required=True, max_length=255)
    role: String(choices=UserRole, default=UserRole.CUSTOMER.value)
    created_at: DateTime(default=datetime.now)

    @invariant.post
    def email_must_be_well_formed(self):
        email = self.email
        if not email:
            return

        if any(ch.isspace() for ch in email) or email.count("@") != 1:
            raise ValidationError({"email": [f"Invalid email address: {email!r}"]})

        local_part, domain_part = email.split("@", 1)
        if not local_part or local_part.startswith(".") or local_part.endswith("."):
            raise ValidationError({"email": [f"Invalid email address: {email!r}"]})

        if "." not in domain_part or domain_part.startswith(".") or domain_part.endswith("."):
            raise ValidationError({"email": [f"Invalid email address: {email!r}"]})

        if ".." in email:
            raise ValidationError({"email": [f"Invalid email address: {email!r}"]})

    @classmethod
    def register(cls, name, email, password, role=UserRole.CUSTOMER.value):
        from storefront.user.events import UserRegistered

        if not password:
            raise ValidationError({"password": ["is required"]})
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError({"password": [f"Password must be at least {MIN_PASSWORD_LENGTH} characters"]})

        now = datetime.now()
        user = cls(
            name=name.strip() if name else name,
            email=normalize_email(email),
            password_hash=generate_password_hash(password),
            role=role,
            created_at=now,
        )
        user.raise_(
            UserRegistered(
                user_id=user.id,
                name=user.name,
                email=user.email,
                role=user.role,
                registered_at=now,
            )
        )
        return user

    @property
    def is_admin(self):
        return self.role == UserRole.ADMIN.value

    def check_password(self, password):
        """Return True if ``password`` matches the stored hash."""
        if not password or not self.password_hash:
            return False
        return check_password_hash(self.password_hash, password)
