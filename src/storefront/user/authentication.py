"""Credential checks and bearer tokens.

Tokens are HS256 JWTs carrying the user id in ``sub``. There is no refresh or
rotation; a token is valid until it expires or the signing key changes.
"""

import os
from datetime import UTC, datetime, timedelta

import jwt
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.shared.errors import AuthenticationError
from storefront.user.user import User

JWT_ALGORITHM = "HS256"
DEFAULT_TOKEN_LIFETIME_MINUTES = 7 * 24 * 60

INVALID_CREDENTIALS = "Invalid email or password"


def _secret() -> str:
    return os.getenv("JWT_SECRET", "storefront-dev-secret")


def _lifetime() -> timedelta:
    minutes = os.getenv("JWT_EXPIRES_MINUTES")
    return timedelta(minutes=int(minutes) if minutes else DEFAULT_TOKEN_LIFETIME_MINUTES)


def issue_token(user: User, now: datetime | None = None) -> str:
    issued_at = now or datetime.now(UTC)
    payload = {
        "sub": str(user.id),
        "role": user.role,
        "iat": issued_at,
        "exp": issued_at + _lifetime(),
    }
    return jwt.encode(payload, _secret(), algorithm=JWT_ALGORITHM)


def authenticate(email, password) -> User:
    """Return the User owning these credentials.

    The error message is the same whether the email or the password is wrong.
    """
    user = current_domain.repository_for(User).find_by_email(email)
    if user is None or not user.check_password(password):
        raise AuthenticationError(INVALID_CREDENTIALS)
    return user


def verify_token(token) -> User:
    """Resolve a bearer token to the current User record."""
    if not token:
        raise AuthenticationError("Missing or invalid Authorization header")

    try:
        payload = jwt.decode(token, _secret(), algorithms=[JWT_ALGORITHM])
    except jwt.PyJWTError:
        raise AuthenticationError("Invalid or expired token") from None

    user_id = payload.get("sub")
    if not user_id:
        raise AuthenticationError("Invalid or expired token")

    try:
        return current_domain.repository_for(User).get(user_id)
    except ObjectNotFoundError:
        raise AuthenticationError("User not found") from None
