"""FastAPI dependencies that authenticate the caller and gate on role."""

from fastapi import Depends, Header

from storefront.shared.errors import AuthenticationError
from storefront.user.access import require_role
from storefront.user.authentication import verify_token
from storefront.user.user import User


async def current_user(authorization: str | None = Header(None)) -> User:
    """Resolve ``Authorization: Bearer <token>`` to the calling User."""
    if not authorization or not authorization.startswith("Bearer "):
        raise AuthenticationError("Missing or invalid Authorization header")
    return verify_token(authorization.split(" ", 1)[1].strip())


def require_roles(*roles):
    """Dependency factory: the current user, provided their role is in ``roles``."""

    async def dependency(user: User = Depends(current_user)) -> User:
        require_role(user.role, roles)
        return user

    return dependency


any_user = require_roles("customer", "admin")
admin_user = require_roles("admin")
