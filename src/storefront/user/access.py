"""Role and ownership checks applied before every mutating operation."""

from storefront.shared.errors import ForbiddenError
from storefront.user.user import UserRole


def require_role(role, allowed_roles):
    """Raise ForbiddenError unless ``role`` is one of ``allowed_roles``."""
    allowed = {r.value if isinstance(r, UserRole) else r for r in allowed_roles}
    if role not in allowed:
        raise ForbiddenError("Access denied: insufficient role")


def require_owner_or_admin(actor_id, actor_role, owner_id):
    """Pass for admins and for the owner of the resource; raise otherwise.

    A resource without an owner can only be touched by an admin.
    """
    if actor_role == UserRole.ADMIN.value:
        return
    if owner_id is None or str(actor_id) != str(owner_id):
        raise ForbiddenError("Access denied: you do not own this resource")
