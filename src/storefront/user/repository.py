"""Repository for the User aggregate."""

from storefront.domain import storefront
from storefront.shared.lookup import fetch_all
from storefront.user.user import User, normalize_email


@storefront.repository(part_of=User)
class UserRepository:
    def find_by_email(self, email) -> User | None:
        """Find a User by email, ignoring case and surrounding whitespace."""
        if not email:
            return None
        return self._dao.query.filter(email=normalize_email(email)).all().first

    def find_many(self, user_ids) -> dict:
        """Map each of ``user_ids`` that still exists to its User."""
        wanted = {str(user_id) for user_id in user_ids if user_id}
        if not wanted:
            return {}
        users = fetch_all(self._dao.query.filter(id__in=list(wanted)))
        return {str(user.id): user for user in users}
