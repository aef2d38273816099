"""Repository reads shared by handlers and read views."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain


def load(aggregate_cls, identifier):
    """Fetch one aggregate by id; a miss raises ObjectNotFoundError("<Name> not found")."""
    try:
        return current_domain.repository_for(aggregate_cls).get(identifier)
    except ObjectNotFoundError:
        raise ObjectNotFoundError(f"{aggregate_cls.__name__} not found") from None


def fetch_all(queryset) -> list:
    """Every record matching ``queryset``.

    Protean caps an unbounded query at its default page size; when the first
    page comes back short of ``total`` the query is re-run with that limit.
    """
    result = queryset.all()
    if result.total > len(result.items):
        result = queryset.limit(result.total).all()
    return result.items
