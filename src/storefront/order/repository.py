"""Repository for the Order aggregate."""

from storefront.domain import storefront
from storefront.order.order import ACTIVE_STATUSES, Order
from storefront.shared.lookup import fetch_all


@storefront.repository(part_of=Order)
class OrderRepository:
    def list_newest_first(self) -> list[Order]:
        """Every order, most recently placed first."""
        orders = fetch_all(self._dao.query)
        return sorted(orders, key=lambda o: o.created_at, reverse=True)

    def for_customer(self, customer_id) -> list[Order]:
        """Orders placed by ``customer_id``, most recent first."""
        orders = fetch_all(self._dao.query.filter(customer_id=str(customer_id)))
        return sorted(orders, key=lambda o: o.created_at, reverse=True)

    def active_referencing(self, product_ids) -> list[Order]:
        """Pending or processing orders with an item for any of ``product_ids``."""
        wanted = {str(product_id) for product_id in product_ids}
        active = fetch_all(self._dao.query.filter(status__in=list(ACTIVE_STATUSES)))
        return [order for order in active if any(order.references(product_id) for product_id in wanted)]
