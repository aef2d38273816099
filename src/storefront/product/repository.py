"""Repository for the Product aggregate."""

from storefront.domain import storefront
from storefront.product.product import Product
from storefront.shared.lookup import fetch_all


@storefront.repository(part_of=Product)
class ProductRepository:
    def list_newest_first(self) -> list[Product]:
        """Every product, most recently created first."""
        products = fetch_all(self._dao.query)
        return sorted(products, key=lambda p: p.created_at, reverse=True)

    def find_many(self, product_ids) -> dict:
        """Map each of ``product_ids`` that still exists to its Product."""
        wanted = {str(product_id) for product_id in product_ids if product_id}
        if not wanted:
            return {}
        products = fetch_all(self._dao.query.filter(id__in=list(wanted)))
        return {str(product.id): product for product in products}
