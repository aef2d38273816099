"""Read views over the catalogue and the order ledger.

Records are joined in memory with the users (and products) they point at, so
callers get seller and customer details without a second round trip. The
optional ``q`` filter is a case-insensitive substring match.
"""

from dataclasses import dataclass, field

from protean.utils.globals import current_domain

from storefront.order.order import Order
from storefront.product.product import Product
from storefront.user.user import User


@dataclass
class ProductListing:
    product: Product
    seller: User | None = None


@dataclass
class OrderListing:
    order: Order
    customer: User | None = None
    # product_id -> current product name, for items whose product still exists
    product_names: dict = field(default_factory=dict)


def _matches(q, *values):
    needle = q.strip().lower()
    return any(needle in str(value).lower() for value in values if value is not None)


def list_products(q=None) -> list[ProductListing]:
    """All products, newest first, each with its seller resolved."""
    products = current_domain.repository_for(Product).list_newest_first()
    sellers = current_domain.repository_for(User).find_many(p.created_by for p in products)

    listings = [ProductListing(product=p, seller=sellers.get(str(p.created_by))) for p in products]
    if q and q.strip():
        listings = [
            listing
            for listing in listings
            if _matches(
                q,
                listing.product.name,
                listing.product.category,
                listing.seller.name if listing.seller else None,
                listing.seller.email if listing.seller else None,
            )
        ]
    return listings


def _order_listings(orders) -> list[OrderListing]:
    customers = current_domain.repository_for(User).find_many(o.customer_id for o in orders)
    products = current_domain.repository_for(Product).find_many(
        item.product_id for order in orders for item in order.items
    )
    names = {product_id: product.name for product_id, product in products.items()}

    return [
        OrderListing(
            order=order,
            customer=customers.get(str(order.customer_id)),
            product_names={
                str(item.product_id): names[str(item.product_id)]
                for item in order.items
                if str(item.product_id) in names
            },
        )
        for order in orders
    ]


def list_orders(q=None) -> list[OrderListing]:
    """All orders, newest first, with customer and live product names resolved."""
    listings = _order_listings(current_domain.repository_for(Order).list_newest_first())
    if q and q.strip():
        listings = [
            listing
            for listing in listings
            if _matches(
                q,
                listing.order.status,
                listing.order.total,
                listing.customer.name if listing.customer else None,
                listing.customer.email if listing.customer else None,
            )
        ]
    return listings


def list_customer_orders(customer_id) -> list[OrderListing]:
    """Orders placed by one customer, newest first."""
    return _order_listings(current_domain.repository_for(Order).for_customer(customer_id))


def describe_product(product) -> ProductListing:
    seller = current_domain.repository_for(User).find_many([product.created_by])
    return ProductListing(product=product, seller=seller.get(str(product.created_by)))


def describe_order(order) -> OrderListing:
    return _order_listings([order])[0]
