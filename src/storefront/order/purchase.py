"""Buy now: command and handler.

The order is built from the product as it is at this moment; the item keeps a
copy of the product's name, price and emoji.
"""

from protean import handle
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.order.order import Order
from storefront.product.product import Product
from storefront.shared.identifiers import ensure_identifier
from storefront.shared.lookup import load
from storefront.user.access import require_role
from storefront.user.user import UserRole
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Order")
class BuyNow:
    """Place an order for a single product."""

    actor_id: Identifier(required=True)
    actor_role: String(required=True, max_length=20)
    product_id: String(max_length=64)
    qty: Integer(default=1)


@storefront.command_handler(part_of=Order)
class BuyNowHandler:
    @handle(BuyNow)
    def buy_now(self, command):
        require_role(command.actor_role, [UserRole.CUSTOMER, UserRole.ADMIN])
        product_id = ensure_identifier(command.product_id, "product_id", "productId")

        product = load(Product, product_id)
        order = Order.buy_now(
            customer_id=command.actor_id,
            product=product,
            qty=command.qty,
        )
        current_domain.repository_for(Order).add(order)

        logger.info(
            "Placed order",
            order_id=str(order.id),
            customer_id=str(command.actor_id),
            product_id=product_id,
            qty=command.qty,
            total=order.total,
        )
        return str(order.id)
