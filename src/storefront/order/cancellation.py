"""Order cancellation: command and handler."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.order.order import Order
from storefront.shared.identifiers import ensure_identifier
from storefront.shared.lookup import load
from storefront.user.access import require_owner_or_admin
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Order")
class CancelOrder:
    """Cancel a pending or processing order. Only its customer or an admin may."""

    order_id: Identifier(required=True)
    actor_id: Identifier(required=True)
    actor_role: String(required=True, max_length=20)


@storefront.command_handler(part_of=Order)
class CancelOrderHandler:
    @handle(CancelOrder)
    def cancel_order(self, command):
        order_id = ensure_identifier(command.order_id, "order_id", "order ID")

        repo = current_domain.repository_for(Order)
        order = load(Order, order_id)
        require_owner_or_admin(command.actor_id, command.actor_role, order.customer_id)

        order.cancel(cancelled_by=command.actor_id)
        repo.add(order)
        logger.info("Cancelled order", order_id=order_id, cancelled_by=str(command.actor_id))
