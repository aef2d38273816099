"""Admin order management: status changes and hard deletes."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.order.order import Order, validate_status
from storefront.shared.identifiers import ensure_identifier
from storefront.shared.lookup import load
from storefront.user.access import require_role
from storefront.user.user import UserRole
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Order")
class ChangeOrderStatus:
    order_id: Identifier(required=True)
    status: String(max_length=20)
    actor_id: Identifier(required=True)
    actor_role: String(required=True, max_length=20)


@storefront.command(part_of="Order")
class DeleteOrder:
    order_id: Identifier(required=True)
    actor_id: Identifier(required=True)
    actor_role: String(required=True, max_length=20)


@storefront.command_handler(part_of=Order)
class OrderAdministrationHandler:
    @handle(ChangeOrderStatus)
    def change_status(self, command):
        require_role(command.actor_role, [UserRole.ADMIN])
        order_id = ensure_identifier(command.order_id, "order_id", "order ID")
        validate_status(command.status)

        repo = current_domain.repository_for(Order)
        order = load(Order, order_id)
        order.change_status(command.status, changed_by=command.actor_id)
        repo.add(order)
        logger.info("Changed order status", order_id=order_id, status=command.status)

    @handle(DeleteOrder)
    def delete_order(self, command):
        require_role(command.actor_role, [UserRole.ADMIN])
        order_id = ensure_identifier(command.order_id, "order_id", "order ID")

        repo = current_domain.repository_for(Order)
        order = load(Order, order_id)
        repo._dao.delete(order)
        logger.info("Deleted order", order_id=order_id, deleted_by=str(command.actor_id))
