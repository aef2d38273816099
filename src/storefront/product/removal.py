"""Product removal: single and bulk deletion, both blocked by active orders.

No active order may reference a deleted product. The check and the delete are
separate repository calls, so an order placed in between is not caught.
"""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, List, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.order.order import Order
from storefront.product.product import Product
from storefront.shared.errors import ConflictError
from storefront.shared.identifiers import ensure_identifier
from storefront.shared.lookup import load
from storefront.user.access import require_owner_or_admin, require_role
from storefront.user.user import UserRole
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Product")
class DeleteProduct:
    """Delete one product. Only its owner or an admin may."""

    product_id: Identifier(required=True)
    actor_id: Identifier(required=True)
    actor_role: String(required=True, max_length=20)


@storefront.command(part_of="Product")
class DeleteProducts:
    """Delete a set of products at once. Admin only; all or nothing."""

    product_ids: List(content_type=String)
    actor_id: Identifier(required=True)
    actor_role: String(required=True, max_length=20)


@storefront.command_handler(part_of=Product)
class ProductRemovalHandler:
    @handle(DeleteProduct)
    def delete_product(self, command):
        product_id = ensure_identifier(command.product_id, "product_id", "product ID")

        repo = current_domain.repository_for(Product)
        product = load(Product, product_id)
        require_owner_or_admin(command.actor_id, command.actor_role, product.created_by)

        if current_domain.repository_for(Order).active_referencing([product_id]):
            raise ConflictError("Cannot delete: active orders exist for this product. Mark it out of stock instead.")

        repo._dao.delete(product)
        logger.info("Deleted product", product_id=product_id, deleted_by=str(command.actor_id))

    @handle(DeleteProducts)
    def delete_products(self, command):
        require_role(command.actor_role, [UserRole.ADMIN])

        if not command.product_ids:
            raise ValidationError({"ids": ["ids[] is required"]})
        product_ids = [ensure_identifier(product_id, "ids", "product ID") for product_id in command.product_ids]

        blocking = current_domain.repository_for(Order).active_referencing(product_ids)
        if blocking:
            logger.warning(
                "Rejected bulk product deletion",
                requested=len(product_ids),
                blocking_orders=[str(order.id) for order in blocking],
            )
            raise ConflictError(
                "Cannot delete: there are active orders for one or more selected products. "
                "Mark out of stock instead."
            )

        repo = current_domain.repository_for(Product)
        existing = repo.find_many(product_ids)
        for product in existing.values():
            repo._dao.delete(product)

        logger.info("Deleted products", requested=len(product_ids), deleted=len(existing))
        return len(existing)
