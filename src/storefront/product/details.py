"""Product details management: command and handler."""

from protean import handle
from protean.fields import Boolean, Float, Identifier, String, Text
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.product.product import Product
from storefront.shared.identifiers import ensure_identifier
from storefront.shared.lookup import load
from storefront.user.access import require_owner_or_admin


@storefront.command(part_of="Product")
class UpdateProduct:
    """Edit a product's listing. Fields left unset keep their current value."""

    product_id: Identifier(required=True)
    actor_id: Identifier(required=True)
    actor_role: String(required=True, max_length=20)
    name: String(max_length=255)
    price: Float(min_value=0.0)
    category: String(max_length=100)
    description: Text()
    emoji: String(max_length=32)
    in_stock: Boolean()


@storefront.command_handler(part_of=Product)
class ManageProductDetailsHandler:
    @handle(UpdateProduct)
    def update_product(self, command):
        product_id = ensure_identifier(command.product_id, "product_id", "product ID")

        repo = current_domain.repository_for(Product)
        product = load(Product, product_id)
        require_owner_or_admin(command.actor_id, command.actor_role, product.created_by)

        product.update_details(
            name=command.name,
            price=command.price,
            category=command.category,
            description=command.description,
            emoji=command.emoji,
            in_stock=command.in_stock,
        )
        repo.add(product)
