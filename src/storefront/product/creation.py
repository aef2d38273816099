"""Product creation: command and handler."""

from protean import handle
from protean.fields import Boolean, Float, Identifier, String, Text
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.product.product import Product
from storefront.user.access import require_role
from storefront.user.user import UserRole
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Product")
class CreateProduct:
    """List a new product for sale; the acting user becomes its owner."""

    actor_id: Identifier(required=True)
    actor_role: String(required=True, max_length=20)
    name: String(required=True, max_length=255)
    price: Float(required=True, min_value=0.0)
    category: String(max_length=100)
    description: Text()
    emoji: String(max_length=32)
    in_stock: Boolean()


@storefront.command_handler(part_of=Product)
class CreateProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        require_role(command.actor_role, [UserRole.CUSTOMER, UserRole.ADMIN])

        product = Product.create(
            name=command.name,
            price=command.price,
            created_by=command.actor_id,
            category=command.category,
            description=command.description,
            emoji=command.emoji,
            in_stock=command.in_stock,
        )
        current_domain.repository_for(Product).add(product)
        logger.info("Created product", product_id=str(product.id), created_by=str(command.actor_id))
        return str(product.id)
