"""Domain events for the Product aggregate."""

from protean.fields import Boolean, DateTime, Float, Identifier, String

from storefront.domain import storefront


@storefront.event(part_of="Product")
class ProductCreated:
    """A user put a new product up for sale."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    price: Float(required=True)
    category: String(required=True)
    created_by: Identifier()
    created_at: DateTime(required=True)


@storefront.event(part_of="Product")
class ProductDetailsUpdated:
    """The owner or an admin edited a product's listing."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    price: Float(required=True)
    category: String(required=True)
    in_stock: Boolean()
    changed_fields: String()
