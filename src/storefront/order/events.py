"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Order")
class OrderPlaced:
    """A customer bought a product with "buy now"."""

    __version__ = 1

    order_id: Identifier(required=True)
    customer_id: Identifier(required=True)
    product_id: Identifier(required=True)
    qty: Integer(required=True)
    total: Float(required=True)
    placed_at: DateTime(required=True)


@storefront.event(part_of="Order")
class OrderCancelled:
    """An active order was cancelled by its customer or an admin."""

    __version__ = 1

    order_id: Identifier(required=True)
    previous_status: String(required=True)
    cancelled_by: Identifier(required=True)
    cancelled_at: DateTime(required=True)


@storefront.event(part_of="Order")
class OrderStatusChanged:
    """An admin set an order's status."""

    __version__ = 1

    order_id: Identifier(required=True)
    previous_status: String(required=True)
    new_status: String(required=True)
    changed_by: Identifier(required=True)
    changed_at: DateTime(required=True)
