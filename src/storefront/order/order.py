"""Order aggregate: a purchase of a single product, placed with "buy now".

Status values:
    pending → processing → completed
    pending / processing → cancelled  (customer cancel)

Customers may only cancel while the order is active. Admins set the status
directly and are not bound by the transitions above.
"""

import math
from datetime import datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String

from storefront.domain import storefront
from storefront.product.product import DEFAULT_EMOJI
from storefront.shared.errors import ConflictError


class OrderStatus(Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


# Orders in these states still hold a claim on their products
ACTIVE_STATUSES = (OrderStatus.PENDING.value, OrderStatus.PROCESSING.value)


def validate_status(status):
    allowed = [s.value for s in OrderStatus]
    if status not in allowed:
        raise ValidationError({"status": [f"status must be one of: {', '.join(allowed)}"]})
    return status


@storefront.entity(part_of="Order")
class OrderItem:
    """A line on an order.

    ``name``, ``price`` and ``emoji`` are copied from the product when the
    order is placed and never follow later edits to the product.
    """

    product_id: Identifier(required=True)
    name: String(required=True, max_length=255)
    price: Float(required=True, min_value=0.0)
    qty: Integer(required=True, min_value=1, default=1)
    emoji: String(max_length=32, default=DEFAULT_EMOJI)


@storefront.aggregate
class Order:
    """Order aggregate root."""

    customer_id: Identifier(required=True)
    items: HasMany(OrderItem)
    total: Float(required=True, min_value=0.0)
    status: String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @invariant.post
    def total_matches_items(self):
        if not self.items:
            return
        expected = sum(item.price * item.qty for item in self.items)
        if not math.isclose(self.total, expected, rel_tol=1e-9, abs_tol=1e-9):
            raise ValidationError({"total": ["Order total must equal the sum of item price times quantity"]})

    @classmethod
    def buy_now(cls, customer_id, product, qty=1):
        """Place a pending order for ``qty`` units of ``product``."""
        from storefront.order.events import OrderPlaced

        if qty is None:
            qty = 1
        if isinstance(qty, bool) or not isinstance(qty, int) or qty < 1:
            raise ValidationError({"qty": ["qty must be a number >= 1"]})

        total = product.price * qty
        now = datetime.now()

        order = cls(
            customer_id=customer_id,
            total=total,
            status=OrderStatus.PENDING.value,
            created_at=now,
            updated_at=now,
        )
        item = OrderItem(
            product_id=product.id,
            name=product.name,
            price=product.price,
            qty=qty,
            emoji=product.emoji or DEFAULT_EMOJI,
        )
        order.add_items(item)

        order.raise_(
            OrderPlaced(
                order_id=order.id,
                customer_id=customer_id,
                product_id=product.id,
                qty=qty,
                total=total,
                placed_at=now,
            )
        )
        return order

    @property
    def is_active(self):
        return self.status in ACTIVE_STATUSES

    def references(self, product_id):
        return any(str(item.product_id) == str(product_id) for item in self.items)

    def cancel(self, cancelled_by):
        from storefront.order.events import OrderCancelled

        if not self.is_active:
            raise ConflictError(f"Order is already {self.status}; it cannot be cancelled")

        previous = self.status
        self.status = OrderStatus.CANCELLED.value
        self.updated_at = datetime.now()

        self.raise_(
            OrderCancelled(
                order_id=self.id,
                previous_status=previous,
                cancelled_by=str(cancelled_by),
                cancelled_at=self.updated_at,
            )
        )

    def change_status(self, status, changed_by):
        """Set the status to any known value; used by admins only."""
        from storefront.order.events import OrderStatusChanged

        validate_status(status)

        previous = self.status
        self.status = status
        self.updated_at = datetime.now()

        self.raise_(
            OrderStatusChanged(
                order_id=self.id,
                previous_status=previous,
                new_status=status,
                changed_by=str(changed_by),
                changed_at=self.updated_at,
            )
        )
