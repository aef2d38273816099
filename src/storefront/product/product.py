"""Product aggregate root: a listing offered for sale by one of the users."""

from datetime import datetime

from protean.fields import Boolean, DateTime, Float, Identifier, String, Text

from storefront.domain import storefront

DEFAULT_CATEGORY = "Uncategorized"
DEFAULT_EMOJI = "🛒"

# Fields a seller or admin may change after creation
EDITABLE_FIELDS = ("name", "price", "category", "description", "emoji", "in_stock")


@storefront.aggregate
class Product:
    """Product aggregate root.

    ``created_by`` is the owning seller; only the owner or an admin may edit
    or delete the product.
    """

    name: String(required=True, max_length=255)
    price: Float(required=True, min_value=0.0)
    category: String(max_length=100, default=DEFAULT_CATEGORY)
    description: Text(default="")
    emoji: String(max_length=32, default=DEFAULT_EMOJI)
    in_stock: Boolean(default=True)
    created_by: Identifier()
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @classmethod
    def create(
        cls,
        name,
        price,
        created_by=None,
        category=None,
        description=None,
        emoji=None,
        in_stock=None,
    ):
        from storefront.product.events import ProductCreated

        now = datetime.now()
        product = cls(
            name=name.strip() if isinstance(name, str) else name,
            price=price,
            category=category or DEFAULT_CATEGORY,
            description=description or "",
            emoji=emoji or DEFAULT_EMOJI,
            in_stock=True if in_stock is None else in_stock,
            created_by=created_by,
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductCreated(
                product_id=product.id,
                name=product.name,
                price=product.price,
                category=product.category,
                created_by=created_by,
                created_at=now,
            )
        )
        return product

    def update_details(self, **changes):
        """Apply the editable fields present in ``changes``; others are ignored."""
        from storefront.product.events import ProductDetailsUpdated

        applied = {field: value for field, value in changes.items() if field in EDITABLE_FIELDS and value is not None}
        if "name" in applied and isinstance(applied["name"], str):
            applied["name"] = applied["name"].strip()

        for field, value in applied.items():
            setattr(self, field, value)

        self.updated_at = datetime.now()

        self.raise_(
            ProductDetailsUpdated(
                product_id=self.id,
                name=self.name,
                price=self.price,
                category=self.category,
                in_stock=self.in_stock,
                changed_fields=",".join(sorted(applied)),
            )
        )
        return applied
