"""Pydantic request/response schemas for the storefront API.

JSON keys are camelCase (``productId``, ``inStock``); snake_case names are
accepted on input too.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Request Schemas ---


class RegisterRequest(CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={"examples": [{"name": "Ann", "email": "ann@example.com", "password": "secret1"}]},
    )

    name: str = Field(..., max_length=100)
    email: str = Field(..., max_length=254)
    password: str = Field(..., max_length=128)


class LoginRequest(CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={"examples": [{"email": "ann@example.com", "password": "secret1"}]},
    )

    email: str = Field(..., max_length=254)
    password: str = Field(..., max_length=128)


class CreateProductRequest(CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "name": "Espresso Beans",
                    "price": 12.5,
                    "category": "Coffee",
                    "description": "Dark roast, 250g",
                    "emoji": "☕",
                    "inStock": True,
                }
            ]
        },
    )

    name: str = Field(..., max_length=255)
    price: float = Field(..., ge=0)
    category: str | None = Field(None, max_length=100)
    description: str | None = None
    emoji: str | None = Field(None, max_length=32)
    in_stock: bool | None = None


class UpdateProductRequest(CamelModel):
    """Unknown keys in the body are ignored."""

    name: str | None = Field(None, max_length=255)
    price: float | None = Field(None, ge=0)
    category: str | None = Field(None, max_length=100)
    description: str | None = None
    emoji: str | None = Field(None, max_length=32)
    in_stock: bool | None = None


class BuyNowRequest(CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={"examples": [{"productId": "a1b2c3d4-e5f6-7890-abcd-ef1234567890", "qty": 2}]},
    )

    product_id: str | None = Field(None, max_length=64)
    qty: int = 1


class DeleteProductsRequest(CamelModel):
    ids: list[str] = Field(default_factory=list)


class OrderStatusRequest(CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={"examples": [{"status": "processing"}]},
    )

    status: str | None = Field(None, max_length=20)


class CreateAdminRequest(RegisterRequest):
    pass


# --- Response Schemas ---


class UserSummary(CamelModel):
    id: str
    name: str
    email: str
    role: str


class UserResponse(UserSummary):
    created_at: datetime | None = None


class AuthResponse(CamelModel):
    token: str
    user: UserResponse


class ProductResponse(CamelModel):
    id: str
    name: str
    price: float
    category: str
    description: str = ""
    emoji: str
    in_stock: bool
    created_by: str | None = None
    seller: UserSummary | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class OrderItemResponse(CamelModel):
    product_id: str
    # Current name of the product, None once the product is deleted
    product_name: str | None = None
    name: str
    price: float
    qty: int
    emoji: str


class OrderResponse(CamelModel):
    id: str
    customer_id: str
    customer: UserSummary | None = None
    items: list[OrderItemResponse]
    total: float
    status: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class DeletedCountResponse(CamelModel):
    deleted_count: int
