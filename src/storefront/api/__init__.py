"""Storefront HTTP API package."""

from storefront.api.errors import register_exception_handlers
from storefront.api.routes import admin_router, auth_router, order_router, product_router

__all__ = [
    "auth_router",
    "product_router",
    "order_router",
    "admin_router",
    "register_exception_handlers",
]
