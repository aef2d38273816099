import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from storefront.api import (
    admin_router,
    auth_router,
    order_router,
    product_router,
    register_exception_handlers,
)
from storefront.user.authentication import issue_token


@pytest.fixture()
def app():
    app = FastAPI()
    app.include_router(auth_router)
    app.include_router(product_router)
    app.include_router(order_router)
    app.include_router(admin_router)
    register_exception_handlers(app)
    return app


@pytest.fixture()
def client(app):
    return TestClient(app)


def bearer(user):
    return {"Authorization": f"Bearer {issue_token(user)}"}


@pytest.fixture()
def customer_headers(customer):
    return bearer(customer)


@pytest.fixture()
def other_headers(other_customer):
    return bearer(other_customer)


@pytest.fixture()
def admin_headers(admin):
    return bearer(admin)


@pytest.fixture()
def listed_product(client, customer_headers):
    """A product listed over HTTP by ``customer``; returns the response body."""
    response = client.post(
        "/api/products",
        json={"name": "Espresso Beans", "price": 10, "category": "Coffee", "emoji": "☕"},
        headers=customer_headers,
    )
    assert response.status_code == 201
    return response.json()
