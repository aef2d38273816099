import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session")
def _storefront_domain(request):
    """Initialize the storefront domain once per session."""
    os.environ["PROTEAN_ENV"] = request.config.option.env
    os.environ.setdefault("JWT_SECRET", "test-secret")

    from storefront.domain import storefront

    storefront.init()
    return storefront


@pytest.fixture(scope="session", autouse=True)
def setup_db(_storefront_domain):
    from storefront.utils.db import drop_db, setup_db

    setup_db(_storefront_domain)

    yield

    drop_db(_storefront_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_storefront_domain):
    """Push domain context before each test, cleanup after."""
    ctx = _storefront_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()


# ---------------------------------------------------------------------------
# Account and catalogue fixtures
# ---------------------------------------------------------------------------
def _register(command_cls, name, email, password="secret1"):
    from protean.utils.globals import current_domain
    from storefront.user.user import User

    user_id = current_domain.process(
        command_cls(name=name, email=email, password=password),
        asynchronous=False,
    )
    return current_domain.repository_for(User).get(user_id)


@pytest.fixture()
def customer():
    from storefront.user.registration import RegisterUser

    return _register(RegisterUser, "Ann", "ann@example.com")


@pytest.fixture()
def other_customer():
    from storefront.user.registration import RegisterUser

    return _register(RegisterUser, "Bob", "bob@example.com")


@pytest.fixture()
def admin():
    from storefront.user.registration import CreateAdminUser

    return _register(CreateAdminUser, "Ada", "ada@example.com")


@pytest.fixture()
def make_product():
    """Factory: list a product on behalf of ``owner`` and return it."""
    from protean.utils.globals import current_domain
    from storefront.product.creation import CreateProduct
    from storefront.product.product import Product

    def _make(owner, name="Espresso Beans", price=10.0, **fields):
        product_id = current_domain.process(
            CreateProduct(actor_id=str(owner.id), actor_role=owner.role, name=name, price=price, **fields),
            asynchronous=False,
        )
        return current_domain.repository_for(Product).get(product_id)

    return _make


@pytest.fixture()
def place_order():
    """Factory: buy ``qty`` of ``product`` as ``buyer`` and return the Order."""
    from protean.utils.globals import current_domain
    from storefront.order.order import Order
    from storefront.order.purchase import BuyNow

    def _place(buyer, product, qty=1):
        order_id = current_domain.process(
            BuyNow(actor_id=str(buyer.id), actor_role=buyer.role, product_id=str(product.id), qty=qty),
            asynchronous=False,
        )
        return current_domain.repository_for(Order).get(order_id)

    return _place
