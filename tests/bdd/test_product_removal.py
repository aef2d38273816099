"""BDD tests for product removal."""

import pytest
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain
from pytest_bdd import given, parsers, scenarios, then, when
from storefront.order.cancellation import CancelOrder
from storefront.product.product import Product
from storefront.product.removal import DeleteProduct, DeleteProducts
from storefront.shared.errors import ConflictError

scenarios("features/product_removal.feature")


@pytest.fixture()
def catalogue():
    """Products listed in the scenario, by name."""
    return {}


@given(parsers.cfparse('a seller with a product "{name}"'))
def seller_with_product(customer, make_product, catalogue, name):
    catalogue[name] = make_product(customer, name=name)


@given(parsers.cfparse('a customer has a pending order for "{name}"'), target_fixture="order")
def pending_order(other_customer, place_order, catalogue, name):
    return place_order(other_customer, catalogue[name])


@given("the customer cancels their order")
def customer_cancels(other_customer, order):
    current_domain.process(
        CancelOrder(order_id=str(order.id), actor_id=str(other_customer.id), actor_role=other_customer.role),
        asynchronous=False,
    )


@when(parsers.cfparse('the seller deletes "{name}"'))
def seller_deletes(customer, catalogue, name, error):
    try:
        current_domain.process(
            DeleteProduct(product_id=str(catalogue[name].id), actor_id=str(customer.id), actor_role=customer.role),
            asynchronous=False,
        )
    except ConflictError as exc:
        error["exc"] = exc


@when(parsers.cfparse('an admin deletes "{first}" and "{second}" together'))
def admin_bulk_deletes(admin, catalogue, first, second, error):
    try:
        current_domain.process(
            DeleteProducts(
                product_ids=[str(catalogue[first].id), str(catalogue[second].id)],
                actor_id=str(admin.id),
                actor_role=admin.role,
            ),
            asynchronous=False,
        )
    except ConflictError as exc:
        error["exc"] = exc


@then(parsers.cfparse('"{name}" is no longer listed'))
def not_listed(catalogue, name):
    with pytest.raises(ObjectNotFoundError):
        current_domain.repository_for(Product).get(catalogue[name].id)


@then(parsers.cfparse('"{name}" is still listed'))
def still_listed(catalogue, name):
    assert current_domain.repository_for(Product).get(catalogue[name].id).name == name
