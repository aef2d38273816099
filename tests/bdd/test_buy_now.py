"""BDD tests for buy now."""

from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, scenarios, then, when
from storefront.order.order import Order
from storefront.product.product import Product
from storefront.shared.errors import ConflictError

scenarios("features/buy_now.feature")


@given(parsers.cfparse("a product priced at {price:g}"), target_fixture="product")
def product_priced_at(price):
    product = Product.create(name="Espresso Beans", price=price, created_by="seller-1")
    product._events.clear()
    return product


@when(parsers.cfparse("the customer buys {qty:d} units"), target_fixture="order")
def customer_buys(product, qty, error):
    try:
        return Order.buy_now(customer_id="customer-1", product=product, qty=qty)
    except ValidationError as exc:
        error["exc"] = exc
        return None


@when(parsers.cfparse("the product price is changed to {price:g}"))
def change_price(product, price):
    product.update_details(price=price)


@when(parsers.cfparse('the order is marked "{status}"'))
def mark_order(order, status):
    order.change_status(status, changed_by="admin-1")


@when("the customer cancels the order")
def cancel_order(order, error):
    try:
        order.cancel(cancelled_by="customer-1")
    except ConflictError as exc:
        error["exc"] = exc


@then(parsers.cfparse("the order total is {total:g}"))
def order_total_is(order, total):
    assert order.total == total


@then(parsers.cfparse("the order has {count:d} item with quantity {qty:d}"))
def order_items(order, count, qty):
    assert len(order.items) == count
    assert order.items[0].qty == qty


@then(parsers.cfparse("the order item price is {price:g}"))
def order_item_price(order, price):
    assert order.items[0].price == price


@then(parsers.cfparse('the order status is "{status}"'))
def order_status_is(order, status):
    assert order.status == status
