"""Shared BDD fixtures and step definitions for the storefront."""

import pytest
from pytest_bdd import given, parsers, then
from storefront.cart.store import CartStore


# ---------------------------------------------------------------------------
# Cart Given steps
# ---------------------------------------------------------------------------
@given("an empty cart", target_fixture="cart")
def _empty_cart():
    return CartStore()


@given(
    parsers.cfparse(
        'a cart with product "{first}" priced {first_price:f} quantity {first_qty:d} '
        'and product "{second}" priced {second_price:f} in size "{size}"'
    ),
    target_fixture="cart",
)
def _filled_cart(first, first_price, first_qty, second, second_price, size):
    cart = CartStore()
    cart.add_item(product_id=first, name=f"Product {first}", price=first_price, quantity=first_qty)
    cart.add_item(product_id=second, name=f"Product {second}", price=second_price, size=size)
    return cart


# ---------------------------------------------------------------------------
# Cart Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the cart has {count:d} line"))
@then(parsers.cfparse("the cart has {count:d} lines"))
def _cart_has_lines(cart, count):
    assert len(cart.state.items) == count


@then(parsers.cfparse("the cart total is {total:f}"))
def _cart_total(cart, total):
    assert cart.state.total == pytest.approx(total)


@then(parsers.cfparse("the cart item count is {count:d}"))
def _cart_item_count(cart, count):
    assert cart.state.item_count == count
