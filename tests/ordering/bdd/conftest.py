"""Shared BDD fixtures and step definitions for checkout."""

import pytest
from protean import current_domain
from pytest_bdd import given, parsers, then

from fashionexpress.order.placement import place_order
from fashionexpress.order.queries import orders_for_user
from fashionexpress.product.product import Product


@pytest.fixture()
def error():
    """Container for captured storefront errors."""
    return {"exc": None}


@pytest.fixture()
def products():
    """Product ids by name."""
    return {}


@pytest.fixture()
def placed():
    """The order placed by the scenario, once there is one."""
    return {"order": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a product "{name}" priced {price:f} discounted to {discount:f} with {stock:d} in stock'))
def discounted_product(make_product, products, name, price, discount, stock):
    products[name] = make_product(name=name, price=price, discount_price=discount, stock=stock)


@given(parsers.cfparse('a product "{name}" priced {price:f} with {stock:d} in stock'))
def product(make_product, products, name, price, stock):
    products[name] = make_product(name=name, price=price, stock=stock)


@given(parsers.cfparse('"{user}" has ordered {quantity:d} of "{name}"'))
def existing_order(products, placed, order_data, user, quantity, name):
    placed["order"] = place_order(user, order_data, [{"product_id": products[name], "quantity": quantity}])


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('"{name}" has {stock:d} in stock'))
def product_stock(products, name, stock):
    assert current_domain.repository_for(Product).get(products[name]).stock == stock


@then(parsers.cfparse('"{user}" has no orders'))
def no_orders(user):
    assert orders_for_user(user) == []
