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


def pytest_sessionstart(session):
    """Select the config overlay before any test module imports the domain."""
    os.environ["PROTEAN_ENV"] = session.config.option.env


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
        elif "/bdd/" in test_path:
            item.add_marker(pytest.mark.bdd)


@pytest.fixture(scope="session")
def fashionexpress_bed():
    from protean.integrations.pytest import DomainFixture

    from fashionexpress.domain import fashionexpress

    bed = DomainFixture(fashionexpress)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(fashionexpress_bed):
    with fashionexpress_bed.domain_context():
        yield


# ---------------------------------------------------------------------------
# Catalogue and account builders
# ---------------------------------------------------------------------------
@pytest.fixture()
def make_category():
    from protean import current_domain

    from fashionexpress.category.management import CreateCategory

    def _make(name="Women", image="https://img.example.com/women.jpg", description=None):
        return current_domain.process(
            CreateCategory(name=name, image=image, description=description),
            asynchronous=False,
        )

    return _make


@pytest.fixture()
def make_product(make_category):
    from protean import current_domain

    from fashionexpress.product.creation import CreateProduct

    default_category = {}

    def _make(
        name="Summer Floral Dress",
        price=49.99,
        stock=10,
        discount_price=None,
        category_id=None,
        brand="StyleVista",
        description="Floral print summer dress.",
        is_featured=False,
    ):
        if category_id is None:
            if "id" not in default_category:
                default_category["id"] = make_category()
            category_id = default_category["id"]

        return current_domain.process(
            CreateProduct(
                name=name,
                description=description,
                price=price,
                discount_price=discount_price,
                stock=stock,
                image="https://img.example.com/product.jpg",
                category_id=category_id,
                brand=brand,
                is_featured=is_featured,
            ),
            asynchronous=False,
        )

    return _make


@pytest.fixture()
def make_user():
    from protean import current_domain

    from fashionexpress.user.registration import RegisterUser

    def _make(username="asha", password="s3cret-pass", email=None, name="Asha Rao", **contact):
        return current_domain.process(
            RegisterUser(
                username=username,
                password=password,
                email=email or f"{username}@example.com",
                name=name,
                **contact,
            ),
            asynchronous=False,
        )

    return _make


@pytest.fixture()
def stock_of():
    from protean import current_domain

    from fashionexpress.product.product import Product

    def _stock(product_id):
        return current_domain.repository_for(Product).get(product_id).stock

    return _stock


# ---------------------------------------------------------------------------
# HTTP
# ---------------------------------------------------------------------------
@pytest.fixture()
def app():
    from fashionexpress.web import create_app

    return create_app()


@pytest.fixture()
def client(app):
    from fastapi.testclient import TestClient

    return TestClient(app)


@pytest.fixture()
def new_client(app):
    """Factory for extra clients, each with its own cookie jar."""
    from fastapi.testclient import TestClient

    def _new():
        return TestClient(app)

    return _new


@pytest.fixture()
def register():
    """Register (and thereby log in) a shopper through the API on ``client``."""

    def _register(client, username="asha", password="s3cret-pass", **extra):
        payload = {
            "username": username,
            "password": password,
            "email": f"{username}@example.com",
            "name": username.title(),
        }
        payload.update(extra)
        response = client.post("/users/register", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _register


@pytest.fixture()
def shopper(client, register):
    """``client`` logged in as a freshly registered shopper; returns the user payload."""
    return register(client)


@pytest.fixture()
def order_data():
    return {
        "address": "12 MG Road",
        "city": "Bengaluru",
        "state": "Karnataka",
        "pincode": "560001",
        "phone": "9876543210",
        "payment_method": "cod",
    }
