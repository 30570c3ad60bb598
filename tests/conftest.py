"""Shared test fixtures."""

from unittest.mock import MagicMock

import pytest

from storefront.common.config_loader import DEFAULT_SETTINGS, merge_settings
from storefront.models import Product, ProductVariant
from storefront.shopify import ShopifyAPIClient


def make_product_edge(n, sku=None, with_variant=True):
    """Build one products connection edge as the listing query returns it."""
    variants = {"edges": []}
    if with_variant:
        variants["edges"].append({
            "node": {"id": f"gid://shopify/ProductVariant/{n}00", "sku": sku},
        })
    return {
        "node": {
            "id": f"gid://shopify/Product/{n}",
            "title": f"Product {n}",
            "status": "ACTIVE",
            "variants": variants,
        }
    }


@pytest.fixture
def products_data():
    """listProducts data with 12 products (three pages of five)."""
    return {"products": {"edges": [make_product_edge(n, sku=f"SKU-{n}") for n in range(1, 13)]}}


@pytest.fixture
def created_product():
    """productCreate payload product with a single default variant."""
    return {
        "id": "gid://shopify/Product/42",
        "title": "Red Snowboard",
        "handle": "red-snowboard",
        "status": "ACTIVE",
        "variants": {
            "edges": [
                {"node": {"id": "gid://shopify/ProductVariant/4200", "sku": "", "price": "0.00"}},
            ]
        },
    }


@pytest.fixture
def updated_variants():
    """productVariantsBulkUpdate productVariants list."""
    return [{
        "id": "gid://shopify/ProductVariant/4200",
        "price": "100.00",
        "barcode": None,
        "createdAt": "2026-10-19T10:00:00Z",
        "sku": "SB-RED",
    }]


@pytest.fixture
def fake_client():
    """A ShopifyAPIClient stand-in whose graphql_request is scripted per test."""
    client = MagicMock(spec=ShopifyAPIClient)
    client.shop = "test-store"
    return client


@pytest.fixture
def settings():
    """Settings with test credentials and no file/env lookups."""
    return merge_settings(DEFAULT_SETTINGS, {
        "shopify": {"shop": "test-store", "access_token": "shpat_test"},
        "flask": {"secret_key": "test"},
    })


@pytest.fixture
def app(fake_client, settings):
    from storefront.web import create_app

    app = create_app(client=fake_client, settings=settings)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def http(app):
    """Flask test client."""
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture
def minimal_product():
    return Product(id="gid://shopify/Product/1", title="Test Product", status="DRAFT")


@pytest.fixture
def product_with_variant():
    return Product(
        id="gid://shopify/Product/2",
        title="Blue Snowboard",
        status="ACTIVE",
        variant=ProductVariant(id="gid://shopify/ProductVariant/200", sku="SB-BLUE"),
    )
