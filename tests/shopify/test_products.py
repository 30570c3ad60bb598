"""Tests for storefront/shopify/products.py"""

import pytest

from storefront.models import Product
from storefront.shopify.products import (
    ShopifyRequestError,
    create_product_with_sku,
    fetch_all_products,
    first_variant_id,
    generate_product,
    parse_product_edge,
    product_numeric_id,
    user_error_messages,
)
from storefront.shopify.queries import (
    CREATE_PRODUCT_MUTATION,
    FORM_CREATE_PRODUCT_MUTATION,
    FORM_UPDATE_VARIANT_MUTATION,
    GET_ALL_PRODUCTS_QUERY,
    UPDATE_VARIANTS_MUTATION,
)


def _create_data(product, user_errors=None):
    return {"productCreate": {"product": product, "userErrors": user_errors or []}}


def _update_data(variants, user_errors=None):
    return {"productVariantsBulkUpdate": {"productVariants": variants, "userErrors": user_errors or []}}


class TestHelpers:
    def test_product_numeric_id(self):
        assert product_numeric_id("gid://shopify/Product/42") == "42"

    def test_product_numeric_id_empty(self):
        assert product_numeric_id(None) == ""

    def test_first_variant_id(self, created_product):
        assert first_variant_id(created_product) == "gid://shopify/ProductVariant/4200"

    def test_first_variant_id_missing(self):
        assert first_variant_id({"id": "gid://shopify/Product/1", "variants": {"edges": []}}) is None
        assert first_variant_id({"id": "gid://shopify/Product/1"}) is None

    def test_user_error_messages(self):
        payload = {"userErrors": [
            {"field": ["product", "title"], "message": "Title can't be blank"},
            {"field": None, "message": "Something else"},
        ]}
        assert user_error_messages(payload) == ["product.title: Title can't be blank", "Something else"]

    def test_user_error_messages_absent(self):
        assert user_error_messages({"product": {}}) == []
        assert user_error_messages(None) == []


class TestParseProductEdge:
    def test_with_variant(self):
        edge = {"node": {
            "id": "gid://shopify/Product/1",
            "title": "Board",
            "status": "ACTIVE",
            "variants": {"edges": [{"node": {"id": "gid://shopify/ProductVariant/10", "sku": "B-1"}}]},
        }}
        product = parse_product_edge(edge)
        assert product.title == "Board"
        assert product.variant.id == "gid://shopify/ProductVariant/10"
        assert product.sku == "B-1"

    def test_without_variant(self):
        edge = {"node": {"id": "gid://shopify/Product/1", "title": "Board", "status": "DRAFT",
                         "variants": {"edges": []}}}
        product = parse_product_edge(edge)
        assert product.variant is None
        assert product.sku is None


class TestFetchAllProducts:
    def test_returns_products(self, fake_client, products_data):
        fake_client.graphql_request.return_value = products_data

        products = fetch_all_products(fake_client)

        assert len(products) == 12
        assert all(isinstance(p, Product) for p in products)
        assert products[0].sku == "SKU-1"
        fake_client.graphql_request.assert_called_once_with(GET_ALL_PRODUCTS_QUERY, {"first": 250})

    def test_caps_first_at_shopify_maximum(self, fake_client):
        fake_client.graphql_request.return_value = {"products": {"edges": []}}

        fetch_all_products(fake_client, first=1000)

        assert fake_client.graphql_request.call_args.args[1] == {"first": 250}

    def test_empty_store(self, fake_client):
        fake_client.graphql_request.return_value = {"products": {"edges": []}}
        assert fetch_all_products(fake_client) == []

    def test_raises_on_failure(self, fake_client):
        fake_client.graphql_request.return_value = None

        with pytest.raises(ShopifyRequestError, match="Failed to fetch products"):
            fetch_all_products(fake_client)


class TestCreateProductWithSku:
    def test_success_returns_both_payloads(self, fake_client, created_product, updated_variants):
        fake_client.graphql_request.side_effect = [
            _create_data(created_product),
            _update_data(updated_variants),
        ]

        result = create_product_with_sku(fake_client, "Red Snowboard", "ACTIVE", "SB-RED")

        assert result.ok
        assert result.status_code == 200
        assert result.product == created_product
        assert result.variants == updated_variants

    def test_sends_expected_variables(self, fake_client, created_product, updated_variants):
        fake_client.graphql_request.side_effect = [
            _create_data(created_product),
            _update_data(updated_variants),
        ]

        create_product_with_sku(fake_client, "Red Snowboard", "DRAFT", "SB-RED")

        create_call, update_call = fake_client.graphql_request.call_args_list
        assert create_call.args == (
            FORM_CREATE_PRODUCT_MUTATION,
            {"product": {"title": "Red Snowboard", "status": "DRAFT"}},
        )
        assert update_call.args == (
            FORM_UPDATE_VARIANT_MUTATION,
            {
                "productId": "gid://shopify/Product/42",
                "variants": [{"id": "gid://shopify/ProductVariant/4200", "inventoryItem": {"sku": "SB-RED"}}],
            },
        )

    def test_create_failure_skips_update(self, fake_client):
        fake_client.graphql_request.return_value = None

        result = create_product_with_sku(fake_client, "Red Snowboard", "ACTIVE", "SB-RED")

        assert result.error == "Failed to create product."
        assert result.status_code == 500
        assert result.product is None
        assert fake_client.graphql_request.call_count == 1

    def test_create_user_errors_return_400(self, fake_client):
        fake_client.graphql_request.return_value = _create_data(
            None, [{"field": ["title"], "message": "Title can't be blank"}]
        )

        result = create_product_with_sku(fake_client, "", "ACTIVE", "")

        assert result.error == "Failed to create product."
        assert result.status_code == 400
        assert fake_client.graphql_request.call_count == 1

    def test_missing_product(self, fake_client):
        fake_client.graphql_request.return_value = _create_data(None)

        result = create_product_with_sku(fake_client, "Red Snowboard", "ACTIVE", "SB-RED")

        assert result.error == "No product returned from productCreate."
        assert result.status_code == 500
        assert fake_client.graphql_request.call_count == 1

    def test_missing_variant_keeps_product(self, fake_client, created_product):
        created_product["variants"]["edges"] = []
        fake_client.graphql_request.return_value = _create_data(created_product)

        result = create_product_with_sku(fake_client, "Red Snowboard", "ACTIVE", "SB-RED")

        assert result.error == "Product created but no variant found."
        assert result.product == created_product
        assert result.status_code == 500
        assert fake_client.graphql_request.call_count == 1

    def test_update_failure_keeps_product(self, fake_client, created_product):
        fake_client.graphql_request.side_effect = [_create_data(created_product), None]

        result = create_product_with_sku(fake_client, "Red Snowboard", "ACTIVE", "SB-RED")

        assert result.error == "Failed to update variant."
        assert result.status_code == 500
        assert result.product == created_product
        assert result.variants is None

    def test_update_user_errors_return_400(self, fake_client, created_product):
        fake_client.graphql_request.side_effect = [
            _create_data(created_product),
            _update_data(None, [{"field": ["variants", "0", "sku"], "message": "SKU taken"}]),
        ]

        result = create_product_with_sku(fake_client, "Red Snowboard", "ACTIVE", "SB-RED")

        assert result.error == "Failed to update variant."
        assert result.status_code == 400
        assert result.product == created_product


class TestGenerateProduct:
    def test_success(self, fake_client, created_product, updated_variants):
        fake_client.graphql_request.side_effect = [
            {"productCreate": {"product": created_product}},
            {"productVariantsBulkUpdate": {"productVariants": updated_variants}},
        ]

        result = generate_product(fake_client, color="Red")

        assert result.ok
        assert result.product == created_product
        assert result.variants == updated_variants

        create_call, update_call = fake_client.graphql_request.call_args_list
        assert create_call.args == (CREATE_PRODUCT_MUTATION, {"product": {"title": "Red Snowboard"}})
        assert update_call.args == (
            UPDATE_VARIANTS_MUTATION,
            {
                "productId": "gid://shopify/Product/42",
                "variants": [{"id": "gid://shopify/ProductVariant/4200", "price": "100.00"}],
            },
        )

    def test_random_color_from_fixed_list(self, fake_client):
        fake_client.graphql_request.return_value = None

        generate_product(fake_client)

        title = fake_client.graphql_request.call_args.args[1]["product"]["title"]
        color, noun = title.split(" ")
        assert color in ["Red", "Orange", "Yellow", "Green"]
        assert noun == "Snowboard"

    def test_create_failure_skips_update(self, fake_client):
        fake_client.graphql_request.return_value = None

        result = generate_product(fake_client, color="Green")

        assert result.error == "Failed to create product"
        assert result.status_code == 500
        assert fake_client.graphql_request.call_count == 1

    def test_update_failure(self, fake_client, created_product):
        fake_client.graphql_request.side_effect = [{"productCreate": {"product": created_product}}, None]

        result = generate_product(fake_client, color="Yellow")

        assert result.error == "Failed to update variant"
        assert result.status_code == 500
        assert result.product == created_product

    def test_missing_variant_keeps_product(self, fake_client, created_product):
        created_product["variants"]["edges"] = []
        fake_client.graphql_request.return_value = {"productCreate": {"product": created_product}}

        result = generate_product(fake_client, color="Orange")

        assert result.error == "Product created but no variant found"
        assert result.status_code == 500
        assert result.product == created_product
        assert result.variants is None
        assert fake_client.graphql_request.call_count == 1
