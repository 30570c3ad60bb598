"""
Product workflows

Each page action is a short sequence of Admin API calls:
list products, or create a product and then update its first variant.
The first failing step ends the workflow; later calls are not made.
"""

import logging
import random
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..common.constants import (
    GENERATED_VARIANT_PRICE,
    PRODUCT_GID_PREFIX,
    SHOPIFY_MAX_PAGE_SIZE,
    SNOWBOARD_COLORS,
)
from ..models import Product, ProductVariant
from .api_client import ShopifyAPIClient
from .queries import (
    CREATE_PRODUCT_MUTATION,
    FORM_CREATE_PRODUCT_MUTATION,
    FORM_UPDATE_VARIANT_MUTATION,
    GET_ALL_PRODUCTS_QUERY,
    UPDATE_VARIANTS_MUTATION,
)

logger = logging.getLogger(__name__)


class ShopifyRequestError(Exception):
    """Raised when a read query fails at the transport or GraphQL level."""


@dataclass
class WorkflowResult:
    """
    Outcome of a create-then-update workflow.

    product and variants hold the raw GraphQL payloads so the page can
    show them as JSON. product is kept on failures after the create
    step succeeded.
    """
    product: Optional[Dict[str, Any]] = None
    variants: Optional[List[Dict[str, Any]]] = None
    error: Optional[str] = None
    status_code: int = 200

    @property
    def ok(self) -> bool:
        return self.error is None


def user_error_messages(payload: Optional[Dict[str, Any]]) -> List[str]:
    """Flatten a mutation payload's userErrors into "field: message" strings."""
    messages = []
    for err in (payload or {}).get("userErrors") or []:
        field = err.get("field")
        if field:
            messages.append(f"{'.'.join(str(f) for f in field)}: {err.get('message', '')}")
        else:
            messages.append(err.get("message", ""))
    return messages


def product_numeric_id(gid: Optional[str]) -> str:
    """Strip the gid prefix, e.g. 'gid://shopify/Product/42' -> '42'."""
    if not gid:
        return ""
    return gid.replace(PRODUCT_GID_PREFIX, "")


def first_variant_id(product: Dict[str, Any]) -> Optional[str]:
    """Return the id of the product's first variant, if any."""
    edges = (product.get("variants") or {}).get("edges") or []
    if not edges:
        return None
    return (edges[0].get("node") or {}).get("id")


def parse_product_edge(edge: Dict[str, Any]) -> Product:
    """Reshape one products connection edge into a Product."""
    node = edge["node"]
    variant_edges = (node.get("variants") or {}).get("edges") or []

    variant = None
    if variant_edges and variant_edges[0].get("node"):
        variant_node = variant_edges[0]["node"]
        variant = ProductVariant(id=variant_node["id"], sku=variant_node.get("sku"))

    return Product(
        id=node["id"],
        title=node.get("title", ""),
        status=node.get("status", ""),
        variant=variant,
    )


def fetch_all_products(client: ShopifyAPIClient, first: int = SHOPIFY_MAX_PAGE_SIZE) -> List[Product]:
    """
    Fetch up to `first` products in a single query.

    The listing page paginates this list locally, so one request covers
    every page.

    Raises:
        ShopifyRequestError: If the query fails
    """
    first = max(1, min(first, SHOPIFY_MAX_PAGE_SIZE))

    data = client.graphql_request(GET_ALL_PRODUCTS_QUERY, {"first": first})
    if not data or "products" not in data:
        logger.error("Failed to fetch products")
        raise ShopifyRequestError("Failed to fetch products")

    edges = data["products"].get("edges") or []
    products = [parse_product_edge(edge) for edge in edges]
    logger.debug("Fetched %d products", len(products))
    return products


def create_product_with_sku(
    client: ShopifyAPIClient,
    title: str,
    status: str,
    sku: str,
) -> WorkflowResult:
    """
    Create a product, then set its first variant's SKU.

    Args:
        client: Admin API client
        title: Product title
        status: 'ACTIVE' or 'DRAFT'
        sku: SKU for the default variant

    Returns:
        WorkflowResult with the created product and updated variants,
        or an error message and HTTP status (400 for userErrors, 500 otherwise)
    """
    data = client.graphql_request(
        FORM_CREATE_PRODUCT_MUTATION,
        {"product": {"title": title, "status": status}},
    )
    if not data or "productCreate" not in data:
        logger.error("GraphQL errors (createProduct)")
        return WorkflowResult(error="Failed to create product.", status_code=500)

    create_payload = data["productCreate"] or {}
    user_errors = user_error_messages(create_payload)
    if user_errors:
        logger.error("User errors (createProduct): %s", user_errors)
        return WorkflowResult(error="Failed to create product.", status_code=400)

    product = create_payload.get("product")
    if not product:
        logger.error("No product returned from productCreate")
        return WorkflowResult(error="No product returned from productCreate.", status_code=500)

    variant_id = first_variant_id(product)
    if not variant_id:
        logger.error("Product %s created but no variant found", product.get("id"))
        return WorkflowResult(
            product=product,
            error="Product created but no variant found.",
            status_code=500,
        )

    data = client.graphql_request(
        FORM_UPDATE_VARIANT_MUTATION,
        {
            "productId": product["id"],
            "variants": [{"id": variant_id, "inventoryItem": {"sku": sku}}],
        },
    )
    if not data or "productVariantsBulkUpdate" not in data:
        logger.error("GraphQL errors (updateVariant)")
        return WorkflowResult(product=product, error="Failed to update variant.", status_code=500)

    update_payload = data["productVariantsBulkUpdate"] or {}
    user_errors = user_error_messages(update_payload)
    if user_errors:
        logger.error("User errors (updateVariant): %s", user_errors)
        return WorkflowResult(product=product, error="Failed to update variant.", status_code=400)

    logger.info("Created product %s with SKU %r", product["id"], sku)
    return WorkflowResult(product=product, variants=update_payload.get("productVariants"))


def generate_product(client: ShopifyAPIClient, color: Optional[str] = None) -> WorkflowResult:
    """
    Create a "<colour> Snowboard" product and price its variant at 100.00.

    Args:
        client: Admin API client
        color: Colour to use; picked at random from SNOWBOARD_COLORS if None

    Returns:
        WorkflowResult with the created product and updated variants
    """
    if color is None:
        color = random.choice(SNOWBOARD_COLORS)

    data = client.graphql_request(
        CREATE_PRODUCT_MUTATION,
        {"product": {"title": f"{color} Snowboard"}},
    )
    product = ((data or {}).get("productCreate") or {}).get("product")
    if not product:
        logger.error("Create product errors")
        return WorkflowResult(error="Failed to create product", status_code=500)

    variant_id = first_variant_id(product)
    if not variant_id:
        logger.error("Product %s created but no variant found", product.get("id"))
        return WorkflowResult(
            product=product,
            error="Product created but no variant found",
            status_code=500,
        )

    data = client.graphql_request(
        UPDATE_VARIANTS_MUTATION,
        {
            "productId": product["id"],
            "variants": [{"id": variant_id, "price": GENERATED_VARIANT_PRICE}],
        },
    )
    update_payload = (data or {}).get("productVariantsBulkUpdate")
    if not update_payload:
        logger.error("Update variant errors")
        return WorkflowResult(product=product, error="Failed to update variant", status_code=500)

    logger.info("Generated product %s (%s Snowboard)", product["id"], color)
    return WorkflowResult(product=product, variants=update_payload.get("productVariants"))
