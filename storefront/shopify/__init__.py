"""
Shopify integration modules.

Modules:
    api_client - GraphQL client for the Shopify Admin API
    queries    - GraphQL documents used by the pages
    products   - List/create/update product workflows
"""

from .api_client import ShopifyAPIClient
from .products import (
    ShopifyRequestError,
    WorkflowResult,
    create_product_with_sku,
    fetch_all_products,
    generate_product,
    product_numeric_id,
)

__all__ = [
    # API Client
    'ShopifyAPIClient',
    # Workflows
    'ShopifyRequestError',
    'WorkflowResult',
    'create_product_with_sku',
    'fetch_all_products',
    'generate_product',
    'product_numeric_id',
]
