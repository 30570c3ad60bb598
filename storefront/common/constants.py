"""
Shared constants for the project.

This module contains application-wide constants that should have a single source of truth.
"""

# Largest page Shopify serves for a connection query (products(first: N))
SHOPIFY_MAX_PAGE_SIZE = 250

# Products shown per page on the listing screen
PRODUCTS_PER_PAGE = 5

# Admin API version used when config doesn't set one
DEFAULT_API_VERSION = "2025-01"

# Colours for the "Generate a product" button
SNOWBOARD_COLORS = ["Red", "Orange", "Yellow", "Green"]

# Price set on the generated product's variant
GENERATED_VARIANT_PRICE = "100.00"

# Allowed values for the product status select
PRODUCT_STATUSES = ["ACTIVE", "DRAFT"]

PRODUCT_GID_PREFIX = "gid://shopify/Product/"
