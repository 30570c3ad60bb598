"""
Storefront Admin

Template storefront-management web app backed by the Shopify Admin GraphQL API.

Modules:
    models  - View models (Product, ProductVariant)
    common  - Shared utilities (config loader, logging, constants)
    shopify - GraphQL client, operation documents and product workflows
    web     - Flask application, page routes and pagination
"""
