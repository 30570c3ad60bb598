"""
Flask application for the storefront admin pages.

Usage:
    app = create_app()
    app.run()
"""

import json
import logging
from typing import Any, Dict, Optional

from flask import Flask

from ..common.config_loader import load_app_settings, require_shopify_credentials
from ..shopify import ShopifyAPIClient

logger = logging.getLogger(__name__)


def build_client(settings: Dict[str, Any]) -> ShopifyAPIClient:
    """Create the Admin API client from settings."""
    credentials = require_shopify_credentials(settings)
    shopify = settings["shopify"]
    return ShopifyAPIClient(
        shop=credentials["shop"],
        access_token=credentials["access_token"],
        api_version=shopify["api_version"],
        min_request_interval=float(shopify["min_request_interval"]),
        timeout=int(shopify["timeout"]),
    )


def create_app(
    client: Optional[ShopifyAPIClient] = None,
    settings: Optional[Dict[str, Any]] = None,
) -> Flask:
    """
    Build the Flask app.

    Args:
        client: Admin API client; built from settings when omitted
        settings: Settings dict as returned by load_app_settings()

    Raises:
        ConfigError: If no client is given and credentials are missing
    """
    if settings is None:
        settings = load_app_settings()
    if client is None:
        client = build_client(settings)

    app = Flask(__name__)
    app.config["SECRET_KEY"] = settings["flask"]["secret_key"]
    app.config["PRODUCTS_PER_PAGE"] = int(settings["products"]["per_page"])
    app.config["PRODUCTS_FETCH_LIMIT"] = int(settings["products"]["fetch_limit"])
    app.extensions["shopify_client"] = client

    @app.template_filter("tojson_pretty")
    def tojson_pretty(value):
        return json.dumps(value, indent=2)

    from .routes import pages
    app.register_blueprint(pages)

    logger.debug("App created for shop %s", client.shop)
    return app
