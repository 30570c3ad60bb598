"""
Shopify API Client

Client for the Shopify Admin GraphQL API.
Handles authentication, rate limiting, and error logging.
"""

import logging
import threading
import time
from typing import Dict, Optional

import requests

from ..common.constants import DEFAULT_API_VERSION

logger = logging.getLogger(__name__)

SHOP_QUERY = "{ shop { name } }"


class ShopifyAPIClient:
    """
    Client for the Shopify Admin GraphQL API.

    Handles:
    - Authentication (Admin API access token)
    - Rate limiting (2 requests/second by default)
    - Error handling: every failure is logged and reported as None

    Requests are sent once. A failed call is never retried, so a
    workflow that gets None back stops at that step.

    Usage:
        client = ShopifyAPIClient(shop="my-store", access_token="shpat_xxx")
        data = client.graphql_request(query, variables)
    """

    def __init__(
        self,
        shop: str,
        access_token: str,
        api_version: str = DEFAULT_API_VERSION,
        min_request_interval: float = 0.5,
        timeout: int = 30,
    ):
        """
        Initialize the API client.

        Args:
            shop: Shop name (without .myshopify.com) or full domain
            access_token: Shopify Admin API access token
            api_version: Admin API version, e.g. "2025-01"
            min_request_interval: Minimum seconds between requests
            timeout: Default request timeout in seconds
        """
        # Normalize shop name
        if ".myshopify.com" in shop:
            self.shop = shop.replace("https://", "").replace("http://", "").split(".myshopify.com")[0]
        else:
            self.shop = shop

        self.access_token = access_token
        self.api_version = api_version
        self.timeout = timeout
        self.base_url = f"https://{self.shop}.myshopify.com/admin/api/{api_version}"
        self.graphql_url = f"{self.base_url}/graphql.json"

        self.session = requests.Session()
        self.session.headers.update({
            "X-Shopify-Access-Token": access_token,
            "Content-Type": "application/json",
        })

        # Rate limiting (shared by the web server's request threads)
        self._rate_lock = threading.Lock()
        self.requests_made = 0
        self.last_request_time = 0.0
        self.min_request_interval = min_request_interval

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def close(self):
        logger.info("Closing Shopify session for %s after %d requests", self.shop, self.requests_made)
        self.session.close()

    def _rate_limit(self):
        """Wait until min_request_interval has passed since the last request."""
        with self._rate_lock:
            now = time.time()
            elapsed = now - self.last_request_time

            if elapsed < self.min_request_interval:
                time.sleep(self.min_request_interval - elapsed)

            self.last_request_time = time.time()
            self.requests_made += 1

    def graphql_request(
        self,
        query: str,
        variables: Optional[Dict] = None,
        timeout: Optional[int] = None
    ) -> Optional[Dict]:
        """
        Make GraphQL API request with rate limiting and error handling.

        Args:
            query: GraphQL query or mutation
            variables: Query variables
            timeout: Request timeout in seconds (defaults to the client's)

        Returns:
            Response data (without 'data' wrapper) or None on error.
            userErrors are part of the data and are left to the caller.
        """
        payload = {"query": query}
        if variables:
            payload["variables"] = variables

        self._rate_limit()

        try:
            response = self.session.post(
                self.graphql_url,
                json=payload,
                timeout=timeout or self.timeout
            )
        except requests.exceptions.Timeout:
            logger.error("GraphQL request timeout")
            return None
        except requests.exceptions.RequestException as e:
            logger.error("Request failed: %s", e)
            return None

        # Check for HTTP errors
        if response.status_code >= 400:
            logger.error("API Error %d: %s", response.status_code, response.text[:200])
            return None

        try:
            result = response.json()
        except ValueError:
            logger.error("Invalid JSON in GraphQL response: %s", response.text[:200])
            return None

        # Check for GraphQL errors
        if "errors" in result:
            logger.error("GraphQL Errors: %s", result['errors'])
            return None

        return result.get("data")

    def test_connection(self) -> bool:
        """
        Test API connection by fetching shop info.

        Returns:
            True if connection successful
        """
        result = self.graphql_request(SHOP_QUERY)
        if result and result.get("shop"):
            shop_name = result["shop"].get("name", "Unknown")
            logger.info("Connected to: %s", shop_name)
            return True
        return False
