#!/usr/bin/env python3
"""
Storefront Admin

Runs the product pages against a Shopify store's Admin GraphQL API.
Credentials come from SHOPIFY_SHOP / SHOPIFY_ACCESS_TOKEN (environment or .env).

Usage:
    # Check the token works
    python3 run_app.py --check

    # Serve the pages on http://127.0.0.1:5000/app/testmainscreen
    python3 run_app.py --port 5000 --debug
"""

import argparse
import logging
import sys

from storefront.common import ConfigError, load_app_settings, setup_logging
from storefront.web import build_client, create_app

logger = logging.getLogger("storefront.run_app")


def main():
    parser = argparse.ArgumentParser(description="Storefront admin web app")

    parser.add_argument(
        "--host",
        help="Interface to bind (default: from config/app.yaml)"
    )
    parser.add_argument(
        "--port", "-p",
        type=int,
        help="Port to listen on (default: from config/app.yaml)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Run Flask in debug mode"
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only test the Shopify connection and exit"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only log warnings and errors"
    )

    args = parser.parse_args()
    setup_logging(verbose=args.verbose, quiet=args.quiet)

    try:
        settings = load_app_settings()
        client = build_client(settings)
    except ConfigError as e:
        logger.error("%s", e)
        sys.exit(1)

    with client:
        if args.check:
            if not client.test_connection():
                logger.error("Failed to connect. Check shop name and token.")
                sys.exit(1)
            return

        app = create_app(client=client, settings=settings)
        flask_settings = settings["flask"]
        app.run(
            host=args.host or flask_settings["host"],
            port=args.port or int(flask_settings["port"]),
            debug=args.debug or bool(flask_settings["debug"]),
        )


if __name__ == "__main__":
    main()
