"""
Logging Configuration

Sets up the `storefront` logger used by the API client, the product
workflows and the page routes. GraphQL and userErrors failures are logged
here before the page answers with a 4xx/5xx, so this is where a merchant
looks when "Failed to create product." shows up.
"""

import logging
import sys


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure logging for the app and its CLI.

    Args:
        verbose: If True, log GraphQL traffic summaries at DEBUG
        quiet: If True, only warnings and errors; also silences the
            Flask development server's per-request lines
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)-8s %(name)s: %(message)s"))

    logger = logging.getLogger("storefront")
    logger.setLevel(level)

    # Avoid duplicate handlers if called multiple times
    logger.handlers.clear()
    logger.addHandler(handler)

    if quiet:
        logging.getLogger("werkzeug").setLevel(logging.WARNING)
