# Common utilities
from .config_loader import (
    ConfigError,
    load_app_settings,
    load_config,
    require_shopify_credentials,
)
from .log_config import setup_logging
