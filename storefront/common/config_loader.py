"""
Configuration Loader

Loads the YAML application settings and overlays the Shopify credentials
and overrides taken from the environment (or a .env file).
"""

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from dotenv import load_dotenv

from .constants import DEFAULT_API_VERSION, PRODUCTS_PER_PAGE, SHOPIFY_MAX_PAGE_SIZE


class ConfigError(Exception):
    """Raised when required settings are missing or invalid."""


DEFAULT_SETTINGS: Dict[str, Any] = {
    "shopify": {
        "shop": "",
        "access_token": "",
        "api_version": DEFAULT_API_VERSION,
        "timeout": 30,
        "min_request_interval": 0.5,
    },
    "products": {
        "per_page": PRODUCTS_PER_PAGE,
        "fetch_limit": SHOPIFY_MAX_PAGE_SIZE,
    },
    "flask": {
        "host": "127.0.0.1",
        "port": 5000,
        "debug": False,
        "secret_key": "dev",
    },
}

# Environment variable -> (section, key)
ENV_OVERRIDES = {
    "SHOPIFY_SHOP": ("shopify", "shop"),
    "SHOPIFY_ACCESS_TOKEN": ("shopify", "access_token"),
    "SHOPIFY_API_VERSION": ("shopify", "api_version"),
    "FLASK_SECRET_KEY": ("flask", "secret_key"),
}


def _get_config_dir() -> Path:
    """Get the config directory path."""
    # Try relative to this file first
    module_dir = Path(__file__).parent.parent.parent
    config_dir = module_dir / 'config'

    if config_dir.exists():
        return config_dir

    # Try current working directory
    cwd_config = Path.cwd() / 'config'
    if cwd_config.exists():
        return cwd_config

    raise FileNotFoundError(
        f"Config directory not found. Tried: {config_dir}, {cwd_config}"
    )


def load_config(filename: str) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        filename: Name of the config file (e.g., 'app.yaml')

    Returns:
        Parsed YAML content as dictionary (empty dict for an empty file)

    Raises:
        FileNotFoundError: If config file doesn't exist
    """
    config_path = _get_config_dir() / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def merge_settings(base: Dict[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Merge two settings dicts section by section.

    Args:
        base: Settings to start from (not modified)
        overrides: Sections whose keys replace those in base

    Returns:
        New merged dictionary
    """
    merged = {section: dict(values) for section, values in base.items()}
    for section, values in overrides.items():
        if not isinstance(values, Mapping):
            raise ConfigError(f"Config section '{section}' must be a mapping")
        merged.setdefault(section, {}).update(values)
    return merged


def load_app_settings(
    filename: str = 'app.yaml',
    environ: Optional[Mapping[str, str]] = None,
) -> Dict[str, Any]:
    """
    Load application settings.

    Precedence (lowest first): built-in defaults, the YAML file,
    environment variables. A .env file is read into the process
    environment when environ is not given.

    Args:
        filename: YAML file in the config directory
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Settings dictionary with 'shopify', 'products' and 'flask' sections
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    try:
        file_settings = load_config(filename)
    except FileNotFoundError:
        file_settings = {}

    settings = merge_settings(DEFAULT_SETTINGS, file_settings)

    for var, (section, key) in ENV_OVERRIDES.items():
        value = environ.get(var)
        if value:
            settings[section][key] = value

    return settings


def require_shopify_credentials(settings: Mapping[str, Any]) -> Dict[str, str]:
    """
    Return the shop and access token, failing loudly if either is missing.

    Raises:
        ConfigError: If SHOPIFY_SHOP or SHOPIFY_ACCESS_TOKEN is not configured
    """
    shopify = settings.get("shopify", {})
    missing = [
        var for var, (_, key) in ENV_OVERRIDES.items()
        if key in ("shop", "access_token") and not shopify.get(key)
    ]
    if missing:
        raise ConfigError(f"Missing Shopify settings: {', '.join(missing)}")

    return {"shop": shopify["shop"], "access_token": shopify["access_token"]}
