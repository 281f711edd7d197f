"""
Configuration Loader

Loads config/settings.yaml and merges it over the built-in defaults from
constants.py. A handful of environment variables (read from .env when present)
take precedence over both.
"""

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

from . import constants

logger = logging.getLogger(__name__)

SETTINGS_FILE = "settings.yaml"

# env var -> Settings field
ENV_OVERRIDES = {
    "SHOPRITE_DEFAULT_STORE_ID": "default_store_id",
    "REDPEPPER_CLIENT_ID": "redpepper_client_id",
}


@dataclass
class Settings:
    """Runtime settings shared by the deals endpoint and the circular CLI."""
    redpepper_client_id: str = constants.REDPEPPER_CLIENT_ID
    redpepper_base_url: str = constants.REDPEPPER_BASE_URL
    default_store_id: str = constants.DEFAULT_STORE_ID
    shoprite_base_url: str = constants.SHOPRITE_BASE_URL
    html_cache_ttl: int = constants.HTML_CACHE_TTL
    response_cache_ttl: int = constants.RESPONSE_CACHE_TTL
    default_limit: int = constants.DEFAULT_PRODUCT_LIMIT
    request_timeout: int = constants.REQUEST_TIMEOUT
    deals_user_agent: str = constants.DEALS_USER_AGENT
    circular_user_agent: str = constants.CIRCULAR_USER_AGENT


def _get_config_dir() -> Optional[Path]:
    """Get the config directory path, or None if there isn't one."""
    # Try relative to this file first
    module_dir = Path(__file__).parent.parent.parent
    config_dir = module_dir / 'config'
    if config_dir.exists():
        return config_dir

    cwd_config = Path.cwd() / 'config'
    if cwd_config.exists():
        return cwd_config

    return None


def load_config(filename: str, config_dir: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        filename: Name of the config file (e.g., 'settings.yaml')
        config_dir: Directory to read from (default: auto-detected config/)

    Returns:
        Parsed YAML content as dictionary (empty if the file is empty)

    Raises:
        FileNotFoundError: If config file doesn't exist
    """
    config_dir = config_dir or _get_config_dir()
    if config_dir is None:
        raise FileNotFoundError(f"Config directory not found for {filename}")

    config_path = Path(config_dir) / filename
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def build_settings(overrides: Optional[Dict[str, Any]] = None) -> Settings:
    """
    Build Settings from a dict of overrides, ignoring unknown keys.

    Numeric fields are coerced to int and IDs to str, since YAML
    happily reads `630` as an integer.
    """
    settings = Settings()
    if not overrides:
        return settings

    for f in fields(Settings):
        if f.name not in overrides or overrides[f.name] is None:
            continue
        value = overrides[f.name]
        setattr(settings, f.name, int(value) if f.type is int else str(value))

    unknown = set(overrides) - {f.name for f in fields(Settings)}
    if unknown:
        logger.warning("Ignoring unknown settings: %s", ", ".join(sorted(unknown)))

    return settings


def load_settings(config_dir: Optional[Path] = None, use_env: bool = True) -> Settings:
    """
    Load settings from settings.yaml plus environment overrides.

    A missing settings file is not an error; the built-in defaults apply.
    """
    try:
        values = dict(load_config(SETTINGS_FILE, config_dir).get('settings') or {})
    except FileNotFoundError:
        logger.debug("No %s found, using built-in defaults", SETTINGS_FILE)
        values = {}

    if use_env:
        load_dotenv()
        for env_name, field_name in ENV_OVERRIDES.items():
            if os.environ.get(env_name):
                values[field_name] = os.environ[env_name]

    return build_settings(values)
