"""
Configuration loader for the storefront data layer.

Settings come from (lowest to highest precedence):
- field defaults below
- an optional YAML file (config/storefront.yml by default)
- environment variables (a local .env file is loaded first)
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}

_ENV_OVERRIDES = {
    "STOREFRONT_API_URL": "api_base_url",
    "STOREFRONT_USE_BACKEND": "backend_enabled",
    "STOREFRONT_ENV": "environment",
    "STOREFRONT_PROBE_TIMEOUT": "probe_timeout_seconds",
    "STOREFRONT_NOTIFICATION_TIMEOUT": "notification_timeout_seconds",
    "STOREFRONT_API_TOKEN": "api_token",
    "STOREFRONT_CART_DIR": "cart_storage_dir",
}


class StorefrontConfig(BaseModel):
    """Complete storefront data-layer configuration"""

    api_base_url: str = "http://localhost:3001"
    backend_enabled: bool = True
    environment: str = "development"
    probe_timeout_seconds: float = Field(default=5.0, gt=0.0, le=60.0)
    notification_timeout_seconds: float = Field(default=10.0, gt=0.0, le=120.0)
    api_token: Optional[str] = None

    health_path: str = "/api/health"
    email_path: str = "/api/email"
    payment_path: str = "/api/vornifypay"

    cart_storage_dir: Optional[str] = None
    cart_storage_key: str = "cart"
    default_currency: str = "SEK"
    order_number_prefix: str = "PM"

    @property
    def is_production(self) -> bool:
        return self.environment.strip().lower() in {"production", "prod"}


def _env_overrides() -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    for env_name, field_name in _ENV_OVERRIDES.items():
        raw = os.getenv(env_name)
        if raw is None or not raw.strip():
            continue
        if field_name == "backend_enabled":
            overrides[field_name] = raw.strip().lower() in _TRUTHY
        else:
            overrides[field_name] = raw.strip()
    return overrides


def load_storefront_config(config_path: Optional[Path] = None) -> StorefrontConfig:
    """
    Load and validate storefront configuration

    Args:
        config_path: Path to a YAML config file. Defaults to config/storefront.yml,
            which is optional.

    Returns:
        Validated StorefrontConfig object

    Raises:
        FileNotFoundError: If an explicit config_path doesn't exist
        ValidationError: If the merged settings don't match the schema
    """
    load_dotenv()

    explicit = config_path is not None
    if config_path is None:
        config_path = Path(__file__).parent.parent / "config" / "storefront.yml"

    config_data: Dict[str, Any] = {}
    if config_path.exists():
        with open(config_path, "r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f) or {}
    elif explicit:
        raise FileNotFoundError(f"Config file not found: {config_path}")

    config_data.update(_env_overrides())

    try:
        config = StorefrontConfig(**config_data)
    except ValidationError as e:
        logger.error(f"Storefront config validation failed: {e}")
        raise

    logger.info(
        "Storefront config loaded: api=%s backend_enabled=%s env=%s",
        config.api_base_url,
        config.backend_enabled,
        config.environment,
    )
    return config
