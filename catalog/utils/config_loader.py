"""
Configuration loader for the catalog service (product API, local data, view defaults).
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Literal, Mapping, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent.parent

_TRUTHY = ("1", "true", "yes", "on")


class ProductApiConfig(BaseModel):
    base_url: str = "http://localhost:3033"
    timeout_seconds: float = Field(default=10.0, gt=0, le=300)


class LocalDataConfig(BaseModel):
    enabled: bool = False
    path: str = "data/products.json"

    def resolved_path(self) -> Path:
        p = Path(self.path)
        return p if p.is_absolute() else PROJECT_ROOT / p


class ViewsConfig(BaseModel):
    default_sort: Literal["alphabetical", "count"] = "alphabetical"


class CatalogConfig(BaseModel):
    api: ProductApiConfig = Field(default_factory=ProductApiConfig)
    local_data: LocalDataConfig = Field(default_factory=LocalDataConfig)
    views: ViewsConfig = Field(default_factory=ViewsConfig)


def _apply_env_overrides(data: Dict[str, Any], env: Mapping[str, str]) -> Dict[str, Any]:
    api = dict(data.get("api") or {})
    local_data = dict(data.get("local_data") or {})

    if env.get("CATALOG_API_URL"):
        api["base_url"] = env["CATALOG_API_URL"]
    if env.get("CATALOG_API_TIMEOUT"):
        api["timeout_seconds"] = env["CATALOG_API_TIMEOUT"]
    if env.get("CATALOG_USE_LOCAL_DATA"):
        local_data["enabled"] = env["CATALOG_USE_LOCAL_DATA"].strip().lower() in _TRUTHY
    if env.get("CATALOG_LOCAL_DATA_PATH"):
        local_data["path"] = env["CATALOG_LOCAL_DATA_PATH"]

    return {**data, "api": api, "local_data": local_data}


def load_catalog_config(config_path: Optional[Path] = None, env: Optional[Mapping[str, str]] = None) -> CatalogConfig:
    """
    Load and validate the catalog configuration from a YAML file

    Args:
        config_path: Path to config file. Defaults to config/catalog_config.yml
        env: Environment mapping used for overrides. Defaults to os.environ

    Returns:
        Validated CatalogConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    if config_path is None:
        config_path = PROJECT_ROOT / "config" / "catalog_config.yml"

    if not config_path.exists():
        raise FileNotFoundError(f"Catalog config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    data = _apply_env_overrides(data, os.environ if env is None else env)

    try:
        cfg = CatalogConfig(**data)
        logger.info("Successfully loaded catalog config from %s", config_path)
        return cfg
    except ValidationError as e:
        logger.error("Catalog config validation failed: %s", e)
        raise
