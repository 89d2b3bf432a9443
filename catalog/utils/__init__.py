"""
Utility modules for the catalog service
"""
from .config_loader import CatalogConfig, load_catalog_config
from .id_generator import MonotonicIdGenerator, default_id_generator

__all__ = [
    'CatalogConfig',
    'load_catalog_config',
    'MonotonicIdGenerator',
    'default_id_generator',
]
