"""Configuration package exports."""
from .loader import StoreConfigLoader, load_store_config, parse_config

__all__ = [
    "StoreConfigLoader",
    "load_store_config",
    "parse_config",
]
