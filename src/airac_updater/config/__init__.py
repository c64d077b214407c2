"""Application configuration helpers."""

from __future__ import annotations

from .catalog import CatalogConfig, get_catalog_config
from .errors import ConfigurationError
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging, parse_log_level
from .reconciliation import ReconciliationConfig, get_reconciliation_config
from .storage import StorageConfig, get_storage_config

__all__ = [
    "CacheConfig",
    "CatalogConfig",
    "ConfigurationError",
    "RateLimit",
    "ReconciliationConfig",
    "ResilienceConfig",
    "RetryPolicy",
    "StorageConfig",
    "configure_logging",
    "get_catalog_config",
    "get_reconciliation_config",
    "get_storage_config",
    "parse_log_level",
]
