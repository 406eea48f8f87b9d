"""
Configuration Package - Models and Loaders.

This package handles all configuration aspects of the Filings Dashboard:
    - Pydantic models for type-safe configuration
    - YAML loader with validation
    - Support for configuration profiles

Configuration Structure:
    - DashboardConfig: Root configuration object
    - PaginationConfig: Page size of the filings list
    - DefaultsConfig: Initial tab and fund type
    - ProviderConfig: Mock or file-backed data provider
    - RetrySettings: Retry policy at the provider boundary
"""

from filings_dashboard.config.loader import ConfigLoader, load_config
from filings_dashboard.config.models import (
    DashboardConfig,
    DefaultsConfig,
    PaginationConfig,
    ProviderConfig,
    RetrySettings,
)

__all__ = [
    "ConfigLoader",
    "DashboardConfig",
    "DefaultsConfig",
    "PaginationConfig",
    "ProviderConfig",
    "RetrySettings",
    "load_config",
]
