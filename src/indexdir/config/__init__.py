"""Configuration views and loaders for directory providers."""

from indexdir.errors import ConfigError

from .loader import DEFAULT_CONFIG_PATH, ENV_INDEX_BASE, dump_example_config, load_properties
from .models import (
    INDEX_BASE_KEY,
    INDEX_NAME_KEY,
    LOCKING_STRATEGY_KEY,
    IndexDirectorySettings,
    SourceDirectorySettings,
)

__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "ENV_INDEX_BASE",
    "INDEX_BASE_KEY",
    "INDEX_NAME_KEY",
    "IndexDirectorySettings",
    "LOCKING_STRATEGY_KEY",
    "SourceDirectorySettings",
    "dump_example_config",
    "load_properties",
]
