"""Configuration models and loaders for filedigest."""

from .loader import ConfigError, DEFAULT_CONFIG_PATH, dump_example_config, load_config
from .models import FileDigestConfig, HashingConfig, LoggingConfig

__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "FileDigestConfig",
    "HashingConfig",
    "LoggingConfig",
    "dump_example_config",
    "load_config",
]
