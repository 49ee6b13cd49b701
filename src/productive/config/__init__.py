"""Configuration management for the view helpers.

Configuration is loaded with precedence handling:
1. CLI flags (highest priority)
2. Environment variables (PRODUCTIVE_*)
3. Config file (~/.productive/config.toml)
4. Default values (lowest priority)
"""

from productive.config.env import EnvReader
from productive.config.loader import (
    TomlParseError,
    apply_logging_overrides,
    clear_config_cache,
    get_config,
    get_default_config_path,
    load_config_file,
)
from productive.config.models import HelperConfig, LoggingConfig, ProductiveConfig

__all__ = [
    # Models
    "HelperConfig",
    "LoggingConfig",
    "ProductiveConfig",
    # Loader
    "TomlParseError",
    "apply_logging_overrides",
    "clear_config_cache",
    "get_config",
    "get_default_config_path",
    "load_config_file",
    # Environment
    "EnvReader",
]
