"""Configuration management for ytflow.

Configuration is loaded with precedence handling:
1. CLI flags (highest priority)
2. Environment variables (YTFLOW_*)
3. Config file (~/.ytflow/config.toml)
4. Default values (lowest priority)
"""

from ytflow.config.builder import (
    ConfigBuilder,
    ConfigSource,
    source_from_env,
    source_from_file,
)
from ytflow.config.env import EnvReader
from ytflow.config.loader import (
    ConfigError,
    clear_config_cache,
    get_config,
    get_data_dir,
    get_default_config_path,
    load_config_file,
    load_toml_file,
)
from ytflow.config.logging_factory import (
    build_logging_config,
    configure_logging_from_cli,
)
from ytflow.config.models import (
    DisplayConfig,
    LoggingConfig,
    StorageConfig,
    YtflowConfig,
)

__all__ = [
    # Models
    "DisplayConfig",
    "LoggingConfig",
    "StorageConfig",
    "YtflowConfig",
    # Loader
    "ConfigError",
    "clear_config_cache",
    "get_config",
    "get_data_dir",
    "get_default_config_path",
    "load_config_file",
    "load_toml_file",
    # Layering
    "EnvReader",
    "ConfigBuilder",
    "ConfigSource",
    "source_from_env",
    "source_from_file",
    # Logging
    "build_logging_config",
    "configure_logging_from_cli",
]
