"""Configuration loader with precedence handling.

Configuration is loaded with the following precedence (highest to lowest):
1. CLI arguments (passed directly to get_config)
2. Environment variables (YTFLOW_*)
3. Config file (~/.ytflow/config.toml)
4. Default values

Environment variables:
- YTFLOW_CONFIG_PATH: Path to config file (overrides default location)
- YTFLOW_DATA_DIR: Path to the ytflow data directory (overrides ~/.ytflow/)
- YTFLOW_INDEX_PATH: Path to the video index YAML file
- YTFLOW_MANUSCRIPT_DIR: Root directory of the video YAML files
- YTFLOW_FAR_FUTURE_MONTHS: Months ahead that count as "far future"
- YTFLOW_LOG_LEVEL / YTFLOW_LOG_FILE / YTFLOW_LOG_FORMAT /
  YTFLOW_LOG_INCLUDE_STDERR: Logging overrides
"""

from __future__ import annotations

import logging
import os
import threading
import tomllib
from pathlib import Path
from typing import Any

from ytflow.config.builder import (
    ConfigBuilder,
    ConfigSource,
    source_from_env,
    source_from_file,
)
from ytflow.config.env import EnvReader
from ytflow.config.models import YtflowConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = Path.home() / ".ytflow"
CONFIG_FILE_NAME = "config.toml"

# Cache for loaded config files (path -> (parsed dict, mtime))
_config_cache: dict[Path, tuple[dict[str, Any], float]] = {}
_config_cache_lock = threading.Lock()


class ConfigError(Exception):
    """Configuration file could not be parsed or holds invalid values."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.message = message
        self.path = path
        super().__init__(message)


def get_data_dir() -> Path:
    """Get the ytflow data directory.

    Can be overridden by the YTFLOW_DATA_DIR environment variable.

    Returns:
        Path to the data directory (~/.ytflow/ by default).
    """
    env_path = os.environ.get("YTFLOW_DATA_DIR")
    if env_path:
        return Path(env_path).expanduser()
    return DEFAULT_CONFIG_DIR


def get_default_config_path() -> Path:
    """Get the default config file path.

    YTFLOW_CONFIG_PATH wins over YTFLOW_DATA_DIR.
    """
    env_path = os.environ.get("YTFLOW_CONFIG_PATH")
    if env_path:
        return Path(env_path).expanduser()
    return get_data_dir() / CONFIG_FILE_NAME


def load_toml_file(path: Path, *, strict: bool = False) -> dict[str, Any]:
    """Parse a TOML file.

    Args:
        path: File to parse.
        strict: If True, raise ConfigError on parse failures.

    Returns:
        Parsed dict; empty if the file does not exist or (non-strict) cannot
        be parsed.

    Raises:
        ConfigError: When strict=True and the file cannot be read or parsed.
    """
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, tomllib.TOMLDecodeError) as e:
        if strict:
            raise ConfigError(f"Cannot parse config file {path}: {e}", path) from e
        logger.warning("Ignoring unparsable config file %s: %s", path, e)
        return {}


def load_config_file(path: Path | None = None, *, strict: bool = False) -> dict:
    """Load configuration from TOML file.

    Results are cached with mtime-based invalidation. Use
    clear_config_cache() to force a reload regardless of mtime.

    Args:
        path: Path to config file. If None, uses default location.
        strict: If True, raise ConfigError on parse failures.

    Returns:
        Parsed configuration dict. Empty dict if file doesn't exist.
    """
    if path is None:
        path = get_default_config_path()

    try:
        current_mtime = path.stat().st_mtime
    except OSError:
        current_mtime = 0.0

    with _config_cache_lock:
        cached = _config_cache.get(path)
        if cached is not None and cached[1] == current_mtime:
            return cached[0]

        result = load_toml_file(path, strict=strict)
        _config_cache[path] = (result, current_mtime)
        return result


def clear_config_cache() -> None:
    """Clear the config file cache. Primarily useful for testing."""
    with _config_cache_lock:
        _config_cache.clear()


def get_config(
    config_path: Path | None = None,
    # CLI overrides (highest precedence)
    index_path: Path | None = None,
    manuscript_dir: Path | None = None,
    log_level: str | None = None,
    log_file: Path | None = None,
    log_format: str | None = None,
    # Optional dependency injection for testing
    env_reader: EnvReader | None = None,
    *,
    strict: bool = False,
) -> YtflowConfig:
    """Get ytflow configuration with full precedence handling.

    Args:
        config_path: Path to config file (overrides YTFLOW_CONFIG_PATH).
        index_path: CLI override for the index file.
        manuscript_dir: CLI override for the manuscript directory.
        log_level: CLI override for the log level.
        log_file: CLI override for the log file.
        log_format: CLI override for the log format.
        env_reader: Optional EnvReader for testing (uses os.environ if None).
        strict: If True, raise ConfigError on config file problems.

    Returns:
        YtflowConfig with merged configuration.

    Raises:
        ConfigError: When strict=True and the config file cannot be parsed
            or any layer holds an invalid value.
    """
    reader = env_reader or EnvReader()
    file_config = load_config_file(config_path, strict=strict)

    cli_source = ConfigSource(
        index_path=index_path,
        manuscript_dir=manuscript_dir,
        logging_level=log_level,
        logging_file=log_file,
        logging_format=log_format,
    )

    builder = ConfigBuilder()
    builder.apply(source_from_file(file_config), source_name="file")
    builder.apply(source_from_env(reader), source_name="env")
    builder.apply(cli_source, source_name="cli")

    try:
        return builder.build()
    except (TypeError, ValueError) as e:
        if strict:
            raise ConfigError(f"Invalid configuration: {e}", config_path) from e
        logger.warning("Invalid configuration (%s), using defaults", e)
        return YtflowConfig()
