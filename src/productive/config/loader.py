"""Configuration loader with precedence handling.

Configuration is loaded with the following precedence (highest to lowest):
1. CLI arguments (passed directly to get_config)
2. Environment variables (PRODUCTIVE_*)
3. Config file (~/.productive/config.toml)
4. Default values

Environment variables:
- PRODUCTIVE_CONFIG_PATH: Path to config file (overrides default location)
- PRODUCTIVE_LOCALE: Locale for title casing
- PRODUCTIVE_DATE_FORMAT: Custom date pattern for short dates
- PRODUCTIVE_HIGHLIGHT_CLASS: Class of search highlight spans
- PRODUCTIVE_NEW_THRESHOLD_DAYS: Day threshold for the "new" marker
- PRODUCTIVE_LOG_LEVEL: Log level (debug, info, warning, error)
- PRODUCTIVE_LOG_FILE: Log file path
- PRODUCTIVE_LOG_FORMAT: Log format (text, json)
"""

from __future__ import annotations

import logging
import threading
import tomllib
from dataclasses import replace
from pathlib import Path
from typing import Any

from productive.config.env import EnvReader
from productive.config.models import HelperConfig, LoggingConfig, ProductiveConfig

logger = logging.getLogger(__name__)

# Default config location
DEFAULT_CONFIG_DIR = Path.home() / ".productive"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.toml"

# Config file cache: path -> (parsed config, mtime)
_config_cache: dict[Path, tuple[dict, float]] = {}
_config_cache_lock = threading.Lock()


class TomlParseError(ValueError):
    """Raised when a config file exists but cannot be parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to parse config file {path}: {reason}")


def get_default_config_path(env_reader: EnvReader | None = None) -> Path:
    """Get the default config file path.

    Can be overridden by PRODUCTIVE_CONFIG_PATH environment variable.

    Returns:
        Path to config file.
    """
    reader = env_reader or EnvReader()
    return reader.get_path("PRODUCTIVE_CONFIG_PATH", DEFAULT_CONFIG_FILE)


def load_toml_file(path: Path, *, strict: bool = False) -> dict[str, Any]:
    """Load and parse a TOML file.

    Args:
        path: Path to the TOML file.
        strict: If True, raise TomlParseError on parse failures.

    Returns:
        Parsed dictionary. Empty dict if the file doesn't exist, or if it
        cannot be parsed and strict is False.

    Raises:
        TomlParseError: When strict=True and the file cannot be parsed.
    """
    if not path.exists():
        logger.debug("TOML file not found: %s", path)
        return {}

    try:
        config = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        if strict:
            raise TomlParseError(path, str(e)) from e
        logger.warning("Failed to load TOML file %s: %s", path, e)
        return {}

    logger.debug("Loaded TOML config from %s", path)
    return config


def load_config_file(path: Path | None = None, *, strict: bool = False) -> dict:
    """Load configuration from TOML file.

    Results are cached with mtime-based invalidation. The cache automatically
    reloads the file if it has been modified since the last read.
    Use clear_config_cache() to force a reload regardless of mtime.

    Thread-safe: uses a lock to protect concurrent access to the cache.

    Args:
        path: Path to config file. If None, uses default location.
        strict: If True, raise TomlParseError on parse failures.

    Returns:
        Parsed configuration dict. Empty dict if file doesn't exist.
    """
    if path is None:
        path = get_default_config_path()

    try:
        current_mtime = path.stat().st_mtime
    except FileNotFoundError:
        current_mtime = 0.0

    with _config_cache_lock:
        cached = _config_cache.get(path)
        if cached is not None and cached[1] == current_mtime:
            return cached[0]

        result = load_toml_file(path, strict=strict)
        _config_cache[path] = (result, current_mtime)
        return result


def clear_config_cache() -> None:
    """Clear the config file cache.

    Primarily useful for testing.
    """
    with _config_cache_lock:
        _config_cache.clear()


def _pick(*values: Any) -> Any:
    """Return the first value that is not None."""
    for value in values:
        if value is not None:
            return value
    return None


def _section(file_config: dict[str, Any], name: str) -> dict[str, Any]:
    section = file_config.get(name, {})
    if not isinstance(section, dict):
        raise ValueError(f"[{name}] must be a table, got {section!r}")
    return section


def _build_helper_config(
    section: dict[str, Any],
    reader: EnvReader,
    overrides: dict[str, Any],
) -> HelperConfig:
    defaults = HelperConfig()
    return HelperConfig(
        locale=_pick(
            overrides.get("locale"),
            reader.get_str("PRODUCTIVE_LOCALE"),
            section.get("locale"),
            defaults.locale,
        ),
        date_format=_pick(
            overrides.get("date_format"),
            reader.get_str("PRODUCTIVE_DATE_FORMAT"),
            section.get("date_format"),
            defaults.date_format,
        ),
        highlight_class=_pick(
            reader.get_str("PRODUCTIVE_HIGHLIGHT_CLASS"),
            section.get("highlight_class"),
            defaults.highlight_class,
        ),
        new_threshold_days=_pick(
            overrides.get("new_threshold_days"),
            reader.get_int("PRODUCTIVE_NEW_THRESHOLD_DAYS"),
            section.get("new_threshold_days"),
            defaults.new_threshold_days,
        ),
        back_label=_pick(section.get("back_label"), defaults.back_label),
        back_class=_pick(section.get("back_class"), defaults.back_class),
    )


def _build_logging_config(section: dict[str, Any], reader: EnvReader) -> LoggingConfig:
    defaults = LoggingConfig()
    file_value = _pick(reader.get_path("PRODUCTIVE_LOG_FILE"), section.get("file"))
    if file_value is not None and not isinstance(file_value, (str, Path)):
        raise ValueError(f"file must be a path string, got {file_value!r}")
    return LoggingConfig(
        level=_pick(
            reader.get_str("PRODUCTIVE_LOG_LEVEL"), section.get("level"), defaults.level
        ),
        file=Path(file_value).expanduser() if file_value else None,
        format=_pick(
            reader.get_str("PRODUCTIVE_LOG_FORMAT"),
            section.get("format"),
            defaults.format,
        ),
        include_stderr=_pick(section.get("include_stderr"), defaults.include_stderr),
        max_bytes=_pick(section.get("max_bytes"), defaults.max_bytes),
        backup_count=_pick(section.get("backup_count"), defaults.backup_count),
    )


def apply_logging_overrides(
    base: LoggingConfig,
    *,
    level: str | None = None,
    file: Path | None = None,
    format: str | None = None,
) -> LoggingConfig:
    """Return a copy of ``base`` with the non-None CLI overrides applied.

    Raises:
        ValueError: When an override fails LoggingConfig validation.
    """
    overrides = {"level": level, "file": file, "format": format}
    return replace(base, **{k: v for k, v in overrides.items() if v is not None})


def get_config(
    config_path: Path | None = None,
    # CLI overrides (highest precedence)
    locale: str | None = None,
    date_format: str | None = None,
    new_threshold_days: int | None = None,
    # Optional dependency injection for testing
    env_reader: EnvReader | None = None,
    *,
    strict: bool = False,
) -> ProductiveConfig:
    """Get configuration with full precedence handling.

    Precedence (highest to lowest):
    1. Arguments passed to this function
    2. Environment variables (PRODUCTIVE_*)
    3. Config file
    4. Default values

    Args:
        config_path: Path to config file (overrides PRODUCTIVE_CONFIG_PATH).
        locale: CLI override for the title-case locale.
        date_format: CLI override for the date pattern.
        new_threshold_days: CLI override for the "new" threshold.
        env_reader: Optional EnvReader for testing (uses os.environ if None).
        strict: If True, raise TomlParseError on config file parse failures.

    Returns:
        ProductiveConfig with merged configuration.

    Raises:
        TomlParseError: When strict=True and the config file cannot be parsed.
        ValueError: When a merged value fails validation.
    """
    reader = env_reader or EnvReader()
    path = config_path or get_default_config_path(reader)
    file_config = load_config_file(path, strict=strict)

    overrides = {
        "locale": locale,
        "date_format": date_format,
        "new_threshold_days": new_threshold_days,
    }

    return ProductiveConfig(
        helpers=_build_helper_config(
            _section(file_config, "helpers"), reader, overrides
        ),
        logging=_build_logging_config(_section(file_config, "logging"), reader),
    )
