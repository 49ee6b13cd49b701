"""Configuration data models.

This module defines dataclasses for helper defaults and logging options.
Values may come from a TOML file, so each field is type-checked on
construction and any mismatch is reported as ValueError.
"""

from dataclasses import dataclass, field
from pathlib import Path


def _require_str(name: str, value: object, *, optional: bool = False) -> None:
    if value is None and optional:
        return
    if not isinstance(value, str):
        raise ValueError(f"{name} must be a string, got {value!r}")


def _require_int(name: str, value: object) -> None:
    # bool is an int subclass; `true` in TOML is not a count
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")


@dataclass
class HelperConfig:
    """Default arguments applied when a caller renders helpers from config.

    The helpers themselves never read configuration; these values are
    passed explicitly by the CLI or any other caller.
    """

    locale: str | None = None
    """Locale for title casing (e.g., "en-US", "tr-TR"). None = default casing."""

    date_format: str = "MM/d/yy"
    """Custom date pattern for short dates."""

    highlight_class: str = "highlight"
    """Class attribute of search highlight spans."""

    new_threshold_days: int = 7
    """Whole-day difference at which a date is marked as new."""

    back_label: str = "Cancel"
    back_class: str = "btn"

    def __post_init__(self) -> None:
        """Validate configuration."""
        _require_str("locale", self.locale, optional=True)
        for name in ("date_format", "highlight_class", "back_label", "back_class"):
            _require_str(name, getattr(self, name))
        _require_int("new_threshold_days", self.new_threshold_days)

        if not self.date_format:
            raise ValueError("date_format must not be empty")
        if self.new_threshold_days < 0:
            raise ValueError(
                f"new_threshold_days must be >= 0, got {self.new_threshold_days}"
            )


@dataclass
class LoggingConfig:
    """Configuration for structured logging."""

    # debug, info, warning or error
    level: str = "info"

    # None logs to stderr only
    file: Path | None = None

    # text or json
    format: str = "text"

    include_stderr: bool = False

    # Rotate the log file at this size (10MB)
    max_bytes: int = 10_485_760

    backup_count: int = 5

    def __post_init__(self) -> None:
        """Validate configuration."""
        _require_str("level", self.level)
        _require_str("format", self.format)
        _require_int("max_bytes", self.max_bytes)
        _require_int("backup_count", self.backup_count)
        if not isinstance(self.include_stderr, bool):
            raise ValueError(
                f"include_stderr must be a boolean, got {self.include_stderr!r}"
            )

        valid_levels = {"debug", "info", "warning", "error"}
        if self.level.lower() not in valid_levels:
            raise ValueError(f"level must be one of {valid_levels}, got {self.level}")
        valid_formats = {"text", "json"}
        if self.format.lower() not in valid_formats:
            raise ValueError(
                f"format must be one of {valid_formats}, got {self.format}"
            )


@dataclass
class ProductiveConfig:
    """Main configuration container.

    Aggregates all configuration sections.
    """

    helpers: HelperConfig = field(default_factory=HelperConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
