"""Root logger setup for the CLI and for applications embedding the helpers."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from productive.logging.context import RenderContextFilter

if TYPE_CHECKING:
    from productive.config.models import LoggingConfig

# view_tag is "[orders/index] " inside render_context(), empty otherwise
TEXT_FORMAT = "%(asctime)s - %(view_tag)s%(name)s - %(levelname)s - %(message)s"


class JSONFormatter(logging.Formatter):
    """Render a record as one JSON object per line.

    Keys: ``timestamp`` (UTC, ISO-8601), ``level``, ``logger``, ``message``,
    plus ``view`` inside render_context() and ``exception`` when a
    traceback is attached.
    """

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        entry = {
            "timestamp": created.isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        view = getattr(record, "view", None)
        if view:
            entry["view"] = view
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


def _open_log_file(config: LoggingConfig) -> logging.Handler | None:
    path = Path(config.file).expanduser()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        return RotatingFileHandler(
            path,
            maxBytes=config.max_bytes,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"Warning: Could not open log file {path}: {e}\n")
        return None


def configure_logging(config: LoggingConfig) -> None:
    """Replace the root logger's handlers according to ``config``.

    Records go to the rotating log file when one is configured and can be
    opened. They go to stderr when there is no usable file, or in addition
    to it when ``include_stderr`` is set.
    """
    if config.format.lower() == "json":
        formatter: logging.Formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(TEXT_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z")

    handlers: list[logging.Handler] = []
    if config.file:
        file_handler = _open_log_file(config)
        if file_handler is not None:
            handlers.append(file_handler)
    if config.include_stderr or not handlers:
        handlers.append(logging.StreamHandler(sys.stderr))

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(config.level.upper())

    view_filter = RenderContextFilter()
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.addFilter(view_filter)
        root.addHandler(handler)
