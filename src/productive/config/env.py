"""Typed access to PRODUCTIVE_* environment variables."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

logger = logging.getLogger(__name__)


class EnvReader:
    """Read settings from an environment mapping.

    Tests pass ``env={...}``; everything else reads ``os.environ``.
    Every getter returns None for an unset variable so results can be
    chained with lower-precedence sources.
    """

    def __init__(self, env: Mapping[str, str] | None = None) -> None:
        self._env: Mapping[str, str] = os.environ if env is None else env

    def get_str(self, var: str, default: str | None = None) -> str | None:
        return self._env.get(var, default)

    def get_int(self, var: str, default: int | None = None) -> int | None:
        """Parse an integer; an unparsable value is logged and ignored."""
        raw = self._env.get(var)
        if raw is None:
            return default
        try:
            return int(raw)
        except ValueError:
            logger.warning("Invalid integer value for %s: %s", var, raw)
            return default

    def get_path(self, var: str, default: Path | None = None) -> Path | None:
        """Return a user-expanded path. An empty value counts as unset."""
        raw = self._env.get(var)
        return Path(raw).expanduser() if raw else default
