"""Render context for structured logging.

Tags log records emitted while one view is being rendered with the view's
name, using contextvars so concurrent renders stay separate.
"""

from __future__ import annotations

import contextvars
import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Generator

_view: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "view", default=None
)


def get_render_view() -> str | None:
    """Get the name of the view currently being rendered, if any."""
    return _view.get()


@contextmanager
def render_context(view: str) -> Generator[None, None, None]:
    """Context manager marking the rendering of a single view.

    Args:
        view: View name (e.g., "orders/index").

    Example:
        with render_context("orders/index"):
            highlight_word(term, body)  # debug logs carry view=orders/index
    """
    token = _view.set(view)
    try:
        yield
    finally:
        _view.reset(token)


class RenderContextFilter(logging.Filter):
    """Logging filter that injects the render context into log records.

    Adds a ``view`` attribute and a compact ``view_tag`` such as
    ``[orders/index] `` (empty outside a render) for text formats.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        view = _view.get()
        record.view = view
        record.view_tag = f"[{view}] " if view else ""
        return True  # Never filter out records
