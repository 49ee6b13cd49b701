"""Structured logging module.

Provides configurable logging with JSON format support and file rotation.
Includes render context support for tagging records with the current view.
"""

from productive.logging.config import JSONFormatter, configure_logging
from productive.logging.context import (
    RenderContextFilter,
    get_render_view,
    render_context,
)

__all__ = [
    "JSONFormatter",
    "RenderContextFilter",
    "configure_logging",
    "get_render_view",
    "render_context",
]
