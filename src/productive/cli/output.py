"""Output helpers shared by the render commands: text or JSON."""

from __future__ import annotations

import json
import sys
from collections.abc import Callable
from typing import Any, NoReturn, TypeVar

import click

from productive.cli.exit_codes import ExitCode

F = TypeVar("F", bound=Callable[..., Any])


def format_option(func: F) -> F:
    """Add the shared ``--format text|json`` option to a command."""
    return click.option(
        "--format",
        "output_format",
        type=click.Choice(["text", "json"], case_sensitive=False),
        default="text",
        show_default=True,
        help="Output format.",
    )(func)


def error_exit(
    message: str,
    code: ExitCode | int,
    json_output: bool = False,
) -> NoReturn:
    """Report an error on stderr and exit with ``code``.

    In JSON mode the report is ``{"status": "failed", "error": {...}}``
    with the ExitCode name, or UNKNOWN_ERROR for a bare integer.
    """
    if json_output:
        name = code.name if isinstance(code, ExitCode) else "UNKNOWN_ERROR"
        report = {"status": "failed", "error": {"code": name, "message": message}}
        click.echo(json.dumps(report), err=True)
    else:
        click.echo(f"Error: {message}", err=True)
    sys.exit(int(code))


def markup_output(helper: str, markup: str, json_output: bool = False) -> None:
    """Print one helper's rendered markup, optionally wrapped in JSON."""
    if json_output:
        click.echo(json.dumps({"helper": helper, "markup": str(markup)}))
    else:
        click.echo(str(markup))
