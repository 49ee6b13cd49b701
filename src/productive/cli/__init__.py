"""CLI module for the productive view helpers."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from pathlib import Path

import click

from productive.cli.exit_codes import ExitCode
from productive.cli.output import error_exit, format_option

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(package_name="productive-helpers")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Config file (default: ~/.productive/config.toml).",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default=None,
    help="Override log level (default: info).",
)
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Override log file path.",
)
@click.option(
    "--log-json",
    is_flag=True,
    default=False,
    help="Use JSON log format.",
)
@click.pass_context
def main(
    ctx: click.Context,
    config_path: Path | None,
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
) -> None:
    """Productive view helpers - preview presentation helpers as HTML."""
    from productive.config import TomlParseError, apply_logging_overrides, get_config
    from productive.logging import configure_logging

    ctx.ensure_object(dict)

    # Preserve a config injected by tests
    if "config" not in ctx.obj:
        try:
            ctx.obj["config"] = get_config(config_path=config_path, strict=True)
        except (TomlParseError, ValueError) as e:
            error_exit(str(e), ExitCode.CONFIG_ERROR)

    try:
        logging_config = apply_logging_overrides(
            ctx.obj["config"].logging,
            level=log_level,
            file=log_file,
            format="json" if log_json else None,
        )
    except ValueError as e:
        error_exit(str(e), ExitCode.CONFIG_ERROR)
    configure_logging(logging_config)
    logger.debug("Loaded helper defaults: %s", ctx.obj["config"].helpers)


@click.command("config")
@format_option
@click.pass_context
def config_command(ctx: click.Context, output_format: str) -> None:
    """Show the effective helper defaults."""
    helpers = asdict(ctx.obj["config"].helpers)

    if output_format == "json":
        click.echo(json.dumps(helpers, indent=2))
        return

    for key, value in helpers.items():
        click.echo(f"{key}: {value if value is not None else '(default)'}")


# Defer import to avoid circular dependency
def _register_commands():
    from productive.cli.render import (
        back_button_command,
        highlight_command,
        option_command,
        short_date_command,
        short_date_new_command,
        title_case_command,
    )

    main.add_command(title_case_command)
    main.add_command(highlight_command)
    main.add_command(short_date_command)
    main.add_command(short_date_new_command)
    main.add_command(option_command)
    main.add_command(back_button_command)
    main.add_command(config_command)


_register_commands()
