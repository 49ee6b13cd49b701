"""Render commands: preview each view helper from the command line."""

from __future__ import annotations

import logging
from datetime import datetime

import click
from pydantic import ValidationError

from productive.cli.exit_codes import ExitCode
from productive.cli.output import error_exit, format_option, markup_output
from productive.config.models import HelperConfig
from productive.core.date_patterns import DateFormatError
from productive.core.datetime_utils import parse_iso_datetime
from productive.helpers import (
    BackLinkRequest,
    DateDisplayRequest,
    OptionRequest,
    RecencyHighlightRequest,
    SearchHighlightRequest,
    title_case,
)

logger = logging.getLogger(__name__)


def _helper_config(ctx: click.Context) -> HelperConfig:
    config = ctx.obj.get("config") if ctx.obj else None
    return config.helpers if config is not None else HelperConfig()


def _parse_date(value: str | None, option: str, json_output: bool) -> datetime | None:
    if value is None or not value.strip():
        return None
    try:
        return parse_iso_datetime(value)
    except ValueError:
        error_exit(
            f"Invalid {option} '{value}'. Expected ISO-8601, e.g. 2024-01-15 "
            "or 2024-01-15T10:30:00Z",
            ExitCode.INVALID_INPUT,
            json_output,
        )


@click.command("title-case")
@click.argument("text")
@click.option("--locale", default=None, help="Locale for casing (e.g. tr-TR).")
@format_option
@click.pass_context
def title_case_command(
    ctx: click.Context, text: str, locale: str | None, output_format: str
) -> None:
    """Print TEXT converted to title case."""
    locale = locale or _helper_config(ctx).locale
    markup_output("title_case", title_case(text, locale), output_format == "json")


@click.command("highlight")
@click.argument("needle")
@click.argument("haystack")
@click.option("--css-class", default=None, help="Class of the highlight span.")
@format_option
@click.pass_context
def highlight_command(
    ctx: click.Context,
    needle: str,
    haystack: str,
    css_class: str | None,
    output_format: str,
) -> None:
    """Wrap each occurrence of NEEDLE in HAYSTACK in a highlight span.

    Examples:

    \b
        productive highlight fox "The Fox and the fox"
        productive highlight a.b "xa.bz" --css-class hl
    """
    request = SearchHighlightRequest(
        needle=needle,
        haystack=haystack,
        css_class=(
            css_class if css_class is not None else _helper_config(ctx).highlight_class
        ),
    )
    markup_output("highlight_word", request.render(), output_format == "json")


@click.command("short-date")
@click.argument("value", required=False)
@click.option("--date-format", "date_format", default=None, help="Date pattern.")
@format_option
@click.pass_context
def short_date_command(
    ctx: click.Context,
    value: str | None,
    date_format: str | None,
    output_format: str,
) -> None:
    """Format an ISO-8601 VALUE with a date pattern (empty when omitted).

    Examples:

    \b
        productive short-date 2024-03-05
        productive short-date 2024-03-05 --date-format "dddd, MMMM d, yyyy"
    """
    json_output = output_format == "json"
    parsed = _parse_date(value, "date", json_output)
    try:
        request = DateDisplayRequest(
            value=parsed,
            date_format=date_format or _helper_config(ctx).date_format,
        )
        markup = request.render()
    except (DateFormatError, ValidationError) as e:
        error_exit(str(e), ExitCode.INVALID_INPUT, json_output)
    markup_output("short_date", markup, json_output)


@click.command("short-date-new")
@click.argument("value", required=False)
@click.option("--days", type=int, default=None, help="Threshold in whole days.")
@click.option("--date-format", "date_format", default=None, help="Date pattern.")
@click.option("--now", "now_value", default=None, help="Reference time (ISO-8601).")
@format_option
@click.pass_context
def short_date_new_command(
    ctx: click.Context,
    value: str | None,
    days: int | None,
    date_format: str | None,
    now_value: str | None,
    output_format: str,
) -> None:
    """Format VALUE, marking it new when it is DAYS or more ahead of now."""
    json_output = output_format == "json"
    helpers = _helper_config(ctx)
    parsed = _parse_date(value, "date", json_output)
    now = _parse_date(now_value, "--now", json_output)
    try:
        request = RecencyHighlightRequest(
            value=parsed,
            threshold_days=days if days is not None else helpers.new_threshold_days,
            date_format=date_format or helpers.date_format,
        )
        markup = request.render(now=now)
    except (DateFormatError, ValidationError) as e:
        error_exit(str(e), ExitCode.INVALID_INPUT, json_output)
    except TypeError:
        error_exit(
            "Date and --now must both include a UTC offset or both omit it",
            ExitCode.INVALID_INPUT,
            json_output,
        )
    markup_output("short_date_highlight_new", markup, json_output)


@click.command("option")
@click.argument("value")
@click.argument("label")
@click.option("--selected", default="", help="Currently selected value.")
@click.option("--css-class", default="", help="Class of the option tag.")
@format_option
def option_command(
    value: str, label: str, selected: str, css_class: str, output_format: str
) -> None:
    """Render a single <option> tag for VALUE with LABEL."""
    request = OptionRequest(
        value=value, label=label, currently_selected=selected, css_class=css_class
    )
    markup_output("drop_down_option", request.render(), output_format == "json")


@click.command("back-button")
@click.option("--label", default=None, help="Link text.")
@click.option("--css-class", default=None, help="Class of the link.")
@format_option
@click.pass_context
def back_button_command(
    ctx: click.Context,
    label: str | None,
    css_class: str | None,
    output_format: str,
) -> None:
    """Render a link that navigates back in browser history."""
    helpers = _helper_config(ctx)
    request = BackLinkRequest(
        label=label if label is not None else helpers.back_label,
        css_class=css_class if css_class is not None else helpers.back_class,
    )
    markup_output("js_history_back_button", request.render(), output_format == "json")
