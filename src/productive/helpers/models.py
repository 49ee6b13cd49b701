"""Pydantic request models for the view helpers.

Each model captures the arguments of one helper call. Models are frozen and
reject unknown fields; render() invokes the matching helper.
"""

from __future__ import annotations

from datetime import datetime

from markupsafe import Markup
from pydantic import BaseModel, ConfigDict, Field

from productive.helpers.dates import (
    DEFAULT_DATE_FORMAT,
    DEFAULT_NEW_THRESHOLD_DAYS,
    short_date,
    short_date_highlight_new,
)
from productive.helpers.tags import (
    DEFAULT_BACK_CLASS,
    DEFAULT_BACK_LABEL,
    drop_down_option,
    js_history_back_button,
)
from productive.helpers.text import DEFAULT_HIGHLIGHT_CLASS, highlight_word


class SearchHighlightRequest(BaseModel):
    """Arguments for highlight_word()."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    needle: str | None = None
    haystack: str | None = None
    css_class: str = DEFAULT_HIGHLIGHT_CLASS

    def render(self) -> Markup:
        return highlight_word(self.needle, self.haystack, self.css_class)


class DateDisplayRequest(BaseModel):
    """Arguments for short_date()."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    value: datetime | None = None
    date_format: str = Field(default=DEFAULT_DATE_FORMAT, min_length=1)

    def render(self) -> Markup:
        return short_date(self.value, self.date_format)


class RecencyHighlightRequest(DateDisplayRequest):
    """Arguments for short_date_highlight_new()."""

    threshold_days: int = DEFAULT_NEW_THRESHOLD_DAYS

    def render(self, now: datetime | None = None) -> Markup:
        return short_date_highlight_new(
            self.value, self.threshold_days, self.date_format, now=now
        )


class OptionRequest(BaseModel):
    """Arguments for drop_down_option()."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    value: str
    label: str
    currently_selected: str = ""
    css_class: str = ""

    def render(self) -> Markup:
        return drop_down_option(
            self.value, self.label, self.currently_selected, self.css_class
        )


class BackLinkRequest(BaseModel):
    """Arguments for js_history_back_button()."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    label: str = DEFAULT_BACK_LABEL
    css_class: str = DEFAULT_BACK_CLASS

    def render(self) -> Markup:
        return js_history_back_button(self.label, self.css_class)
