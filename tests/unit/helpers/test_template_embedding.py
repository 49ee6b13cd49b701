"""Tests that helper markup survives an autoescaping template unchanged."""

from datetime import datetime

import jinja2
import pytest

from productive.helpers import (
    drop_down_option,
    highlight_word,
    js_history_back_button,
    short_date,
    title_case,
)


@pytest.fixture
def env() -> jinja2.Environment:
    """Jinja2 environment with autoescaping enabled."""
    return jinja2.Environment(autoescape=True)


class TestMarkupEmbedding:
    """Markup results are embedded as-is; plain text is escaped."""

    def test_highlight_not_reescaped(self, env):
        template = env.from_string("<p>{{ body }}</p>")
        body = highlight_word("fox", "The fox")
        assert template.render(body=body) == (
            '<p>The <span class="highlight">fox</span></p>'
        )

    def test_option_not_reescaped(self, env):
        template = env.from_string("<select>{{ opt }}</select>")
        html = template.render(opt=drop_down_option("a", "A", "a"))
        assert html == '<select><option value="a" class="" selected>A</option></select>'

    def test_back_button_not_reescaped(self, env):
        html = env.from_string("{{ btn }}").render(btn=js_history_back_button())
        assert html == '<a href="javascript:history.go(-1);" class="btn">Cancel</a>'

    def test_short_date_not_reescaped(self, env):
        html = env.from_string("{{ d }}").render(d=short_date(datetime(2024, 3, 5)))
        assert html == "03/5/24"

    def test_title_case_is_escaped(self, env):
        """title_case returns plain text, so the template escapes it."""
        html = env.from_string("{{ t }}").render(t=title_case("tom & jerry"))
        assert html == "Tom &amp; Jerry"
