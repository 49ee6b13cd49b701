"""Tests for helper request models."""

from datetime import datetime, timedelta

import pytest
from pydantic import ValidationError

from productive.helpers import (
    BackLinkRequest,
    DateDisplayRequest,
    OptionRequest,
    RecencyHighlightRequest,
    SearchHighlightRequest,
)


class TestSearchHighlightRequest:
    """Tests for SearchHighlightRequest."""

    def test_defaults(self):
        request = SearchHighlightRequest()
        assert request.needle is None
        assert request.haystack is None
        assert request.css_class == "highlight"
        assert request.render() == ""

    def test_render(self):
        request = SearchHighlightRequest(needle="ox", haystack="Box")
        assert request.render() == 'B<span class="highlight">ox</span>'

    def test_frozen(self):
        request = SearchHighlightRequest(needle="a")
        with pytest.raises(ValidationError):
            request.needle = "b"

    def test_rejects_unknown_fields(self):
        with pytest.raises(ValidationError):
            SearchHighlightRequest(needle="a", colour="red")


class TestDateDisplayRequest:
    """Tests for DateDisplayRequest."""

    def test_defaults(self):
        request = DateDisplayRequest()
        assert request.value is None
        assert request.date_format == "MM/d/yy"
        assert request.render() == ""

    def test_render(self):
        request = DateDisplayRequest(value=datetime(2024, 3, 5), date_format="yyyy")
        assert request.render() == "2024"

    def test_parses_iso_string(self):
        request = DateDisplayRequest(value="2024-03-05T00:00:00")
        assert request.value == datetime(2024, 3, 5)

    def test_empty_format_rejected(self):
        with pytest.raises(ValidationError):
            DateDisplayRequest(date_format="")


class TestRecencyHighlightRequest:
    """Tests for RecencyHighlightRequest."""

    def test_defaults(self):
        request = RecencyHighlightRequest()
        assert request.threshold_days == 7
        assert request.date_format == "MM/d/yy"

    def test_render_with_injected_now(self, fixed_now):
        request = RecencyHighlightRequest(
            value=fixed_now + timedelta(days=9), threshold_days=7
        )
        assert request.render(now=fixed_now) == '<span class="new">03/14/24</span>'

    def test_is_a_date_display_request(self):
        assert isinstance(RecencyHighlightRequest(), DateDisplayRequest)


class TestOptionRequest:
    """Tests for OptionRequest."""

    def test_requires_value_and_label(self):
        with pytest.raises(ValidationError):
            OptionRequest(label="Pending")

    def test_render(self):
        request = OptionRequest(
            value="Pending", label="Pending", currently_selected="PENDING"
        )
        assert request.render() == (
            '<option value="Pending" class="" selected>Pending</option>'
        )


class TestBackLinkRequest:
    """Tests for BackLinkRequest."""

    def test_defaults(self):
        request = BackLinkRequest()
        assert request.render() == (
            '<a href="javascript:history.go(-1);" class="btn">Cancel</a>'
        )

    def test_equality_by_value(self):
        assert BackLinkRequest(label="Back") == BackLinkRequest(label="Back")
