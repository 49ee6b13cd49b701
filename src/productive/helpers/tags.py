"""HTML tag helpers: select options and back links.

Attribute values and labels are interpolated verbatim. Callers must pass
values that are already safe inside an attribute or element body.
"""

from __future__ import annotations

from markupsafe import Markup

from productive.core.string_utils import compare_strings_ci, is_blank

DEFAULT_BACK_LABEL = "Cancel"
DEFAULT_BACK_CLASS = "btn"

# Navigates one step back in browser history
HISTORY_BACK_HREF = "javascript:history.go(-1);"


def is_selected_option(value: str, currently_selected: str | None) -> bool:
    """Check whether an option value matches the current selection.

    A blank selection never matches. Otherwise comparison ignores case
    but not surrounding whitespace.
    """
    if is_blank(currently_selected):
        return False
    return compare_strings_ci(value, currently_selected)


def drop_down_option(
    value: str,
    label_text: str,
    currently_selected: str | None = "",
    css_class: str = "",
) -> Markup:
    """Render a single ``<option>`` tag.

    Unlike a full select-list builder this renders one option, which suits
    a handful of known choices written out in a template.

    Args:
        value: Option value.
        label_text: Text displayed for the option.
        currently_selected: Current selection to compare with value
            (case-insensitive).
        css_class: Class attribute for the option.

    Returns:
        Option tag markup.

    Examples:
        >>> drop_down_option("Pending", "Pending", "pending")
        Markup('<option value="Pending" class="" selected>Pending</option>')
        >>> drop_down_option("Pending", "Pending", "Active")
        Markup('<option value="Pending" class="" >Pending</option>')
    """
    selected = "selected" if is_selected_option(value, currently_selected) else ""
    return Markup(
        f'<option value="{value}" class="{css_class}" {selected}>{label_text}</option>'
    )


def js_history_back_button(
    label: str = DEFAULT_BACK_LABEL,
    css_class: str = DEFAULT_BACK_CLASS,
) -> Markup:
    """Render a Cancel/Back link that relies on browser history.

    Args:
        label: Link text.
        css_class: Class attribute for the link.

    Returns:
        Anchor tag markup navigating one step back.
    """
    return Markup(f'<a href="{HISTORY_BACK_HREF}" class="{css_class}">{label}</a>')
