"""HTML-related utility helpers."""

from __future__ import annotations

from html import escape as _html_escape

from htmltable.constants import AttributeValue


def escape_html(text: str, *, enabled: bool = True) -> str:
    """Escape HTML special characters when enabled."""
    if not enabled:
        return text
    return _html_escape(text)


def to_text(value: object) -> str:
    """Convert a cell or content value to text, treating None as empty."""
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def format_attribute_value(value: AttributeValue) -> str:
    """Join a multi-valued attribute with spaces and escape the result.

    Parameters
    ----------
    value : str or sequence of str
        Attribute value; sequences are joined with single spaces first

    Returns
    -------
    str
        Escaped value, ready to be placed inside double quotes

    """
    if isinstance(value, (list, tuple)):
        joined = " ".join(to_text(item) for item in value)
    else:
        joined = to_text(value)
    return escape_html(joined)


def render_attributes(attributes: dict[str, AttributeValue]) -> str:
    """Render attributes as ` name="value"` pairs in insertion order."""
    return "".join(f' {name}="{format_attribute_value(value)}"' for name, value in attributes.items())
