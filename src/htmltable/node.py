#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htmltable/node.py
"""Generic HTML element.

A :class:`Node` holds one tag, its text content and its attributes, and
renders itself to markup. Content is a single level: nested elements are
injected as pre-rendered markup through :meth:`Node.set_raw_content`.

"""

from __future__ import annotations

import logging
from typing import Mapping

from htmltable.constants import CONTENT_INDENT_STEP, VOID_TAGS, AttributeValue
from htmltable.exceptions import ValidationError
from htmltable.fluent import FluentMixin
from htmltable.utils.html_utils import escape_html, render_attributes, to_text

logger = logging.getLogger(__name__)


def _copy_value(value: AttributeValue) -> AttributeValue:
    return list(value) if isinstance(value, (list, tuple)) else value


def _copy_attributes(attributes: Mapping[str, AttributeValue]) -> dict[str, AttributeValue]:
    """Copy attributes so that list values are not shared with the caller."""
    return {name: _copy_value(value) for name, value in attributes.items()}


class Node(FluentMixin):
    """A single HTML element.

    Parameters
    ----------
    tag : str
        The tag name (e.g. "table", "tr", "img", "a")
    content : str or None, default ""
        The content of the node, escaped immediately. Ignored for void tags
        (e.g. "input", "img") at render time.
    attributes : mapping or None, default None
        Attribute names mapped to values. A value may be a list of strings,
        which is joined with spaces when rendered.

    Examples
    --------
        >>> Node("a", "Tom & Jerry").set_attribute("href", "/cartoons").render()
        '<a href="/cartoons">Tom &amp; Jerry</a>'
        >>> str(Node("img").set_attribute("src", "x.png"))
        '<img src="x.png">'

    """

    def __init__(
        self,
        tag: str,
        content: str | None = "",
        attributes: Mapping[str, AttributeValue] | None = None,
    ):
        """Initialize the node with a tag, escaped content and attributes."""
        self._tag = tag
        self._content = escape_html(to_text(content))
        self._attributes: dict[str, AttributeValue] = _copy_attributes(attributes or {})

    def __repr__(self) -> str:
        return f"Node(tag={self._tag!r}, content={self._content!r}, attributes={self._attributes!r})"

    def __str__(self) -> str:
        return self.render()

    @property
    def tag(self) -> str:
        return self._tag

    @property
    def content(self) -> str:
        """The stored content, already escaped unless it was set raw."""
        return self._content

    @property
    def attributes(self) -> dict[str, AttributeValue]:
        return _copy_attributes(self._attributes)

    @property
    def is_void(self) -> bool:
        """Whether the tag never renders content or a closing tag."""
        return self._tag in VOID_TAGS

    def set_content(self, content: str) -> Node:
        """Replace the content with its escaped form.

        Parameters
        ----------
        content : str
            Text content; HTML special characters are escaped

        Returns
        -------
        Node
            This node, for chaining

        """
        return self.set_raw_content(escape_html(to_text(content)))

    def set_raw_content(self, content: str) -> Node:
        """Replace the content verbatim, without escaping.

        Used to inject already rendered markup as the content of this node.

        Parameters
        ----------
        content : str
            Content that will NOT be escaped

        Returns
        -------
        Node
            This node, for chaining

        """
        self._content = to_text(content)
        return self

    def set_attributes(self, attributes: Mapping[str, AttributeValue]) -> Node:
        """Replace all attributes."""
        self._attributes = _copy_attributes(attributes)
        return self

    def set_attribute(self, name: str, value: AttributeValue) -> Node:
        """Set or overwrite one attribute."""
        self._attributes[name] = _copy_value(value)
        return self

    def add_attribute(self, name: str, value: str) -> Node:
        """Append a value to an attribute.

        If the attribute is absent or empty, it is simply set. Otherwise a
        single value is promoted to a list on the first append, and ``value``
        is added to the end of that list.

        Parameters
        ----------
        name : str
            The name of the attribute
        value : str
            The value to append

        Returns
        -------
        Node
            This node, for chaining

        """
        current = self._attributes.get(name)
        if not current:
            return self.set_attribute(name, value)
        if isinstance(current, list):
            current.append(value)
        elif isinstance(current, str):
            self._attributes[name] = [current, value]
        else:
            self._attributes[name] = [*current, value]
        return self

    def set_class(self, class_name: str) -> Node:
        """Set the class attribute, replacing existing classes."""
        return self.set_attribute("class", class_name)

    def add_class(self, *class_names: str) -> Node:
        """Add classes to the class attribute.

        Usage: ``node.add_class("text-primary", "text-right", "float-left")``
        """
        for class_name in class_names:
            self.add_attribute("class", class_name)
        return self

    def set_id(self, element_id: str) -> Node:
        """Set the id attribute."""
        return self.set_attribute("id", element_id)

    def render(self, indentation: int = 0) -> str:
        """Generate the markup for this node.

        Parameters
        ----------
        indentation : int, default 0
            Number of spaces before the closing tag. The content is indented
            by two extra spaces. Use 0 for compact, single-line output.

        Returns
        -------
        str
            The generated markup

        Raises
        ------
        ValidationError
            If ``indentation`` is negative

        """
        if indentation < 0:
            raise ValidationError(
                f"indentation must be non-negative, got {indentation}",
                parameter_name="indentation",
                parameter_value=indentation,
            )

        html = f"<{self._tag}{render_attributes(self._attributes)}>"
        if self.is_void:
            if self._content:
                logger.debug("Ignoring content of void element <%s>", self._tag)
            return html

        if indentation == 0:
            return f"{html}{self._content}</{self._tag}>"

        inner = " " * (indentation + CONTENT_INDENT_STEP)
        outer = " " * indentation
        return f"{html}\n{inner}{self._content}\n{outer}</{self._tag}>\n"
