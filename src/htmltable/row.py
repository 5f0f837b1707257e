#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htmltable/row.py
"""One table row, whether it belongs to the header, body or footer."""

from __future__ import annotations

from typing import Iterable

from htmltable.constants import CELL_INDENT, CELL_TAGS, DEFAULT_CELL_TAG, ROW_INDENT, ROW_TAG
from htmltable.exceptions import ValidationError
from htmltable.fluent import FluentMixin
from htmltable.node import Node


class Row(FluentMixin):
    """A ``<tr>`` whose cells all share one tag.

    Parameters
    ----------
    cells : iterable
        The content of each cell, in order. Values are converted to text and
        escaped; None renders as an empty cell.
    tag : {"td", "th"}, default "td"
        The cell tag used for every cell of the row

    """

    def __init__(self, cells: Iterable[object], tag: str = DEFAULT_CELL_TAG):
        """Initialize the row with its cells and cell tag."""
        if tag not in CELL_TAGS:
            raise ValidationError(
                f"Row cell tag must be one of {', '.join(CELL_TAGS)}, got {tag!r}",
                parameter_name="tag",
                parameter_value=tag,
            )
        self._tag = tag
        self._cells = list(cells)

    def __repr__(self) -> str:
        return f"Row(cells={self._cells!r}, tag={self._tag!r})"

    def __str__(self) -> str:
        return self.render()

    @property
    def tag(self) -> str:
        return self._tag

    def get_cells(self) -> list[object]:
        """Return the cell values."""
        return list(self._cells)

    def render(self, pretty: bool = False) -> str:
        """Generate the markup for this row.

        Parameters
        ----------
        pretty : bool, default False
            Indent cells and the row for readability, and end with a newline

        Returns
        -------
        str
            The generated markup

        """
        cell_indent = CELL_INDENT if pretty else 0
        cells = "".join(Node(self._tag, cell).render(cell_indent) for cell in self._cells)
        html = Node(ROW_TAG).set_raw_content(cells).render(ROW_INDENT if pretty else 0)
        return html + ("\n" if pretty else "")
