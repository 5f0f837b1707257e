#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htmltable/table.py
"""HTML table assembled from column-keyed data.

A :class:`Table` collects header, body and footer values and renders them as
``<thead>``, ``<tbody>`` and ``<tfoot>`` blocks inside one ``<table>``. Every
row is projected onto the table's columns, so the column order, not the order
of the keys in each row, decides the order of the cells.

Rows may be mappings (column key to value) or plain sequences, in which case
the column keys are positions.

Examples
--------
Setters chain and may be called on the class or on an instance:

    >>> from htmltable import Table
    >>> table = Table.set_header({"a": "A"}).set_body([{"a": "1"}, {"a": "2"}])
    >>> table.render()
    '<table border="1"><thead><tr><th>A</th></tr></thead><tbody><tr><td>1</td></tr><tr><td>2</td></tr></tbody></table>'

"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Sequence

from htmltable.constants import (
    DEFAULT_CELL_TAG,
    FOOTER_CELL_TAG,
    HEADER_CELL_TAG,
    SECTION_INDENT,
    TABLE_BORDER,
    TABLE_INDENT,
    TABLE_TAG,
    TBODY_TAG,
    TFOOT_TAG,
    THEAD_TAG,
    ColumnKey,
    RowData,
)
from htmltable.exceptions import InvalidOptionsError, MissingColumnError, ValidationError
from htmltable.fluent import FluentMeta, FluentMixin, fluentmethod
from htmltable.node import Node
from htmltable.options import TableOptions
from htmltable.row import Row

logger = logging.getLogger(__name__)


def _normalize_row(data: RowData, parameter_name: str) -> dict[ColumnKey, Any] | list[Any]:
    """Copy row data into a dict (mappings) or a list (sequences)."""
    if isinstance(data, Mapping):
        return dict(data)
    if isinstance(data, (str, bytes)) or not isinstance(data, Sequence):
        raise ValidationError(
            f"{parameter_name} must be a mapping or a sequence, got {type(data).__name__}",
            parameter_name=parameter_name,
            parameter_value=data,
        )
    return list(data)


def _lookup(data: dict[ColumnKey, Any] | list[Any], column: ColumnKey) -> Any:
    if isinstance(data, dict):
        return data[column]
    # Positional rows only answer to non-negative integer columns
    if isinstance(column, bool) or not isinstance(column, int) or column < 0:
        raise KeyError(column)
    return data[column]


class Table(FluentMixin, metaclass=FluentMeta):
    """An HTML table with optional header, body and footer sections.

    Parameters
    ----------
    options : TableOptions or None, default None
        Rendering options. If None, default options are used.

    """

    def __init__(self, options: TableOptions | None = None):
        """Initialize an empty table."""
        self._columns: list[ColumnKey] = []
        self._header: dict[ColumnKey, Any] | list[Any] = {}
        self._footer: dict[ColumnKey, Any] | list[Any] = {}
        self._body: list[dict[ColumnKey, Any] | list[Any]] = []
        self._header_as_footer = False
        self._options = TableOptions()
        if options is not None:
            self.set_options(options)

    def __repr__(self) -> str:
        return (
            f"Table(columns={self._columns!r}, header={self._header!r}, footer={self._footer!r}, "
            f"rows={len(self._body)}, header_as_footer={self._header_as_footer!r})"
        )

    def __str__(self) -> str:
        return self.render()

    @property
    def columns(self) -> list[ColumnKey]:
        """The explicitly set columns; empty when they are derived from the header."""
        return list(self._columns)

    @property
    def header(self) -> dict[ColumnKey, Any] | list[Any]:
        return self._header.copy()

    @property
    def footer(self) -> dict[ColumnKey, Any] | list[Any]:
        return self._footer.copy()

    @property
    def body(self) -> list[dict[ColumnKey, Any] | list[Any]]:
        return [row.copy() for row in self._body]

    @property
    def header_as_footer(self) -> bool:
        return self._header_as_footer

    @property
    def options(self) -> TableOptions:
        return self._options

    @fluentmethod
    def set_header(self, header: RowData) -> Table:
        """Set the header values.

        The same keys (names or positions) must be present in the header and
        in each row. Usage: ``Table.set_header(["Name", "Email", "City"])``.
        """
        self._header = _normalize_row(header, "header")
        return self

    @fluentmethod
    def set_footer(self, footer: RowData) -> Table:
        """Set the footer values."""
        self._footer = _normalize_row(footer, "footer")
        return self

    @fluentmethod
    def use_header_as_footer(self, enabled: bool = True) -> Table:
        """Render the header values again in the footer."""
        self._header_as_footer = bool(enabled)
        return self

    @fluentmethod
    def set_columns(self, columns: Iterable[ColumnKey]) -> Table:
        """Set the keys or positions used for each row, in order.

        Needed when the row keys differ from the header keys, or to select
        and reorder columns. Usage: ``Table.set_columns(["name", "email"])``.
        """
        if isinstance(columns, (str, bytes)):
            raise ValidationError(
                "columns must be a sequence of column keys, not a string",
                parameter_name="columns",
                parameter_value=columns,
            )
        self._columns = list(columns)
        return self

    @fluentmethod
    def set_body(self, rows: Iterable[RowData]) -> Table:
        """Append a batch of rows to the body."""
        self._body.extend(_normalize_row(row, "row") for row in rows)
        return self

    @fluentmethod
    def add_row(self, row: RowData) -> Table:
        """Append one row to the body."""
        self._body.append(_normalize_row(row, "row"))
        return self

    @fluentmethod
    def set_options(self, options: TableOptions) -> Table:
        """Replace the rendering options."""
        if not isinstance(options, TableOptions):
            raise InvalidOptionsError(TableOptions, type(options))
        self._options = options
        return self

    def effective_columns(self) -> list[ColumnKey]:
        """Return the columns used for rendering.

        These are the explicitly set columns or, failing that, the header keys
        (positions for a sequence header). Computing them does not store them.
        """
        if self._columns:
            return list(self._columns)
        if isinstance(self._header, dict):
            return list(self._header)
        return list(range(len(self._header)))

    def _project(
        self,
        data: dict[ColumnKey, Any] | list[Any],
        columns: Sequence[ColumnKey],
        section: str,
        row_index: int | None = None,
    ) -> list[Any]:
        """Pick the values of ``data`` in column order."""
        values: list[Any] = []
        for column in columns:
            try:
                values.append(_lookup(data, column))
            except (KeyError, IndexError) as exc:
                if self._options.missing_column == "raise":
                    raise MissingColumnError(column, section, row_index, original_error=exc) from exc
                logger.warning("Missing value for column %r in %s, rendering an empty cell", column, section)
                values.append("")
        return values

    @staticmethod
    def _render_block(block_tag: str, cell_tag: str, rows: Iterable[Sequence[Any]], pretty: bool) -> str:
        """Generate a thead, tbody or tfoot block."""
        html = "".join(Row(row, cell_tag).render(pretty) for row in rows)
        return Node(block_tag).set_raw_content(html).render(SECTION_INDENT if pretty else 0)

    def render(self, pretty: bool | None = None) -> str:
        """Generate the markup for the whole table.

        Parameters
        ----------
        pretty : bool or None, default None
            Add indentation and line breaks. If None, ``options.pretty`` is used.

        Returns
        -------
        str
            The generated markup

        Raises
        ------
        MissingColumnError
            If a row lacks a value for one of the columns and the options ask
            for missing columns to be raised

        """
        if pretty is None:
            pretty = self._options.pretty
        columns = self.effective_columns()
        logger.debug("Rendering table with columns %r (pretty=%s)", columns, pretty)

        html = ""

        if self._header:
            header = self._project(self._header, columns, THEAD_TAG)
            html += self._render_block(THEAD_TAG, HEADER_CELL_TAG, [header], pretty)

        if self._body:
            body = [self._project(row, columns, TBODY_TAG, index) for index, row in enumerate(self._body)]
            logger.debug("Rendering %d body row(s)", len(body))
            html += self._render_block(TBODY_TAG, DEFAULT_CELL_TAG, body, pretty)

        footer_values = self._header if self._header_as_footer else self._footer
        if footer_values:
            footer = self._project(footer_values, columns, TFOOT_TAG)
            html += self._render_block(TFOOT_TAG, FOOTER_CELL_TAG, [footer], pretty)

        table = Node(TABLE_TAG).set_attribute("border", TABLE_BORDER).set_raw_content(html)
        return table.render(TABLE_INDENT if pretty else 0)
