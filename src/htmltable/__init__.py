"""htmltable - Render escaped HTML tables from in-memory data.

htmltable builds HTML markup through a small, chainable object model:

- :class:`Node` renders one element with escaped content and attributes
- :class:`Row` renders a ``<tr>`` of uniform ``<td>`` or ``<th>`` cells
- :class:`Table` projects header, body and footer data onto a column order
  and renders ``<thead>``, ``<tbody>`` and ``<tfoot>`` inside a ``<table>``

Requirements
------------
- Python 3.10+

Examples
--------
Building a table by chaining setters, starting on the class:

    >>> from htmltable import Table
    >>> html = (
    ...     Table.set_header({"name": "Name", "city": "City"})
    ...     .add_row({"city": "NYC", "name": "Jo"})
    ...     .render()
    ... )

Generic elements:

    >>> from htmltable import Node
    >>> str(Node("span", "a < b").add_class("note", "small"))
    '<span class="note small">a &lt; b</span>'

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "htmltable requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from htmltable.exceptions import (  # noqa: E402
    DefinitionError,
    HtmlTableError,
    InvalidOptionsError,
    MissingColumnError,
    RenderingError,
    UnknownOperationError,
    ValidationError,
)
from htmltable.loader import load_table, table_from_mapping  # noqa: E402
from htmltable.node import Node  # noqa: E402
from htmltable.options import TableOptions  # noqa: E402
from htmltable.row import Row  # noqa: E402
from htmltable.table import Table  # noqa: E402

__all__ = [
    "__version__",
    "Node",
    "Row",
    "Table",
    "TableOptions",
    "load_table",
    "table_from_mapping",
    "HtmlTableError",
    "ValidationError",
    "InvalidOptionsError",
    "UnknownOperationError",
    "RenderingError",
    "MissingColumnError",
    "DefinitionError",
]
