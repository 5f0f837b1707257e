#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the htmltable library.

This module centralizes the hardcoded values used while rendering markup so
that the output contract lives in one place.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Markup - void elements, cell and section tags
3. Pretty Printing - fixed indentation levels
4. Table Defaults - default option values
5. Definition Files - recognized extensions and keys
"""

from __future__ import annotations

from typing import Literal, Mapping, Sequence, Union

# =============================================================================
# Type Definitions
# =============================================================================

CellTag = Literal["td", "th"]
MissingColumnPolicy = Literal["raise", "empty"]
DefinitionFormat = Literal["json", "yaml", "toml"]

ColumnKey = Union[str, int]
AttributeValue = Union[str, Sequence[str]]
RowData = Union[Mapping[ColumnKey, object], Sequence[object]]

# =============================================================================
# Markup
# =============================================================================

# Elements that never carry content or a closing tag
VOID_TAGS: frozenset[str] = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "command",
        "embed",
        "hr",
        "img",
        "input",
        "keygen",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

CELL_TAGS: tuple[str, ...] = ("td", "th")
DEFAULT_CELL_TAG: CellTag = "td"
HEADER_CELL_TAG: CellTag = "th"
FOOTER_CELL_TAG: CellTag = "td"

ROW_TAG = "tr"
TABLE_TAG = "table"
THEAD_TAG = "thead"
TBODY_TAG = "tbody"
TFOOT_TAG = "tfoot"

TABLE_BORDER = "1"

# =============================================================================
# Pretty Printing
# =============================================================================

# Layout assumes table > section > tr > cell
CONTENT_INDENT_STEP = 2
TABLE_INDENT = 1
SECTION_INDENT = 2
ROW_INDENT = 4
CELL_INDENT = 6

# =============================================================================
# Table Defaults
# =============================================================================

DEFAULT_PRETTY = False
DEFAULT_MISSING_COLUMN: MissingColumnPolicy = "raise"
MISSING_COLUMN_POLICIES: tuple[str, ...] = ("raise", "empty")

# =============================================================================
# Definition Files
# =============================================================================

DEFINITION_EXTENSIONS: dict[str, DefinitionFormat] = {
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
    ".toml": "toml",
}

DEFINITION_KEYS: frozenset[str] = frozenset(
    {"columns", "header", "footer", "header_as_footer", "body", "rows", "options"}
)
