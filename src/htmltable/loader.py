#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Build tables from plain data and definition files.

A table definition is a mapping with any of the keys ``columns``, ``header``,
``footer``, ``header_as_footer``, ``body`` (or its alias ``rows``) and
``options``. Definitions can be stored as JSON, YAML or TOML files::

    # report.yaml
    header: {name: Name, city: City}
    body:
      - {name: Jo, city: NYC}
    header_as_footer: true

"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]

import yaml

from htmltable.constants import DEFINITION_EXTENSIONS, DEFINITION_KEYS, DefinitionFormat
from htmltable.exceptions import DefinitionError, ValidationError
from htmltable.options import TableOptions
from htmltable.table import Table

logger = logging.getLogger(__name__)


def detect_format(path: str | Path) -> DefinitionFormat:
    """Detect the definition format from a file extension.

    Parameters
    ----------
    path : str or Path
        Path to the definition file

    Returns
    -------
    {"json", "yaml", "toml"}
        The detected format

    Raises
    ------
    DefinitionError
        If the extension is not recognized

    """
    suffix = Path(path).suffix.lower()
    try:
        return DEFINITION_EXTENSIONS[suffix]
    except KeyError:
        supported = ", ".join(sorted(DEFINITION_EXTENSIONS))
        raise DefinitionError(
            f"Unsupported definition file extension {suffix!r}; expected one of {supported}",
            source=str(path),
        ) from None


def parse_definition(text: str, fmt: DefinitionFormat, source: str | None = None) -> dict[str, Any]:
    """Decode definition text into a mapping.

    Raises
    ------
    DefinitionError
        If the text cannot be decoded or does not hold a mapping

    """
    try:
        if fmt == "json":
            data = json.loads(text)
        elif fmt == "yaml":
            data = yaml.safe_load(text)
        else:
            data = tomllib.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError, tomllib.TOMLDecodeError) as e:
        raise DefinitionError(f"Invalid {fmt.upper()} table definition: {e}", source=source, original_error=e) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise DefinitionError(
            f"Table definition must be a mapping, got {type(data).__name__}",
            source=source,
        )
    return data


def table_from_mapping(definition: Mapping[str, Any], source: str | None = None) -> Table:
    """Create a table from a definition mapping.

    Parameters
    ----------
    definition : mapping
        Definition with the keys described in the module docstring
    source : str, optional
        Where the definition came from, used in error messages

    Returns
    -------
    Table
        The configured table

    Raises
    ------
    DefinitionError
        If the definition has unknown keys or values of the wrong type

    """
    unknown = sorted(set(definition) - DEFINITION_KEYS)
    if unknown:
        raise DefinitionError(f"Unknown table definition key(s): {', '.join(unknown)}", source=source)
    if "body" in definition and "rows" in definition:
        raise DefinitionError("Use either 'body' or 'rows' in a table definition, not both", source=source)

    try:
        table = Table()
        options = definition.get("options")
        if options is not None:
            if not isinstance(options, Mapping):
                raise DefinitionError("'options' must be a mapping", source=source)
            table.set_options(TableOptions.from_mapping(options))
        if definition.get("columns"):
            table.set_columns(definition["columns"])
        if definition.get("header"):
            table.set_header(definition["header"])
        if definition.get("footer"):
            table.set_footer(definition["footer"])
        if definition.get("header_as_footer"):
            table.use_header_as_footer(bool(definition["header_as_footer"]))
        rows = definition.get("body", definition.get("rows"))
        if rows:
            table.set_body(rows)
    except (ValidationError, TypeError) as e:
        raise DefinitionError(f"Invalid table definition: {e}", source=source, original_error=e) from e

    logger.debug("Loaded table definition from %s with %d body row(s)", source or "mapping", len(table.body))
    return table


def load_table(path: str | Path, fmt: DefinitionFormat | None = None) -> Table:
    """Load a table definition file.

    Parameters
    ----------
    path : str or Path
        JSON, YAML or TOML file holding the definition
    fmt : {"json", "yaml", "toml"}, optional
        Format of the file; detected from the extension when omitted

    Returns
    -------
    Table
        The configured table

    Raises
    ------
    DefinitionError
        If the file cannot be read or holds an invalid definition

    """
    path = Path(path)
    fmt = fmt or detect_format(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise DefinitionError(f"Could not read table definition {path}: {e}", source=str(path), original_error=e) from e
    return table_from_mapping(parse_definition(text, fmt, source=str(path)), source=str(path))
