#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for table rendering.

Options are frozen dataclasses; use ``create_updated()`` to derive a
modified copy instead of mutating an existing instance.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, fields, replace
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from htmltable.constants import (
    DEFAULT_MISSING_COLUMN,
    DEFAULT_PRETTY,
    MISSING_COLUMN_POLICIES,
    MissingColumnPolicy,
)
from htmltable.exceptions import ValidationError


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class TableOptions(CloneFrozenMixin):
    """Configuration options for rendering a :class:`~htmltable.table.Table`.

    Parameters
    ----------
    pretty : bool, default False
        Add indentation and line breaks to the generated markup. Used when
        ``Table.render()`` is called without an explicit ``pretty`` flag.
    missing_column : {"raise", "empty"}, default "raise"
        What to do when a header, body or footer row has no value for one of
        the table's columns:
        - "raise": raise MissingColumnError
        - "empty": render an empty cell and log a warning

    """

    pretty: bool = field(
        default=DEFAULT_PRETTY,
        metadata={"help": "Indent the generated markup and add line breaks"},
    )
    missing_column: MissingColumnPolicy = field(
        default=DEFAULT_MISSING_COLUMN,
        metadata={"help": "Behavior for rows lacking a column value", "choices": list(MISSING_COLUMN_POLICIES)},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValidationError
            If ``missing_column`` is not one of the supported policies.

        """
        if self.missing_column not in MISSING_COLUMN_POLICIES:
            raise ValidationError(
                f"missing_column must be one of {', '.join(MISSING_COLUMN_POLICIES)}, got {self.missing_column!r}",
                parameter_name="missing_column",
                parameter_value=self.missing_column,
            )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> TableOptions:
        """Build options from a plain mapping, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValidationError(
                f"Unknown table option(s): {', '.join(unknown)}",
                parameter_name="options",
                parameter_value=unknown,
            )
        return cls(**dict(data))
