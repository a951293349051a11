"""Table schema: column names, machine types and scitypes.

Usage:
    >>> X = {"ncalls": [1, 2, 4], "mean_delay": [2.0, 5.7, 6.0]}
    >>> s = schema(X)
    >>> s.names, s.types, s.scitypes
    (('ncalls', 'mean_delay'), (<class 'int'>, <class 'float'>), (Count, Continuous))
"""

from __future__ import annotations

from typing import Any, NamedTuple, cast

from pydantic import BaseModel, ConfigDict, model_validator

from scitypes.classifier import scitype
from scitypes.core.errors import UsageError
from scitypes.core.logging import get_logger, log_context
from scitypes.machine import column_machine_type, is_bulk_container
from scitypes.tables import iter_columns, row_count
from scitypes.taxonomy import ArrayScitype, ScitypeExpr
from scitypes.traits import TABLE, classify_trait

logger = get_logger(__name__)


class ColumnSchema(NamedTuple):
    """One column of a schema."""

    name: str
    type: Any
    scitype: ScitypeExpr


class Schema(BaseModel):
    """Immutable description of a table's columns.

    ``names``, ``types`` and ``scitypes`` are co-indexed by column position.
    ``scitypes`` holds the scitype of each column's elements.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    names: tuple[str, ...]
    types: tuple[Any, ...]
    scitypes: tuple[ScitypeExpr, ...]
    nrows: int | None = None

    @model_validator(mode="after")
    def _check_lengths(self) -> Schema:
        if not len(self.names) == len(self.types) == len(self.scitypes):
            raise ValueError(
                f"names, types and scitypes must have equal length, got "
                f"{len(self.names)}, {len(self.types)}, {len(self.scitypes)}"
            )
        return self

    def __len__(self) -> int:
        return len(self.names)

    def columns(self) -> list[ColumnSchema]:
        rows = zip(self.names, self.types, self.scitypes, strict=True)
        return [ColumnSchema(*row) for row in rows]

    def column(self, name: str) -> ColumnSchema:
        """Look up a column by name.

        Raises:
            KeyError: If the table has no such column
        """
        try:
            i = self.names.index(name)
        except ValueError:
            raise KeyError(name) from None
        return ColumnSchema(self.names[i], self.types[i], self.scitypes[i])

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "names": self.names,
            "types": self.types,
            "scitypes": self.scitypes,
            "nrows": self.nrows,
        }


def schema(value: Any, *, convention: str | None = None) -> Schema:
    """Inspect the column types and scitypes of a table.

    Args:
        value: A table (DataFrame or column mapping)
        convention: Convention name. Defaults to the one in effect.

    Returns:
        Schema with one entry per column, in declared order

    Raises:
        UsageError: If ``value`` does not have the table trait, or one of its
            columns is not a bulk container
    """
    tag = classify_trait(value)
    if tag != TABLE:
        raise UsageError(
            f"Cannot inspect the column scitypes of a value with trait '{tag}'. "
            "The value is not introspectable; table support may be missing."
        )

    names: list[str] = []
    types: list[Any] = []
    scitypes: list[ScitypeExpr] = []
    for name, column in iter_columns(value):
        if not is_bulk_container(column):
            raise UsageError(
                f"Column '{name}' holds a {type(column).__name__}, not an array, list or Series"
            )
        with log_context(column=name):
            column_scitype = cast(ArrayScitype, scitype(column, convention=convention))
        names.append(name)
        types.append(column_machine_type(column))
        scitypes.append(column_scitype.element)

    result = Schema(
        names=tuple(names),
        types=tuple(types),
        scitypes=tuple(scitypes),
        nrows=row_count(value),
    )
    logger.debug("schema_built", columns=len(names), nrows=result.nrows)
    return result
