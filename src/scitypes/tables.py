"""Tabular data: table trait, table scitype rule and the Table constructor.

A value is a table when it is a ``pandas.DataFrame`` or a column mapping (a
non-empty mapping of string names to equal-length one-dimensional columns).

If ``X`` has columns ``c1, ..., cn`` then, by definition,

    scitype(X) == table_scitype(scitype(c1) | ... | scitype(cn))

``Table(T1, ..., Tn)`` builds a *pattern* over tables:

    is_subtype(scitype(X), Table(T1, ..., Tn))

holds iff ``X`` is a table and, for every column ``col`` of ``X``,
``scitype(col)`` is a one-dimensional array whose element scitype is a
sub-case of some single ``Tj``. The check is column-wise:

    >>> X = {"x1": [10.0, 20.0, None], "x2": [1, 2, 3]}
    >>> is_subtype(scitype(X), Table(Continuous, Count))
    False
    >>> is_subtype(scitype(X), Table(Continuous | Missing, Count))
    True
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import numpy as np
import pandas as pd
from pandas.api.extensions import ExtensionArray

from scitypes.classifier import register_trait_rule, scitype
from scitypes.core.errors import ConfigurationError, UsageError
from scitypes.taxonomy import (
    ArrayScitype,
    Scitype,
    ScitypeExpr,
    ScitypeKind,
    flatten,
    is_scientific,
    is_subtype,
    table_scitype,
    union,
)
from scitypes.traits import TABLE, register_trait

_COLUMN_TYPES = (list, np.ndarray, pd.Series, ExtensionArray)


def _is_column(value: Any) -> bool:
    return isinstance(value, _COLUMN_TYPES) and getattr(value, "ndim", 1) == 1


def is_column_mapping(value: Any) -> bool:
    """Check for a non-empty mapping of names to equal-length 1-D columns."""
    if not isinstance(value, Mapping) or not value:
        return False
    lengths = set()
    for name, column in value.items():
        if not isinstance(name, str) or not _is_column(column):
            return False
        lengths.add(len(column))
    return len(lengths) == 1


def is_table(value: Any) -> bool:
    return isinstance(value, pd.DataFrame) or is_column_mapping(value)


def iter_columns(table: Any) -> list[tuple[str, Any]]:
    """(name, column) pairs of a table, in declared order.

    Raises:
        UsageError: If the table is neither a DataFrame nor a mapping
    """
    if isinstance(table, pd.DataFrame):
        return [(str(name), table.iloc[:, i]) for i, name in enumerate(table.columns)]
    if isinstance(table, Mapping):
        return [(str(name), column) for name, column in table.items()]
    raise UsageError(f"No column access for tables of type {type(table).__name__}")


def row_count(table: Any) -> int | None:
    if isinstance(table, pd.DataFrame):
        return len(table)
    if not isinstance(table, Mapping):
        return None
    for column in table.values():
        return len(column)
    return None


def table_rule(value: Any, convention: str) -> Scitype:
    """Scitype of a table: the union of its column scitypes."""
    columns = [scitype(column, convention=convention) for _, column in iter_columns(value)]
    return table_scitype(union(*columns))


@dataclass(frozen=True, repr=False)
class TableConstructor(ScitypeExpr):
    """Pattern matching tables whose every column fits one of ``column_types``."""

    column_types: tuple[ScitypeExpr, ...]

    def _accepts(self, other: ScitypeExpr) -> bool:
        if not isinstance(other, Scitype) or other.kind is not ScitypeKind.TABLE:
            return False
        if other.columns is None:
            return False
        return all(self._column_fits(column) for column in flatten(other.columns))

    def _column_fits(self, column: ScitypeExpr) -> bool:
        if not isinstance(column, ArrayScitype) or column.ndim != 1:
            return False
        return any(is_subtype(column.element, t) for t in self.column_types)

    def accepts(self, candidate: ScitypeExpr) -> bool:
        """Check whether a table scitype is compatible with this pattern."""
        return is_subtype(candidate, self)

    def conforms(self, value: Any, *, convention: str | None = None) -> bool:
        """Classify ``value`` and check it against this pattern."""
        return self.accepts(scitype(value, convention=convention))

    def __repr__(self) -> str:
        return f"Table({', '.join(repr(t) for t in self.column_types)})"


def Table(*column_types: ScitypeExpr) -> TableConstructor:  # noqa: N802
    """Build the pattern of tables whose columns have the given scitypes.

    Args:
        column_types: Atomic scitypes or unions of them (``Missing`` included)

    Raises:
        ConfigurationError: If any argument is not a scientific type
    """
    for t in column_types:
        if not is_scientific(t):
            raise ConfigurationError(
                f"Arguments of the Table constructor must be scientific types, got {t!r}"
            )
    return TableConstructor(tuple(column_types))


register_trait(TABLE, is_table)
register_trait_rule(TABLE, table_rule)
