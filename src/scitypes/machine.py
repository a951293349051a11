"""Machine-type introspection for scalars and bulk containers.

Scitype rules are keyed by *normalized* machine types, so that numpy and
Python scalars of the same family share one rule: ``np.float32`` and
``float`` both normalize to ``float``, ``np.int8`` and ``int`` to ``int``.

Parametric dtypes whose parameters matter for classification (currently
``pandas.CategoricalDtype``) are kept as the dtype instance itself.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

import numpy as np
import pandas as pd
from pandas.api.extensions import ExtensionArray, ExtensionDtype

BULK_CONTAINER_TYPES = (np.ndarray, pd.Series, pd.Index, ExtensionArray, list)

# pandas.api.types.infer_dtype labels -> normalized machine type
_INFERRED_TYPES: dict[str, type] = {
    "floating": float,
    "integer": int,
    "boolean": bool,
    "complex": complex,
    "string": str,
    "datetime64": np.datetime64,
    "timedelta64": np.timedelta64,
}


@dataclass(frozen=True)
class ContainerInfo:
    """Structural description of a bulk container.

    Attributes:
        ndim: Number of dimensions
        element_type: Normalized machine type of the elements
        nullable: Whether the element type can represent missing values
    """

    ndim: int
    element_type: Any
    nullable: bool


def is_missing(value: Any) -> bool:
    """Check for the missing sentinel: None, pd.NA, pd.NaT or a NaN scalar."""
    return bool(pd.api.types.is_scalar(value) and pd.isna(value))


def is_bulk_container(value: Any) -> bool:
    """Arrays, Series, Index, pandas extension arrays and plain lists."""
    return isinstance(value, BULK_CONTAINER_TYPES)


def scalar_machine_type(value: Any) -> Any:
    """Normalized machine type of a scalar value.

    Note: bool is checked before int since bool is an int subclass.
    """
    if isinstance(value, (bool, np.bool_)):
        return bool
    if isinstance(value, (int, np.integer)):
        return int
    if isinstance(value, (float, np.floating)):
        return float
    if isinstance(value, (complex, np.complexfloating)):
        return complex
    if isinstance(value, str):
        return str
    return type(value)


def dtype_machine_type(dtype: Any) -> tuple[Any, bool]:
    """Normalize a numpy or pandas dtype.

    Args:
        dtype: numpy dtype or pandas ExtensionDtype

    Returns:
        Tuple of (normalized element type, whether it can hold missing values)
    """
    if isinstance(dtype, pd.CategoricalDtype):
        return dtype, True
    if isinstance(dtype, pd.StringDtype):
        return str, True

    # Extension dtypes (Int64, Float64, boolean, ...) are masked, so nullable
    nullable = isinstance(dtype, ExtensionDtype)
    kind = dtype.kind
    if kind in "iu":
        return int, nullable
    if kind == "b":
        return bool, nullable
    if kind == "f":
        return float, True
    if kind == "c":
        return complex, True
    if kind in "US":
        return str, nullable
    if kind == "M":
        return np.datetime64, True
    if kind == "m":
        return np.timedelta64, True
    return object, True


def container_info(container: Any) -> ContainerInfo:
    """Describe a bulk container.

    Plain lists carry no element type, so they report ``object``.
    """
    if isinstance(container, list):
        return ContainerInfo(ndim=1, element_type=object, nullable=True)
    element_type, nullable = dtype_machine_type(container.dtype)
    return ContainerInfo(
        ndim=getattr(container, "ndim", 1), element_type=element_type, nullable=nullable
    )


def column_machine_type(column: Any) -> Any:
    """Normalized machine type of a table column.

    Lists have no declared dtype, so their element type is inferred from the
    non-missing values; mixed or unrecognized lists report ``object``.
    """
    if isinstance(column, list):
        inferred = pd.api.types.infer_dtype(column, skipna=True)
        return _INFERRED_TYPES.get(inferred, object)
    return container_info(column).element_type


def has_missing(container: Any) -> bool:
    """Check whether any element of the container is missing."""
    return bool(np.asarray(pd.isna(container)).any())


def iter_elements(container: Any) -> Iterator[Any]:
    """Iterate over all elements of a bulk container, flattening arrays."""
    if isinstance(container, np.ndarray):
        return iter(container.flat)
    return iter(container)
