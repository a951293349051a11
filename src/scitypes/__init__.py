"""scitypes: scientific types for data.

Classifies values by the role they play in a model (continuous, count,
categorical, image, table) rather than by how they are stored.

Usage:
    >>> import numpy as np
    >>> from scitypes import scitype, schema, Table, Continuous, Count
    >>> scitype(3.14)
    Continuous
    >>> scitype(np.array([1, 2, 3]))
    Array(Count, 1)
    >>> Table(Continuous, Count).conforms({"x": [1.0, 2.0], "n": [1, 2]})
    True
"""

__version__ = "0.1.0"

from scitypes.classifier import coerce, register_trait_rule, scitype, scitype_union
from scitypes.conventions import (
    UNSPECIFIED,
    Convention,
    activate,
    current,
    get_convention,
    list_conventions,
    register_convention,
    use_convention,
)
from scitypes.conventions import standard  # noqa: F401  (registers the standard convention)
from scitypes.core.config import get_settings
from scitypes.core.errors import (
    ConfigurationError,
    ScitypeError,
    UnimplementedError,
    UsageError,
)
from scitypes.fast_path import lookup_fast_scitype, register_fast_scitype
from scitypes.schema import ColumnSchema, Schema, schema
from scitypes.tables import Table, TableConstructor, is_table
from scitypes.taxonomy import (
    BOTTOM,
    AnyTable,
    Array,
    ArrayScitype,
    Binary,
    ColorImage,
    Continuous,
    Count,
    Finite,
    Found,
    GrayImage,
    Image,
    Infinite,
    Known,
    Missing,
    Multiclass,
    OrderedFactor,
    Scientific,
    Scitype,
    ScitypeExpr,
    ScitypeKind,
    ScitypeUnion,
    TupleScitype,
    Unknown,
    is_subtype,
    table_scitype,
    union,
)
from scitypes.traits import OTHER, TABLE, classify_trait, register_trait

activate(get_settings().default_convention)

__all__ = [
    "__version__",
    # Queries
    "scitype",
    "scitype_union",
    "schema",
    "coerce",
    "is_subtype",
    # Conventions
    "UNSPECIFIED",
    "Convention",
    "activate",
    "current",
    "get_convention",
    "list_conventions",
    "register_convention",
    "use_convention",
    # Extension points
    "register_trait",
    "register_trait_rule",
    "classify_trait",
    "register_fast_scitype",
    "lookup_fast_scitype",
    "OTHER",
    "TABLE",
    # Tables
    "Table",
    "TableConstructor",
    "is_table",
    "Schema",
    "ColumnSchema",
    # Taxonomy
    "ScitypeKind",
    "ScitypeExpr",
    "Scitype",
    "ScitypeUnion",
    "ArrayScitype",
    "TupleScitype",
    "BOTTOM",
    "Found",
    "Known",
    "Unknown",
    "Infinite",
    "Continuous",
    "Count",
    "Finite",
    "Multiclass",
    "OrderedFactor",
    "Binary",
    "Image",
    "GrayImage",
    "ColorImage",
    "AnyTable",
    "Missing",
    "Scientific",
    "Array",
    "table_scitype",
    "union",
    # Errors
    "ScitypeError",
    "ConfigurationError",
    "UsageError",
    "UnimplementedError",
]
