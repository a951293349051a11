"""The closed taxonomy of scientific types.

A scientific type (scitype) describes the role a value plays in a model
(continuous measurement, count, category, image, table) rather than how it
is stored. Every scitype expression is one of:

- ``Scitype``: an atomic case, tagged by a ``ScitypeKind`` with integer
  parameters for the parametrized cases (cardinality, width/height) and a
  column scitype set for tables.
- ``ScitypeUnion``: an order-free union of expressions (``a | b``).
- ``ArrayScitype``: an N-dimensional container of some element scitype.
- ``TupleScitype``: fixed-arity, per-position scitypes.

Abstract kinds (``Found``, ``Known``, ``Infinite``, ``Finite``, ``Image``)
exist only so that sub-case checks can be written against groups of cases:

    Found
    ├── Unknown
    └── Known
        ├── Infinite: Continuous, Count
        ├── Finite(N): Multiclass(N), OrderedFactor(N)
        ├── Image(W, H): GrayImage(W, H), ColorImage(W, H)
        └── Table(K)

``Missing`` sits outside the tree and is combined with other cases by union.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from scitypes.core.errors import ConfigurationError


class ScitypeKind(str, Enum):
    """Tag of an atomic scitype."""

    FOUND = "Found"
    KNOWN = "Known"
    UNKNOWN = "Unknown"
    INFINITE = "Infinite"
    CONTINUOUS = "Continuous"
    COUNT = "Count"
    FINITE = "Finite"
    MULTICLASS = "Multiclass"
    ORDERED_FACTOR = "OrderedFactor"
    IMAGE = "Image"
    GRAY_IMAGE = "GrayImage"
    COLOR_IMAGE = "ColorImage"
    TABLE = "Table"
    MISSING = "Missing"


_PARENT: dict[ScitypeKind, ScitypeKind] = {
    ScitypeKind.KNOWN: ScitypeKind.FOUND,
    ScitypeKind.UNKNOWN: ScitypeKind.FOUND,
    ScitypeKind.INFINITE: ScitypeKind.KNOWN,
    ScitypeKind.FINITE: ScitypeKind.KNOWN,
    ScitypeKind.IMAGE: ScitypeKind.KNOWN,
    ScitypeKind.TABLE: ScitypeKind.KNOWN,
    ScitypeKind.CONTINUOUS: ScitypeKind.INFINITE,
    ScitypeKind.COUNT: ScitypeKind.INFINITE,
    ScitypeKind.MULTICLASS: ScitypeKind.FINITE,
    ScitypeKind.ORDERED_FACTOR: ScitypeKind.FINITE,
    ScitypeKind.GRAY_IMAGE: ScitypeKind.IMAGE,
    ScitypeKind.COLOR_IMAGE: ScitypeKind.IMAGE,
}

ABSTRACT_KINDS = frozenset(
    {
        ScitypeKind.FOUND,
        ScitypeKind.KNOWN,
        ScitypeKind.INFINITE,
        ScitypeKind.FINITE,
        ScitypeKind.IMAGE,
    }
)

# Number of integer parameters carried by parametrized kinds
_ARITY: dict[ScitypeKind, int] = {
    ScitypeKind.FINITE: 1,
    ScitypeKind.MULTICLASS: 1,
    ScitypeKind.ORDERED_FACTOR: 1,
    ScitypeKind.IMAGE: 2,
    ScitypeKind.GRAY_IMAGE: 2,
    ScitypeKind.COLOR_IMAGE: 2,
}


def kind_ancestry(kind: ScitypeKind) -> list[ScitypeKind]:
    """Return ``kind`` followed by all of its ancestors, nearest first."""
    chain = [kind]
    while chain[-1] in _PARENT:
        chain.append(_PARENT[chain[-1]])
    return chain


class ScitypeExpr:
    """Base class of every scitype expression.

    Subclasses implement ``_accepts`` for a single non-union expression;
    ``is_subtype`` takes care of unions on the left-hand side.
    """

    def __or__(self, other: ScitypeExpr) -> ScitypeExpr:
        return union(self, other)

    def __ror__(self, other: ScitypeExpr) -> ScitypeExpr:
        return union(other, self)

    def issubtype(self, other: ScitypeExpr) -> bool:
        """Check whether this expression is a sub-case of ``other``."""
        return is_subtype(self, other)

    def _accepts(self, other: ScitypeExpr) -> bool:
        raise NotImplementedError


@dataclass(frozen=True, repr=False)
class Scitype(ScitypeExpr):
    """An atomic scientific type.

    Attributes:
        kind: The case tag
        params: Cardinality for finite kinds, (width, height) for image kinds.
            Empty on abstract kinds means "any parameters".
        columns: Union of column scitypes for tables. None means "any table".
    """

    kind: ScitypeKind
    params: tuple[int, ...] = ()
    columns: ScitypeExpr | None = None

    def __post_init__(self) -> None:
        arity = _ARITY.get(self.kind, 0)
        if self.params:
            if len(self.params) != arity:
                raise ConfigurationError(
                    f"{self.kind.value} takes {arity} parameter(s), got {self.params!r}"
                )
            for value in self.params:
                if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                    raise ConfigurationError(
                        f"{self.kind.value} parameters must be positive integers, "
                        f"got {self.params!r}"
                    )
        elif arity and self.kind not in ABSTRACT_KINDS:
            raise ConfigurationError(f"{self.kind.value} requires {arity} parameter(s)")
        if self.columns is not None:
            if self.kind is not ScitypeKind.TABLE:
                raise ConfigurationError(f"{self.kind.value} does not take columns")
            if not isinstance(self.columns, ScitypeExpr):
                raise ConfigurationError(f"Table columns must be a scitype, got {self.columns!r}")

    @property
    def is_abstract(self) -> bool:
        return self.kind in ABSTRACT_KINDS

    @property
    def cardinality(self) -> int | None:
        if self.kind in (ScitypeKind.FINITE, ScitypeKind.MULTICLASS, ScitypeKind.ORDERED_FACTOR):
            return self.params[0] if self.params else None
        return None

    @property
    def width(self) -> int | None:
        if _ARITY.get(self.kind) == 2 and self.params:
            return self.params[0]
        return None

    @property
    def height(self) -> int | None:
        if _ARITY.get(self.kind) == 2 and self.params:
            return self.params[1]
        return None

    def _accepts(self, other: ScitypeExpr) -> bool:
        if not isinstance(other, Scitype):
            return False
        if self.kind not in kind_ancestry(other.kind):
            return False
        if self.params and self.params != other.params:
            return False
        if self.columns is not None:
            return other.columns is not None and is_subtype(other.columns, self.columns)
        return True

    def __repr__(self) -> str:
        if self.params:
            return f"{self.kind.value}({', '.join(str(p) for p in self.params)})"
        if self.columns is not None:
            return f"{self.kind.value}({self.columns!r})"
        return self.kind.value


@dataclass(frozen=True, repr=False)
class ScitypeUnion(ScitypeExpr):
    """Union of scitype expressions. Build with ``union`` or ``|``.

    The empty union is ``BOTTOM``: the identity of union and a sub-case of
    every expression.
    """

    members: frozenset[ScitypeExpr]

    def _accepts(self, other: ScitypeExpr) -> bool:
        return any(is_subtype(other, member) for member in self.members)

    def __iter__(self):
        return iter(self.members)

    def __len__(self) -> int:
        return len(self.members)

    def __repr__(self) -> str:
        if not self.members:
            return "Bottom"
        return f"Union({', '.join(sorted(repr(m) for m in self.members))})"


@dataclass(frozen=True, repr=False)
class ArrayScitype(ScitypeExpr):
    """Container of ``ndim`` dimensions whose elements have scitype ``element``.

    ``ndim=None`` matches containers of any dimensionality.
    """

    element: ScitypeExpr
    ndim: int | None = 1

    def __post_init__(self) -> None:
        if not isinstance(self.element, ScitypeExpr):
            raise ConfigurationError(f"Array element must be a scitype, got {self.element!r}")
        if self.ndim is not None and (isinstance(self.ndim, bool) or self.ndim < 0):
            raise ConfigurationError(f"Array dimensions must be >= 0, got {self.ndim!r}")

    def _accepts(self, other: ScitypeExpr) -> bool:
        if not isinstance(other, ArrayScitype):
            return False
        if self.ndim is not None and other.ndim != self.ndim:
            return False
        return is_subtype(other.element, self.element)

    def __repr__(self) -> str:
        dims = "*" if self.ndim is None else str(self.ndim)
        return f"Array({self.element!r}, {dims})"


@dataclass(frozen=True, repr=False)
class TupleScitype(ScitypeExpr):
    """Per-position scitypes of a fixed-arity heterogeneous sequence."""

    elements: tuple[ScitypeExpr, ...] = ()

    def _accepts(self, other: ScitypeExpr) -> bool:
        if not isinstance(other, TupleScitype) or len(other.elements) != len(self.elements):
            return False
        return all(is_subtype(a, b) for a, b in zip(other.elements, self.elements, strict=True))

    def __iter__(self):
        return iter(self.elements)

    def __len__(self) -> int:
        return len(self.elements)

    def __repr__(self) -> str:
        return f"Tuple({', '.join(repr(e) for e in self.elements)})"


def union(*types: ScitypeExpr) -> ScitypeExpr:
    """Union of scitype expressions.

    Nested unions are flattened and duplicates removed, so the operation is
    commutative, associative and idempotent. A single member is returned
    unchanged; no members gives ``BOTTOM``.
    """
    members: set[ScitypeExpr] = set()
    for t in types:
        if isinstance(t, ScitypeUnion):
            members.update(t.members)
        elif isinstance(t, ScitypeExpr):
            members.add(t)
        else:
            raise ConfigurationError(f"Cannot form a union with non-scitype {t!r}")
    if len(members) == 1:
        return next(iter(members))
    return ScitypeUnion(frozenset(members))


def flatten(expr: ScitypeExpr) -> frozenset[ScitypeExpr]:
    """Members of ``expr`` if it is a union, else ``{expr}``."""
    if isinstance(expr, ScitypeUnion):
        return expr.members
    return frozenset({expr})


def is_subtype(a: ScitypeExpr, b: ScitypeExpr) -> bool:
    """Check whether ``a`` is a sub-case of ``b``.

    Args:
        a: Candidate scitype expression
        b: Target expression (may also be a table constructor)

    Returns:
        True if every value with scitype ``a`` also has scitype ``b``
    """
    if isinstance(a, ScitypeUnion):
        return all(is_subtype(member, b) for member in a.members)
    return b._accepts(a)


def is_scientific(expr: object) -> bool:
    """True for atomic scitypes and unions of atomic scitypes (``Missing`` included)."""
    if isinstance(expr, Scitype):
        return True
    if isinstance(expr, ScitypeUnion):
        return all(isinstance(member, Scitype) for member in expr.members)
    return False


# === Cases ===

Found = Scitype(ScitypeKind.FOUND)
Known = Scitype(ScitypeKind.KNOWN)
Unknown = Scitype(ScitypeKind.UNKNOWN)
Infinite = Scitype(ScitypeKind.INFINITE)
Continuous = Scitype(ScitypeKind.CONTINUOUS)
Count = Scitype(ScitypeKind.COUNT)
Missing = Scitype(ScitypeKind.MISSING)
BOTTOM = ScitypeUnion(frozenset())
Scientific = union(Missing, Found)


def Finite(cardinality: int | None = None) -> Scitype:  # noqa: N802
    """Any finite scitype, optionally restricted to one cardinality."""
    params = () if cardinality is None else (cardinality,)
    return Scitype(ScitypeKind.FINITE, params)


def Multiclass(cardinality: int) -> Scitype:  # noqa: N802
    return Scitype(ScitypeKind.MULTICLASS, (cardinality,))


def OrderedFactor(cardinality: int) -> Scitype:  # noqa: N802
    return Scitype(ScitypeKind.ORDERED_FACTOR, (cardinality,))


def Image(width: int | None = None, height: int | None = None) -> Scitype:  # noqa: N802
    """Any image scitype, optionally restricted to one size."""
    if (width is None) != (height is None):
        raise ConfigurationError("Image takes both width and height, or neither")
    params = () if width is None else (width, height)
    return Scitype(ScitypeKind.IMAGE, params)


def GrayImage(width: int, height: int) -> Scitype:  # noqa: N802
    return Scitype(ScitypeKind.GRAY_IMAGE, (width, height))


def ColorImage(width: int, height: int) -> Scitype:  # noqa: N802
    return Scitype(ScitypeKind.COLOR_IMAGE, (width, height))


def table_scitype(columns: ScitypeExpr | None = None) -> Scitype:
    """Table scitype whose columns have scitypes in ``columns``.

    Without ``columns`` this is the scitype of any table.
    """
    return Scitype(ScitypeKind.TABLE, columns=columns)


def Array(element: ScitypeExpr, ndim: int | None = 1) -> ArrayScitype:  # noqa: N802
    return ArrayScitype(element, ndim)


# Binary is a usage alias, not a separate case
Binary = Multiclass(2)
AnyTable = table_scitype()
