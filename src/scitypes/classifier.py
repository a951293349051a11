"""The scitype classifier.

``scitype(x)`` is decided by the first step that applies:

1. ``x`` is missing (None, pd.NA, pd.NaT, NaN): ``Missing``.
2. ``x`` is a tuple: the tuple of per-position scitypes.
3. ``x`` is a bulk container (ndarray, Series, Index, extension array,
   list) with N dimensions and element machine type T:
   - if the convention has a fast-path entry S for T, ``Array(S, N)``,
     unioned with ``Missing`` when T can hold missing values and ``x``
     actually holds some;
   - otherwise, if the convention has a rule for the dtype itself (e.g. a
     categorical dtype), that rule, with ``Missing`` added the same way;
   - otherwise ``Array(U, N)`` where U is the union of the scitypes of all
     elements.
4. A value rule of the convention (e.g. float -> Continuous).
5. The trait of ``x``: ``"other"`` gives ``Unknown``; any other tag is
   resolved by the convention, then by the generic rule registered for the
   tag (e.g. the table rule), and ``Unknown`` if neither applies.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from scitypes.conventions.registry import Convention, resolve_convention
from scitypes.core.logging import get_logger
from scitypes.fast_path import lookup_fast_scitype
from scitypes.machine import (
    container_info,
    has_missing,
    is_bulk_container,
    is_missing,
    iter_elements,
)
from scitypes.taxonomy import (
    BOTTOM,
    ArrayScitype,
    Missing,
    ScitypeExpr,
    TupleScitype,
    Unknown,
    union,
)
from scitypes.traits import OTHER, classify_trait

logger = get_logger(__name__)

# Generic trait rules: (value, convention name) -> scitype | None
TraitRule = Callable[[Any, str], ScitypeExpr | None]
_TRAIT_RULES: dict[str, TraitRule] = {}


def register_trait_rule(tag: str, rule: TraitRule) -> None:
    """Register the convention-independent rule for values with trait ``tag``."""
    _TRAIT_RULES[tag] = rule
    logger.debug("trait_rule_registered", tag=tag)


def scitype(value: Any, *, convention: str | None = None) -> ScitypeExpr:
    """The scientific type that ``value`` may represent.

    Args:
        value: Any value
        convention: Convention name. Defaults to the one in effect.

    Returns:
        Scitype expression. ``Unknown`` when no rule matches.
    """
    return _classify(value, resolve_convention(convention))


def scitype_union(values: Iterable[Any], *, convention: str | None = None) -> ScitypeExpr:
    """Union of ``scitype(v)`` over all ``v`` in ``values``.

    The empty iterable gives ``BOTTOM``, the identity of union.
    """
    return _fold(values, resolve_convention(convention))


def coerce(value: Any, *args: Any, convention: str | None = None, **kwargs: Any) -> Any:
    """Convert ``value`` to the requested scitypes.

    Delegates to the convention; raises UnimplementedError when it has no
    implementation.
    """
    return resolve_convention(convention).coerce(value, *args, **kwargs)


def _fold(values: Iterable[Any], convention: Convention) -> ScitypeExpr:
    acc: ScitypeExpr = BOTTOM
    for value in values:
        acc = union(acc, _classify(value, convention))
    return acc


def _classify(value: Any, convention: Convention) -> ScitypeExpr:
    if is_missing(value):
        return Missing
    if isinstance(value, tuple):
        return TupleScitype(tuple(_classify(v, convention) for v in value))
    if is_bulk_container(value):
        return _container_scitype(value, convention)

    found = convention.scalar_scitype(value)
    if found is not None:
        return found

    tag = classify_trait(value)
    if tag == OTHER:
        return Unknown
    found = convention.trait_scitype(tag, value)
    if found is None and tag in _TRAIT_RULES:
        found = _TRAIT_RULES[tag](value, convention.name)
    return Unknown if found is None else found


def _container_scitype(container: Any, convention: Convention) -> ArrayScitype:
    info = container_info(container)

    element = None
    if info.element_type is not object:
        element_type = getattr(info.element_type, "__name__", str(info.element_type))
        element = lookup_fast_scitype(convention.name, info.element_type)
        if element is not None:
            logger.debug("fast_path_hit", convention=convention.name, element_type=element_type)
        else:
            element = convention.dtype_scitype(info.element_type)
            if element is not None:
                logger.debug(
                    "dtype_rule_hit", convention=convention.name, element_type=element_type
                )

    if element is not None:
        if info.nullable and has_missing(container):
            element = union(element, Missing)
        return ArrayScitype(element, info.ndim)

    logger.debug("slow_path_scan", convention=convention.name, ndim=info.ndim)
    return ArrayScitype(_fold(iter_elements(container), convention), info.ndim)
