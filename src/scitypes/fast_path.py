"""Fast-path registry: element machine type -> scitype, per convention.

In general the scitype of a container cannot be inferred from its machine
type alone (an ``object`` array may hold anything). For some restricted
machine types it can: under the standard convention every element of an
integer array is a ``Count``. Registering such types here lets the
classifier skip the per-element scan.

Entries are either a scitype or, for parametric machine types, a resolver
``(element_type) -> scitype | None`` registered under the dtype class. A
resolver returning None declines, and the classifier falls back to the scan.

Correctness never depends on this registry: with no entries at all every
container is classified by scanning its elements.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from scitypes.core.errors import ConfigurationError
from scitypes.core.logging import get_logger
from scitypes.taxonomy import ScitypeExpr

logger = get_logger(__name__)

FastResolver = Callable[[Any], ScitypeExpr | None]
FastEntry = ScitypeExpr | FastResolver


class FastPathRegistry:
    """Shortcut table keyed by (convention name, element machine type)."""

    def __init__(self) -> None:
        self._entries: dict[tuple[str, Any], FastEntry] = {}

    def register(self, convention: str, element_type: Any, scitype: FastEntry) -> None:
        """Register a shortcut.

        Args:
            convention: Convention name the entry applies to
            element_type: Normalized machine type, or a dtype class for resolvers
            scitype: Scitype of every element, or a resolver callable

        Raises:
            ConfigurationError: If the element type is ``object`` or the entry
                is neither a scitype nor callable
        """
        if element_type is object:
            raise ConfigurationError("'object' elements can hold anything; no shortcut applies")
        if not isinstance(scitype, ScitypeExpr) and not callable(scitype):
            raise ConfigurationError(
                f"Fast-path entry must be a scitype or resolver, got {scitype!r}"
            )
        self._entries[(convention, element_type)] = scitype
        logger.debug(
            "fast_scitype_registered",
            convention=convention,
            element_type=getattr(element_type, "__name__", str(element_type)),
        )

    def unregister(self, convention: str, element_type: Any) -> None:
        self._entries.pop((convention, element_type), None)

    def lookup(self, convention: str, element_type: Any) -> ScitypeExpr | None:
        """Look up the shortcut for bare ``element_type``.

        Dtype instances fall back to an entry registered under their class.

        Returns:
            The element scitype, or None if there is no usable entry
        """
        entry = self._entries.get((convention, element_type))
        if entry is None and not isinstance(element_type, type):
            entry = self._entries.get((convention, type(element_type)))
        if entry is None or isinstance(entry, ScitypeExpr):
            return entry
        return entry(element_type)

    def entries(self, convention: str) -> dict[Any, FastEntry]:
        """All entries registered for one convention."""
        return {key: entry for (name, key), entry in self._entries.items() if name == convention}

    def copy(self) -> FastPathRegistry:
        clone = FastPathRegistry()
        clone._entries = dict(self._entries)
        return clone


_default_registry = FastPathRegistry()


def get_fast_path_registry() -> FastPathRegistry:
    """Get the process-wide fast-path registry."""
    return _default_registry


def register_fast_scitype(convention: str, element_type: Any, scitype: FastEntry) -> None:
    """Register a shortcut on the process-wide registry."""
    _default_registry.register(convention, element_type, scitype)


def lookup_fast_scitype(convention: str, element_type: Any) -> ScitypeExpr | None:
    """Look up a shortcut on the process-wide registry."""
    return _default_registry.lookup(convention, element_type)
