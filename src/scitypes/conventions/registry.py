"""Convention registry.

A convention is a named ruleset deciding which scitype plain values get
(e.g. "floats are Continuous"). Exactly one convention is active
process-wide; it is expected to be set once at startup and treated as
read-only afterwards.

Every query also accepts the convention explicitly, and
``use_convention`` overrides it for a scope (per thread / task, via a
context variable):

    activate("standard")                  # process-wide, at startup
    scitype(x)                            # uses "standard"
    scitype(x, convention="unspecified")  # explicit
    with use_convention("unspecified"):
        scitype(x)                        # scoped
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

from scitypes.core.errors import ConfigurationError, UnimplementedError
from scitypes.core.logging import get_logger
from scitypes.taxonomy import ScitypeExpr

logger = get_logger(__name__)

UNSPECIFIED = "unspecified"


class Convention:
    """Base ruleset. Matches nothing, so plain values classify as Unknown.

    Subclasses override the hooks they need.
    """

    def __init__(self, name: str):
        self.name = name

    def scalar_scitype(self, value: Any) -> ScitypeExpr | None:
        """Scitype of a non-container value, or None if no rule applies."""
        return None

    def dtype_scitype(self, element_type: Any) -> ScitypeExpr | None:
        """Element scitype for containers of a parametric machine type.

        Consulted for containers with no fast-path entry, before their
        elements are scanned. None means scan.
        """
        return None

    def trait_scitype(self, tag: str, value: Any) -> ScitypeExpr | None:
        """Scitype of a value with trait ``tag``, or None to use the generic rule."""
        return None

    def coerce(self, value: Any, *args: Any, **kwargs: Any) -> Any:
        """Convert ``value`` so that it has the requested scitypes."""
        raise UnimplementedError(f"Convention '{self.name}' does not implement coerce")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


_CONVENTIONS: dict[str, Convention] = {UNSPECIFIED: Convention(UNSPECIFIED)}
_active: str = UNSPECIFIED
_lock = threading.Lock()
_scoped: ContextVar[str | None] = ContextVar("scoped_convention", default=None)


def register_convention(convention: Convention) -> Convention:
    """Register a convention under its name, replacing any previous one.

    Returns:
        The registered convention
    """
    _CONVENTIONS[convention.name] = convention
    logger.debug("convention_registered", convention=convention.name)
    return convention


def get_convention(name: str) -> Convention:
    """Look up a registered convention.

    Raises:
        ConfigurationError: If no convention has that name
    """
    try:
        return _CONVENTIONS[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown convention '{name}'. Registered: {', '.join(sorted(_CONVENTIONS))}"
        ) from None


def list_conventions() -> list[str]:
    return list(_CONVENTIONS.keys())


def activate(name: str) -> None:
    """Make ``name`` the process-wide active convention. Last call wins."""
    global _active
    get_convention(name)
    with _lock:
        previous, _active = _active, name
    if previous != name:
        logger.info("convention_activated", convention=name, previous=previous)


def current() -> str:
    """Name of the convention in effect: scoped override, else the active one."""
    return _scoped.get() or _active


@contextmanager
def use_convention(name: str) -> Iterator[Convention]:
    """Override the convention for the enclosed scope."""
    convention = get_convention(name)
    token = _scoped.set(name)
    try:
        yield convention
    finally:
        _scoped.reset(token)


def resolve_convention(name: str | None = None) -> Convention:
    """The convention named ``name``, or the one in effect when None."""
    return get_convention(current() if name is None else name)
