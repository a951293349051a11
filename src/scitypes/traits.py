"""Trait resolution: classify values by structural capability.

Adapters register predicates under a tag (e.g. ``"table"``). A value's trait
is the tag of the first registered predicate that returns True, or
``OTHER`` when none does.

Usage:
    from scitypes.traits import register_trait, classify_trait

    register_trait("table", lambda x: isinstance(x, pd.DataFrame))
    classify_trait(df)       # "table"
    classify_trait(3.0)      # "other"

No two predicates may be true for the same value. This is not enforced;
when violated, the earliest registration wins.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from scitypes.core.logging import get_logger

logger = get_logger(__name__)

OTHER = "other"
TABLE = "table"

TraitPredicate = Callable[[Any], bool]


class TraitResolver:
    """Ordered registry of trait predicates."""

    def __init__(self) -> None:
        self._predicates: list[tuple[str, TraitPredicate]] = []

    def register(self, tag: str, predicate: TraitPredicate) -> None:
        """Register a predicate for a trait tag.

        Re-registering a tag replaces its predicate but keeps its position.

        Args:
            tag: Trait label returned when the predicate matches
            predicate: Callable returning True for values with this trait
        """
        if tag == OTHER:
            raise ValueError(f"'{OTHER}' is reserved for values matching no trait")
        for i, (existing, _) in enumerate(self._predicates):
            if existing == tag:
                self._predicates[i] = (tag, predicate)
                logger.debug("trait_replaced", tag=tag)
                return
        self._predicates.append((tag, predicate))
        logger.debug("trait_registered", tag=tag, position=len(self._predicates) - 1)

    def unregister(self, tag: str) -> None:
        self._predicates = [(t, p) for t, p in self._predicates if t != tag]

    def classify(self, value: Any) -> str:
        """Return the tag of the first matching predicate, or ``OTHER``.

        Errors raised by a predicate propagate to the caller.
        """
        for tag, predicate in self._predicates:
            if predicate(value):
                return tag
        return OTHER

    def tags(self) -> list[str]:
        """Registered tags in evaluation order."""
        return [tag for tag, _ in self._predicates]

    def copy(self) -> TraitResolver:
        clone = TraitResolver()
        clone._predicates = list(self._predicates)
        return clone


_default_resolver = TraitResolver()


def get_trait_resolver() -> TraitResolver:
    """Get the process-wide trait resolver."""
    return _default_resolver


def register_trait(tag: str, predicate: TraitPredicate) -> None:
    """Register a trait predicate on the process-wide resolver."""
    _default_resolver.register(tag, predicate)


def classify_trait(value: Any) -> str:
    """Classify ``value`` by the process-wide trait predicates."""
    return _default_resolver.classify(value)
