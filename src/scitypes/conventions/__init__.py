"""Conventions: named rulesets for classifying plain values.

Provides the convention registry and the standard convention:
- ``Convention``: base class; matches nothing
- ``activate`` / ``current`` / ``use_convention``: select the ruleset
- ``standard``: the default ruleset (registered on import)

Usage:
    from scitypes.conventions import Convention, register_convention, activate

    class MyConvention(Convention):
        def scalar_scitype(self, value):
            ...

    register_convention(MyConvention("mine"))
    activate("mine")
"""

from scitypes.conventions.registry import (
    UNSPECIFIED,
    Convention,
    activate,
    current,
    get_convention,
    list_conventions,
    register_convention,
    resolve_convention,
    use_convention,
)

__all__ = [
    "UNSPECIFIED",
    "Convention",
    "activate",
    "current",
    "get_convention",
    "list_conventions",
    "register_convention",
    "resolve_convention",
    "use_convention",
]
