"""Core module - configuration, logging, and errors."""

from scitypes.core.config import Settings, get_settings
from scitypes.core.errors import (
    ConfigurationError,
    ScitypeError,
    UnimplementedError,
    UsageError,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Errors
    "ConfigurationError",
    "ScitypeError",
    "UnimplementedError",
    "UsageError",
]
