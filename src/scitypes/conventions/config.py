"""Convention configuration loader.

A convention's machine-type table is data, kept in
``conventions/<name>.yaml``:

    name: standard
    machine_types:
      float: Continuous
      int: Count

Scitypes are written by kind name, with parameters in parentheses for the
parametrized kinds (``Multiclass(2)``, ``GrayImage(28, 28)``).
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import numpy as np
import yaml

from scitypes.core.config import get_settings
from scitypes.core.errors import ConfigurationError
from scitypes.taxonomy import Scitype, ScitypeKind

MACHINE_TYPE_NAMES: dict[str, type] = {
    "float": float,
    "int": int,
    "bool": bool,
    "complex": complex,
    "str": str,
    "datetime64": np.datetime64,
    "timedelta64": np.timedelta64,
}

_SCITYPE_RE = re.compile(r"^\s*(\w+)\s*(?:\(\s*([\d\s,]*)\s*\))?\s*$")


@dataclass
class ConventionConfig:
    """Machine-type table of a convention."""

    name: str
    machine_types: dict[type, Scitype] = field(default_factory=dict)


def parse_scitype(text: str) -> Scitype:
    """Parse ``"Count"`` or ``"Multiclass(3)"`` into an atomic scitype.

    Raises:
        ConfigurationError: On unknown kinds or malformed parameters
    """
    match = _SCITYPE_RE.match(text)
    if not match:
        raise ConfigurationError(f"Malformed scitype: {text!r}")
    name, raw_params = match.groups()
    try:
        kind = ScitypeKind(name)
    except ValueError:
        raise ConfigurationError(f"Unknown scitype kind: {name!r}") from None
    params: tuple[int, ...] = ()
    if raw_params:
        params = tuple(int(p) for p in raw_params.split(",") if p.strip())
    return Scitype(kind, params)


def _parse_config(config_dict: dict[str, Any], source: Path) -> ConventionConfig:
    name = config_dict.get("name")
    if not isinstance(name, str) or not name:
        raise ConfigurationError(f"{source}: convention config needs a 'name'")

    machine_types: dict[type, Scitype] = {}
    for type_name, scitype_text in (config_dict.get("machine_types") or {}).items():
        machine_type = MACHINE_TYPE_NAMES.get(type_name)
        if machine_type is None:
            raise ConfigurationError(f"{source}: unknown machine type {type_name!r}")
        machine_types[machine_type] = parse_scitype(str(scitype_text))
    return ConventionConfig(name=name, machine_types=machine_types)


def load_convention_config(name: str, config_path: Path | None = None) -> ConventionConfig:
    """Load a convention's machine-type table from YAML.

    Args:
        name: Convention name; the file is ``<name>.yaml``
        config_path: Optional explicit file path. If None, uses the
            conventions directory from settings.

    Returns:
        ConventionConfig instance
    """
    if config_path is None:
        config_path = get_settings().conventions_path / f"{name}.yaml"

    try:
        with open(config_path) as f:
            config_dict = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigurationError(f"Cannot read convention config {config_path}: {e}") from e

    config = _parse_config(config_dict, config_path)
    if config.name != name:
        raise ConfigurationError(
            f"{config_path}: expected convention '{name}', found '{config.name}'"
        )
    return config
