"""The standard convention.

- Floats are ``Continuous``; integers and booleans are ``Count``.
- pandas categoricals are ``Multiclass(n)``, or ``OrderedFactor(n)`` when
  ordered, where ``n`` is the number of categories.
- Pillow images are ``GrayImage(w, h)`` for single-band modes (with or
  without alpha) and ``ColorImage(w, h)`` otherwise.
- Anything else is ``Unknown``.

Importing this module registers the convention and its fast-path entries.
"""

from __future__ import annotations

from typing import Any

import pandas as pd
from PIL import Image as PILImage

from scitypes.conventions.config import ConventionConfig, load_convention_config
from scitypes.conventions.registry import Convention, register_convention
from scitypes.fast_path import register_fast_scitype
from scitypes.machine import scalar_machine_type
from scitypes.taxonomy import (
    ColorImage,
    GrayImage,
    Multiclass,
    OrderedFactor,
    Scitype,
    ScitypeExpr,
)

NAME = "standard"

# Palette modes store colors even though they have a single band
_PALETTE_MODES = frozenset({"P", "PA"})


def categorical_scitype(dtype: pd.CategoricalDtype) -> Scitype | None:
    """Scitype of the elements of a categorical; None if it has no categories."""
    n_categories = len(dtype.categories)
    if n_categories == 0:
        return None
    return OrderedFactor(n_categories) if dtype.ordered else Multiclass(n_categories)


def image_scitype(image: PILImage.Image) -> Scitype:
    bands = [band for band in image.getbands() if band != "A"]
    if len(bands) == 1 and image.mode not in _PALETTE_MODES:
        return GrayImage(image.width, image.height)
    return ColorImage(image.width, image.height)


class StandardConvention(Convention):
    """Rules driven by a machine-type table plus categorical and image rules."""

    def __init__(self, config: ConventionConfig):
        super().__init__(config.name)
        self.machine_types = dict(config.machine_types)

    def scalar_scitype(self, value: Any) -> ScitypeExpr | None:
        found = self.machine_types.get(scalar_machine_type(value))
        if found is not None:
            return found
        if isinstance(value, PILImage.Image):
            return image_scitype(value)
        return None

    def dtype_scitype(self, element_type: Any) -> ScitypeExpr | None:
        if isinstance(element_type, pd.CategoricalDtype):
            return categorical_scitype(element_type)
        return None


def install(config: ConventionConfig | None = None) -> StandardConvention:
    """Register the standard convention and its fast-path entries.

    Args:
        config: Machine-type table. If None, loads ``standard.yaml``.

    Returns:
        The registered convention
    """
    config = config or load_convention_config(NAME)
    convention = StandardConvention(config)
    register_convention(convention)
    for machine_type, element_scitype in convention.machine_types.items():
        register_fast_scitype(convention.name, machine_type, element_scitype)
    register_fast_scitype(convention.name, pd.CategoricalDtype, categorical_scitype)
    return convention


install()
