"""Shared pytest fixtures for all tests."""

import numpy as np
import pandas as pd
import pytest

from scitypes import classifier, fast_path, traits
from scitypes.conventions import registry
from scitypes.conventions.registry import activate, current


@pytest.fixture(autouse=True)
def isolated_registries(monkeypatch):
    """Give every test private copies of the process-wide registries.

    Registrations and convention switches made by a test are undone
    afterwards.
    """
    monkeypatch.setattr(traits, "_default_resolver", traits.get_trait_resolver().copy())
    monkeypatch.setattr(
        fast_path, "_default_registry", fast_path.get_fast_path_registry().copy()
    )
    monkeypatch.setattr(registry, "_CONVENTIONS", dict(registry._CONVENTIONS))
    monkeypatch.setattr(classifier, "_TRAIT_RULES", dict(classifier._TRAIT_RULES))
    previous = current()
    yield
    activate(previous)


@pytest.fixture
def mixed_table() -> dict:
    """Column table with a float column holding a missing value."""
    return {"x1": [10.0, 20.0, None], "x2": [1, 2, 3]}


@pytest.fixture
def frame() -> pd.DataFrame:
    """DataFrame with one column per standard machine type."""
    return pd.DataFrame(
        {
            "height": np.array([1.62, 1.75, np.nan, 1.80]),
            "visits": np.array([3, 0, 7, 1], dtype=np.int64),
            "smoker": np.array([True, False, False, True]),
            "grade": pd.Categorical(["b", "a", "c", "a"], categories=["a", "b", "c"], ordered=True),
        }
    )
