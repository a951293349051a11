"""Tests for schema computation."""

import pandas as pd
import pytest
from pydantic import ValidationError

from scitypes.conventions.registry import Convention, register_convention
from scitypes.core.errors import UsageError
from scitypes.core.logging import _run_context
from scitypes.schema import ColumnSchema, Schema, schema
from scitypes.taxonomy import Continuous, Count, Missing, OrderedFactor, Unknown
from scitypes.traits import TABLE, register_trait


class TestSchema:
    """Tests for the schema() function."""

    def test_column_table(self, mixed_table):
        """Test names, machine types, scitypes and row count of a column table."""
        s = schema(mixed_table)

        assert s.names == ("x1", "x2")
        assert s.types == (float, int)
        assert s.scitypes == (Continuous | Missing, Count)
        assert s.nrows == 3

    def test_dataframe(self, frame):
        s = schema(frame)

        assert s.names == ("height", "visits", "smoker", "grade")
        assert s.types[:3] == (float, int, bool)
        assert isinstance(s.types[3], pd.CategoricalDtype)
        assert s.scitypes == (Continuous | Missing, Count, Count, OrderedFactor(3))
        assert s.nrows == 4

    def test_sequences_are_co_indexed(self, frame):
        s = schema(frame)
        assert len(s.names) == len(s.types) == len(s.scitypes) == len(s) == 4

    def test_mixed_list_column(self):
        """Test lists of mixed values report object."""
        s = schema({"a": [1, "x"]})
        assert s.types == (object,)
        assert s.scitypes == (Count | Unknown,)

    def test_non_string_labels(self):
        s = schema(pd.DataFrame({0: [1.0], 1: [2]}))
        assert s.names == ("0", "1")

    def test_explicit_convention(self, mixed_table):
        s = schema(mixed_table, convention="unspecified")
        assert s.scitypes == (Unknown | Missing, Unknown)

    @pytest.mark.parametrize("value", [3.0, [1, 2, 3], {"a": 1}, "table"])
    def test_non_table_raises(self, value):
        """Test values without the table trait are rejected."""
        with pytest.raises(UsageError, match="not introspectable"):
            schema(value)

    def test_columns_must_be_containers(self):
        """Test a table adapter yielding scalar columns is rejected."""
        register_trait(TABLE, lambda x: isinstance(x, dict))
        with pytest.raises(UsageError, match="Column 'a' holds a int"):
            schema({"a": 1})

    def test_tables_without_column_access(self):
        register_trait(TABLE, lambda x: isinstance(x, set))
        with pytest.raises(UsageError, match="No column access"):
            schema({1, 2})

    def test_column_bound_in_log_context(self):
        """Test each column's classification runs with its name in the log context."""
        seen = []

        class Recording(Convention):
            def scalar_scitype(self, value):
                seen.append(_run_context.get())
                return None

        register_convention(Recording("recording"))
        schema({"a": [1], "b": [2]}, convention="recording")

        assert seen == [{"column": "a"}, {"column": "b"}]
        assert _run_context.get() is None


class TestSchemaModel:
    """Tests for the Schema model."""

    def test_immutable(self, mixed_table):
        s = schema(mixed_table)
        with pytest.raises(ValidationError):
            s.nrows = 10

    def test_lengths_must_match(self):
        with pytest.raises(ValidationError):
            Schema(names=("a", "b"), types=(int,), scitypes=(Count,))

    def test_column_lookup(self, mixed_table):
        s = schema(mixed_table)
        assert s.column("x2") == ColumnSchema("x2", int, Count)
        with pytest.raises(KeyError):
            s.column("x3")

    def test_columns(self, mixed_table):
        s = schema(mixed_table)
        assert [c.name for c in s.columns()] == ["x1", "x2"]
        assert s.columns()[0].scitype == Continuous | Missing

    def test_to_dict(self, mixed_table):
        s = schema(mixed_table)
        assert s.to_dict() == {
            "names": ("x1", "x2"),
            "types": (float, int),
            "scitypes": (Continuous | Missing, Count),
            "nrows": 3,
        }
