"""Tests for the scitype taxonomy and the sub-case relation."""

import pytest

from scitypes.core.errors import ConfigurationError
from scitypes.taxonomy import (
    BOTTOM,
    AnyTable,
    Array,
    Binary,
    ColorImage,
    Continuous,
    Count,
    Finite,
    Found,
    GrayImage,
    Image,
    Infinite,
    Known,
    Missing,
    Multiclass,
    OrderedFactor,
    Scientific,
    Scitype,
    ScitypeKind,
    ScitypeUnion,
    TupleScitype,
    Unknown,
    is_scientific,
    is_subtype,
    kind_ancestry,
    table_scitype,
    union,
)


class TestCases:
    """Tests for constructing atomic scitypes."""

    def test_parametrized_cases_carry_parameters(self):
        """Test cardinality and image dimensions are exposed."""
        assert Multiclass(3).cardinality == 3
        assert OrderedFactor(5).cardinality == 5
        assert GrayImage(28, 32).width == 28
        assert GrayImage(28, 32).height == 32
        assert Continuous.cardinality is None

    def test_binary_is_multiclass_two(self):
        """Test Binary is an alias, not a distinct case."""
        assert Binary == Multiclass(2)
        assert Binary.kind is ScitypeKind.MULTICLASS

    def test_equal_parameters_compare_equal(self):
        """Test cases are values: equal tags and parameters are equal."""
        assert Multiclass(3) == Multiclass(3)
        assert Multiclass(3) != Multiclass(4)
        assert Multiclass(3) != OrderedFactor(3)
        assert hash(ColorImage(4, 4)) == hash(ColorImage(4, 4))

    def test_cases_are_immutable(self):
        """Test parameters cannot be changed after construction."""
        with pytest.raises(AttributeError):
            Multiclass(3).params = (4,)  # type: ignore[misc]

    @pytest.mark.parametrize("bad", [0, -1, 2.5, True])
    def test_invalid_cardinality_rejected(self, bad):
        """Test cardinality must be a positive integer."""
        with pytest.raises(ConfigurationError):
            Multiclass(bad)

    def test_leaf_cases_require_parameters(self):
        """Test parametrized leaf kinds cannot be left open."""
        with pytest.raises(ConfigurationError):
            Scitype(ScitypeKind.GRAY_IMAGE)
        with pytest.raises(ConfigurationError):
            Scitype(ScitypeKind.MULTICLASS, (2, 3))

    def test_only_tables_take_columns(self):
        """Test column payloads are restricted to tables."""
        with pytest.raises(ConfigurationError):
            Scitype(ScitypeKind.COUNT, columns=Continuous)

    def test_image_needs_both_dimensions(self):
        """Test abstract Image takes both dimensions or none."""
        assert Image() == Scitype(ScitypeKind.IMAGE)
        with pytest.raises(ConfigurationError):
            Image(10)

    def test_repr(self):
        """Test readable representations."""
        assert repr(Continuous) == "Continuous"
        assert repr(Multiclass(3)) == "Multiclass(3)"
        assert repr(GrayImage(2, 3)) == "GrayImage(2, 3)"
        assert repr(Array(Count, 2)) == "Array(Count, 2)"
        assert repr(Continuous | Missing) == "Union(Continuous, Missing)"
        assert repr(BOTTOM) == "Bottom"


class TestUnion:
    """Tests for scitype unions."""

    def test_union_is_commutative(self):
        """Test member order does not matter."""
        assert Continuous | Missing == Missing | Continuous

    def test_union_is_associative_and_flat(self):
        """Test nested unions flatten."""
        left = (Continuous | Count) | Missing
        right = Continuous | (Count | Missing)
        assert left == right
        assert isinstance(left, ScitypeUnion)
        assert len(left) == 3

    def test_union_is_idempotent(self):
        """Test duplicates collapse to the single member."""
        assert union(Count, Count) == Count
        assert Count | Count is Count

    def test_empty_union_is_bottom(self):
        """Test the empty union is the identity."""
        assert union() == BOTTOM
        assert union(BOTTOM, Count) == Count

    def test_union_rejects_non_scitypes(self):
        """Test only scitype expressions can be combined."""
        with pytest.raises(ConfigurationError):
            union(Count, float)  # type: ignore[arg-type]


class TestSubtype:
    """Tests for the sub-case relation."""

    def test_hierarchy(self):
        """Test every leaf is under its abstract ancestors."""
        assert is_subtype(Continuous, Infinite)
        assert is_subtype(Count, Known)
        assert is_subtype(Multiclass(3), Finite())
        assert is_subtype(OrderedFactor(3), Finite(3))
        assert not is_subtype(OrderedFactor(3), Finite(4))
        assert is_subtype(GrayImage(8, 8), Image(8, 8))
        assert not is_subtype(GrayImage(8, 8), Image(8, 9))
        assert is_subtype(AnyTable, Known)
        assert is_subtype(Unknown, Found)
        assert not is_subtype(Unknown, Known)

    def test_missing_is_outside_found(self):
        """Test Missing is only scientific, not found."""
        assert not is_subtype(Missing, Found)
        assert is_subtype(Missing, Scientific)
        assert is_subtype(Continuous, Scientific)

    def test_kind_ancestry(self):
        """Test ancestry lists nearest first."""
        assert kind_ancestry(ScitypeKind.COUNT) == [
            ScitypeKind.COUNT,
            ScitypeKind.INFINITE,
            ScitypeKind.KNOWN,
            ScitypeKind.FOUND,
        ]

    def test_unions(self):
        """Test unions on either side."""
        assert is_subtype(Continuous, Continuous | Missing)
        assert not is_subtype(Continuous | Missing, Continuous)
        assert is_subtype(Continuous | Count, Infinite)
        assert is_subtype(Continuous | Count, Count | Missing | Continuous)

    def test_bottom_is_under_everything(self):
        """Test the empty union is a sub-case of any expression."""
        assert is_subtype(BOTTOM, Count)
        assert is_subtype(BOTTOM, Array(Count))

    def test_arrays_are_covariant(self):
        """Test array element sub-cases with matching dimensions."""
        assert is_subtype(Array(Count, 1), Array(Infinite, 1))
        assert not is_subtype(Array(Count, 1), Array(Count, 2))
        assert is_subtype(Array(Count, 3), Array(Count, None))
        assert not is_subtype(Array(Count), Count)

    def test_tuples_are_positional(self):
        """Test tuples compare position by position."""
        t = TupleScitype((Continuous, Count))
        assert is_subtype(t, TupleScitype((Infinite, Infinite)))
        assert not is_subtype(t, TupleScitype((Count, Continuous)))
        assert not is_subtype(t, TupleScitype((Infinite,)))

    def test_tables_compare_columns(self):
        """Test table scitypes are covariant in their column set."""
        table = table_scitype(Array(Count) | Array(Continuous))
        assert is_subtype(table, AnyTable)
        assert is_subtype(table, table_scitype(Array(Infinite)))
        assert not is_subtype(table, table_scitype(Array(Count)))
        assert not is_subtype(AnyTable, table)

    def test_method_form(self):
        """Test the issubtype method."""
        assert Count.issubtype(Infinite)


class TestIsScientific:
    """Tests for the scientific-type predicate."""

    def test_atomic_and_unions(self):
        assert is_scientific(Continuous)
        assert is_scientific(Missing)
        assert is_scientific(Continuous | Missing)
        assert is_scientific(BOTTOM)

    def test_containers_and_foreign_values(self):
        assert not is_scientific(Array(Count))
        assert not is_scientific(Array(Count) | Count)
        assert not is_scientific(float)
        assert not is_scientific("Continuous")
