"""Tests for the Root ring."""

import numpy as np
import pytest

from globegrid.errors import RootIndexError, SpaceError
from globegrid.grid.root import ROOT_COUNT, ROOTS, Root


class TestRoot:
    """Tests for the Root class."""

    def test_root_initialization(self):
        """Test Root keeps its index."""
        root = Root(3)
        assert root.index == 3
        assert int(root) == 3

    def test_root_accepts_numpy_integers(self):
        """Test Root converts numpy integers to int."""
        root = Root(np.int64(2))
        assert root.index == 2
        assert type(root.index) is int

    @pytest.mark.parametrize("index", [-1, ROOT_COUNT, 10])
    def test_root_out_of_range(self, index):
        """Test indices outside the ring are rejected."""
        with pytest.raises(RootIndexError, match="not in the range 0..4"):
            Root(index)

    @pytest.mark.parametrize("index", [1.0, "1", None, True])
    def test_root_rejects_non_integers(self, index):
        """Test non-integer indices are rejected."""
        with pytest.raises(RootIndexError):
            Root(index)

    def test_root_index_error_is_value_error(self):
        """Test RootIndexError can be caught as ValueError or SpaceError."""
        with pytest.raises(ValueError):
            Root(7)
        with pytest.raises(SpaceError):
            Root(7)

    def test_next_west(self):
        """Test stepping west."""
        assert Root(3).next_west() == Root(2)
        assert Root(0).next_west() == Root(4)

    def test_next_east(self):
        """Test stepping east."""
        assert Root(3).next_east() == Root(4)
        assert Root(4).next_east() == Root(0)

    def test_east_and_west_are_inverse(self):
        """Test east then west returns to the start."""
        for root in ROOTS:
            assert root.next_east().next_west() == root
            assert root.next_west().next_east() == root

    def test_full_circle(self):
        """Test stepping ROOT_COUNT times in one direction visits every root."""
        root = Root(1)
        visited = []
        for _ in range(ROOT_COUNT):
            visited.append(root)
            root = root.next_east()
        assert root == Root(1)
        assert sorted(visited) == list(ROOTS)

    def test_coerce(self):
        """Test coerce passes roots through and converts ints."""
        root = Root(2)
        assert Root.coerce(root) is root
        assert Root.coerce(2) == root

    def test_hashable_and_ordered(self):
        """Test roots can be used in sets and sorted."""
        assert {Root(1), Root(1), Root(2)} == {Root(1), Root(2)}
        assert sorted([Root(4), Root(0), Root(2)]) == [Root(0), Root(2), Root(4)]

    def test_immutable(self):
        """Test roots cannot be changed after creation."""
        root = Root(1)
        with pytest.raises(AttributeError):
            root.index = 2

    def test_repr(self):
        """Test Root __repr__ method."""
        assert repr(Root(3)) == "Root(3)"


def test_roots_constant():
    """Test ROOTS lists every root in index order."""
    assert len(ROOTS) == ROOT_COUNT == 5
    assert [root.index for root in ROOTS] == [0, 1, 2, 3, 4]
