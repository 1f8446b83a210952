"""
Tests for OrderedSimplex

Checks:
1. Construction (labels, copy, empty)
2. 1-indexed access and its bounds
3. Sequence replacement
4. Lexicographic ordering and structural identity
5. Faces and the alternating boundary formula
6. Rendering
"""

import pytest

from simplicial_chains import (
    InvalidArgumentError,
    OrderedSimplex,
    OutOfRangeError,
)


# =============================================================================
# CONSTRUCTION AND ACCESS
# =============================================================================


class TestConstruction:
    """Tests for building simplices"""

    def test_from_labels(self):
        s = OrderedSimplex([1, 2, 3])
        assert len(s) == 3
        assert s.get_sequence() == [1, 2, 3]

    def test_copy_is_independent(self):
        s = OrderedSimplex([1, 2])
        t = OrderedSimplex(s)
        t[1] = 5
        assert s[1] == 1
        assert t == OrderedSimplex([5, 2])

    def test_empty_default_labels(self):
        assert OrderedSimplex.empty(3).get_sequence() == [0, 0, 0]
        assert OrderedSimplex.empty(2, str).get_sequence() == ['', '']
        assert len(OrderedSimplex.empty(0)) == 0

    def test_empty_negative_length_rejected(self):
        with pytest.raises(InvalidArgumentError):
            OrderedSimplex.empty(-1)


class TestAccess:
    """Tests for 1-indexed element access"""

    def test_one_indexed(self):
        s = OrderedSimplex(['a', 'b', 'c'])
        assert s.at(1) == 'a'
        assert s[3] == 'c'

    def test_set_element(self):
        s = OrderedSimplex(['a', 'b', 'c'])
        s[2] = 'x'
        s.set_element(3, 'y')
        assert s.get_sequence() == ['a', 'x', 'y']

    @pytest.mark.parametrize("index", [0, 4, -1, 100])
    def test_out_of_range(self, index):
        s = OrderedSimplex([1, 2, 3])
        with pytest.raises(OutOfRangeError):
            s.at(index)
        with pytest.raises(OutOfRangeError):
            s[index]
        with pytest.raises(OutOfRangeError):
            s[index] = 0

    def test_out_of_range_is_index_error(self):
        with pytest.raises(IndexError):
            OrderedSimplex([1])[2]

    def test_empty_simplex_has_no_positions(self):
        with pytest.raises(OutOfRangeError):
            OrderedSimplex([]).at(1)

    def test_non_integer_index_rejected(self):
        with pytest.raises(TypeError):
            OrderedSimplex([1, 2])[1:2]

    def test_failed_write_leaves_simplex_intact(self):
        s = OrderedSimplex([1, 2])
        with pytest.raises(OutOfRangeError):
            s[3] = 7
        assert s.get_sequence() == [1, 2]

    def test_iteration(self):
        assert list(OrderedSimplex([4, 5, 6])) == [4, 5, 6]


class TestSetSequence:
    """Tests for whole-sequence replacement"""

    def test_replace(self):
        s = OrderedSimplex([1, 2])
        s.set_sequence([7, 8])
        assert s.get_sequence() == [7, 8]

    @pytest.mark.parametrize("sequence", [[], [1], [1, 2, 3]])
    def test_wrong_length_rejected(self, sequence):
        s = OrderedSimplex([1, 2])
        with pytest.raises(InvalidArgumentError):
            s.set_sequence(sequence)
        assert s.get_sequence() == [1, 2]

    def test_wrong_length_is_value_error(self):
        with pytest.raises(ValueError):
            OrderedSimplex([1, 2]).set_sequence([1])


# =============================================================================
# ORDERING AND IDENTITY
# =============================================================================


class TestOrdering:
    """Tests for lexicographic order and structural identity"""

    def test_lexicographic(self):
        assert OrderedSimplex([1, 2]) < OrderedSimplex([1, 3])
        assert OrderedSimplex([1, 9]) < OrderedSimplex([2, 0])
        assert OrderedSimplex([2, 0]) >= OrderedSimplex([1, 9])
        assert OrderedSimplex([1, 2]) <= OrderedSimplex([1, 2])

    def test_sorting(self):
        simplices = [OrderedSimplex(s) for s in ([2, 3], [1, 3], [1, 2])]
        assert [s.get_sequence() for s in sorted(simplices)] == [[1, 2], [1, 3], [2, 3]]

    def test_structural_equality_and_hash(self):
        assert OrderedSimplex([1, 2]) == OrderedSimplex([1, 2])
        assert OrderedSimplex([1, 2]) != OrderedSimplex([2, 1])
        assert len({OrderedSimplex([1, 2]), OrderedSimplex([1, 2])}) == 1

    def test_not_equal_to_tuple(self):
        assert OrderedSimplex([1, 2]) != (1, 2)


# =============================================================================
# BOUNDARY
# =============================================================================


class TestBoundary:
    """Tests for faces() and boundary()"""

    def test_faces_in_deletion_order(self):
        faces = OrderedSimplex([1, 2, 3]).faces()
        assert [f.get_sequence() for f in faces] == [[2, 3], [1, 3], [1, 2]]

    def test_triangle_boundary(self):
        boundary = OrderedSimplex([1, 2, 3]).boundary()
        assert boundary.get_coefficient(OrderedSimplex([2, 3])) == 1
        assert boundary.get_coefficient(OrderedSimplex([1, 3])) == -1
        assert boundary.get_coefficient(OrderedSimplex([1, 2])) == 1
        assert boundary.get_nonzero_count() == 3

    def test_edge_boundary(self):
        boundary = OrderedSimplex(['a', 'b']).boundary()
        assert str(boundary) == "[(-1,(a)),(1,(b))]"

    @pytest.mark.parametrize("labels", [[], [7]])
    def test_low_levels_have_empty_boundary(self, labels):
        assert OrderedSimplex(labels).boundary().is_zero()
        assert OrderedSimplex(labels).faces() == []

    def test_signs_taken_in_given_ring(self):
        boundary = OrderedSimplex([1, 2, 3]).boundary(modulus=5)
        assert boundary.modulus == 5
        assert boundary.get_coefficient(OrderedSimplex([1, 3])) == 4

    def test_signs_collapse_mod_two(self):
        boundary = OrderedSimplex([1, 2, 3, 4]).boundary(modulus=2)
        assert [int(c) for c in boundary.get_coefficients()] == [1, 1, 1, 1]

    def test_tetrahedron_signs(self):
        boundary = OrderedSimplex([0, 1, 2, 3]).boundary()
        expected = {
            (1, 2, 3): 1,
            (0, 2, 3): -1,
            (0, 1, 3): 1,
            (0, 1, 2): -1,
        }
        for face, sign in expected.items():
            assert boundary.get_coefficient(OrderedSimplex(face)) == sign

    def test_repeated_labels_cancel(self):
        assert OrderedSimplex([1, 1]).boundary().is_zero()


# =============================================================================
# RENDERING
# =============================================================================


class TestRendering:
    """Tests for str() and repr()"""

    def test_str(self):
        assert str(OrderedSimplex([1, 2, 3])) == "(1,2,3)"
        assert str(OrderedSimplex(['v'])) == "(v)"

    def test_empty_str(self):
        assert str(OrderedSimplex()) == "()"

    def test_repr(self):
        assert repr(OrderedSimplex([1, 2])) == "OrderedSimplex([1, 2])"
