"""
Tests for boundary matrices and coordinate vectors
"""

import numpy as np
import pytest

from simplicial_chains import (
    ChainGroup,
    InvalidArgumentError,
    OrderedSimplex,
    boundary_matrix,
    chain_to_vector,
    composed_boundary_vanishes,
    vector_to_chain,
)


def S(*labels):
    return OrderedSimplex(labels)


class TestBoundaryMatrix:
    """Tests for boundary_matrix()"""

    def test_triangle_over_integers(self):
        D, rows, cols = boundary_matrix([S(1, 2, 3)])
        assert [str(r) for r in rows] == ['(1,2)', '(1,3)', '(2,3)']
        assert cols == [S(1, 2, 3)]
        assert D.shape == (3, 1)
        assert D[:, 0].tolist() == [1, -1, 1]

    def test_entries_reduced_mod_p(self):
        D, _, _ = boundary_matrix([S(1, 2, 3)], modulus=3)
        assert D[:, 0].tolist() == [1, 2, 1]

    def test_custom_row_basis(self):
        rows = [S(2), S(1), S(3)]
        D, out_rows, _ = boundary_matrix([S(1, 2), S(2, 3)], faces=rows)
        assert out_rows == rows
        assert D.tolist() == [
            [1, -1],
            [-1, 0],
            [0, 1],
        ]

    def test_missing_face_rejected(self):
        with pytest.raises(InvalidArgumentError):
            boundary_matrix([S(1, 2)], faces=[S(1)])

    def test_level_one_matrix_is_empty(self):
        D, rows, _ = boundary_matrix([S(1), S(2)])
        assert rows == []
        assert D.shape == (0, 2)

    def test_matrix_agrees_with_chain_boundary(self):
        simplices = [S(1, 2, 3), S(1, 3, 4), S(2, 3, 4)]
        chain = ChainGroup(3, simplices, [2, -1, 3])
        D, rows, cols = boundary_matrix(simplices)

        expected = chain_to_vector(chain.boundary(), rows)
        assert np.array_equal(D @ chain_to_vector(chain, cols), expected)

    @pytest.mark.parametrize("modulus", [0, 2, 3, 5])
    def test_composed_boundary_vanishes(self, modulus):
        simplices = [S(0, 1, 2, 3), S(0, 1, 2, 4), S(1, 2, 3, 4)]
        assert composed_boundary_vanishes(simplices, modulus)


class TestVectors:
    """Tests for chain_to_vector() and vector_to_chain()"""

    def test_round_trip(self):
        basis = [S(1, 2), S(1, 3), S(2, 3)]
        chain = ChainGroup(2, [S(2, 3), S(1, 2)], [4, -1])
        vector = chain_to_vector(chain, basis)
        assert vector.tolist() == [-1, 0, 4]
        assert vector_to_chain(vector, basis) == chain

    def test_vector_to_chain_reduces(self):
        chain = vector_to_chain(np.array([3, 4]), [S(1), S(2)], modulus=3)
        assert chain.get_generators() == [S(2)]
        assert chain.get_simplex_coefficient(S(2)) == 1

    def test_simplex_outside_basis_rejected(self):
        with pytest.raises(InvalidArgumentError):
            chain_to_vector(ChainGroup(1, [S(9)]), [S(1)])

    def test_empty_basis_needs_level(self):
        with pytest.raises(InvalidArgumentError):
            vector_to_chain([], [])
        assert vector_to_chain([], [], level=2).level == 2
