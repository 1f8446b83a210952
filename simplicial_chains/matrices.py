"""
================================================================================
matrices.py - Matrix Form of the Boundary Operator
================================================================================

Given an ordered basis of level-d simplices (columns) and an ordered basis of
level-(d-1) simplices (rows), the boundary operator is the integer matrix

    D[i, j] = coefficient of face_i in ∂(simplex_j)

so that for a chain c with coefficient vector x in the column basis,
D @ x is the coefficient vector of ∂c in the row basis (reduced mod p when
p > 0).

Entries follow the ring: for p > 0 they are representatives in [0, p), so a
-1 sign shows up as p - 1; for p = 0 they are signed integers.

This module only builds matrices. Ranks, kernels and homology are outside
its scope.

Author: Simplicial Chains Contributors
Date: 2026
"""

import numpy as np

from .chains import ChainGroup
from .complexes import extract_faces
from .exceptions import InvalidArgumentError
from .ring import DEFAULT_MODULUS


# =============================================================================
# BOUNDARY MATRICES
# =============================================================================

def boundary_matrix(simplices, modulus=DEFAULT_MODULUS, faces=None):
    """
    Build the boundary matrix of a list of simplices.

    Parameters
    ----------
    simplices : list of OrderedSimplex
        Column basis, used in the given order.
    modulus : int, optional
        Coefficient ring modulus. Default is 0.
    faces : list of OrderedSimplex, optional
        Row basis. Defaults to the sorted unique faces of ``simplices``.

    Returns
    -------
    matrix : numpy.ndarray
        Integer matrix of shape (len(faces), len(simplices)).
    faces : list of OrderedSimplex
        Row basis.
    simplices : list of OrderedSimplex
        Column basis.

    Raises
    ------
    InvalidArgumentError
        If a face of some simplex is missing from a caller-supplied ``faces``.

    Example
    -------
    >>> D, rows, cols = boundary_matrix([OrderedSimplex([1, 2, 3])])
    >>> [str(r) for r in rows]
    ['(1,2)', '(1,3)', '(2,3)']
    >>> D[:, 0].tolist()
    [1, -1, 1]
    """
    simplices = list(simplices)
    faces = extract_faces(simplices) if faces is None else list(faces)
    face_to_idx = {face: i for i, face in enumerate(faces)}

    matrix = np.zeros((len(faces), len(simplices)), dtype=np.int64)

    for j, simplex in enumerate(simplices):
        for face, sign in simplex.boundary(modulus):
            if face not in face_to_idx:
                raise InvalidArgumentError(
                    f"face {face} of {simplex} is not in the row basis"
                )
            matrix[face_to_idx[face], j] = int(sign)

    return matrix, faces, simplices


def composed_boundary_vanishes(simplices, modulus=DEFAULT_MODULUS):
    """
    Check D_{d-1} @ D_d == 0 on the given simplices.

    The product is reduced mod ``modulus`` when it is positive.
    """
    outer, faces, _ = boundary_matrix(simplices, modulus)
    inner, _, _ = boundary_matrix(faces, modulus)

    product = inner @ outer
    if modulus > 0:
        product = product % modulus

    return not product.any()


# =============================================================================
# COORDINATE VECTORS
# =============================================================================

def chain_to_vector(chain, basis):
    """
    Coefficient vector of ``chain`` in an ordered simplex basis.

    Raises
    ------
    InvalidArgumentError
        If the chain uses a simplex that is not in ``basis``.
    """
    index = {simplex: i for i, simplex in enumerate(basis)}
    vector = np.zeros(len(index), dtype=np.int64)

    for simplex, coefficient in chain:
        if simplex not in index:
            raise InvalidArgumentError(f"simplex {simplex} is not in the basis")
        vector[index[simplex]] = int(coefficient)

    return vector


def vector_to_chain(vector, basis, level=None, modulus=DEFAULT_MODULUS):
    """
    Chain with coefficient vector ``vector`` in an ordered simplex basis.

    ``level`` defaults to the length of the first basis simplex.
    """
    basis = list(basis)
    if level is None:
        if not basis:
            raise InvalidArgumentError(
                "cannot infer the level of an empty basis; pass level="
            )
        level = len(basis[0])

    return ChainGroup(level, basis, [int(x) for x in vector], modulus=modulus)
