"""
================================================================================
simplex.py - Ordered Simplices and the Face Formula
================================================================================

An OrderedSimplex is an ordered sequence of exactly d vertex labels. The
length d is fixed when the simplex is created.

LEVEL CONVENTION:
    Throughout this package a simplex of "level d" stores d labels, so its
    geometric dimension is d - 1. A level-2 simplex (a, b) is an edge, a
    level-3 simplex (a, b, c) a triangle. The boundary of a level-0 or
    level-1 simplex is defined to be empty.

BOUNDARY:
    For d >= 2 the boundary is the alternating sum of faces

        boundary(v_0, ..., v_{d-1}) = sum_i (-1)^i (v_0, ..., ^v_i, ..., v_{d-1})

    where ^v_i marks the removed label. Signs are elements of the caller's
    coefficient ring.

Element access is 1-indexed: positions run from 1 to d.

References:
    - Munkres, J. R. (1984). Elements of Algebraic Topology, §5.

Author: Simplicial Chains Contributors
Date: 2026
"""

import copy
import functools
import numbers

from .exceptions import InvalidArgumentError, OutOfRangeError
from .free_module import FreeModule
from .ring import DEFAULT_MODULUS


@functools.total_ordering
class OrderedSimplex:
    """
    Fixed-length ordered sequence of vertex labels.

    Parameters
    ----------
    labels : iterable, optional
        Vertex labels in order. Passing another OrderedSimplex copies it.
        Default is the empty simplex.

    Notes
    -----
    Ordering is lexicographic on the label sequence and equality/hashing are
    structural. A simplex is hashable while still being mutable in place;
    do not mutate one that sits inside a set or dict key.

    Example
    -------
    >>> s = OrderedSimplex([1, 2, 3])
    >>> s[1], len(s)
    (1, 3)
    >>> print(s.boundary())
    [(1,(1,2)),(-1,(1,3)),(1,(2,3))]
    """

    def __init__(self, labels=()):
        if isinstance(labels, OrderedSimplex):
            labels = labels._sequence
        self._sequence = list(labels)

    @classmethod
    def empty(cls, length, label_type=int):
        """
        Simplex of the given length with every label default-valued.

        Parameters
        ----------
        length : int
            Number of labels d, must be >= 0.
        label_type : callable, optional
            Called with no arguments to produce each label. Default is int,
            giving all-zero labels.
        """
        if length < 0:
            raise InvalidArgumentError(f"simplex length must be >= 0, got {length}")
        return cls([label_type() for _ in range(length)])

    # -------------------------------------------------------------------------
    # Element access (1-indexed)
    # -------------------------------------------------------------------------

    def _position(self, index):
        if not isinstance(index, numbers.Integral):
            raise TypeError(
                f"simplex positions must be integers, not {type(index).__name__}"
            )
        if index < 1 or index > len(self._sequence):
            raise OutOfRangeError(index, len(self._sequence))
        return index - 1

    def at(self, index):
        return self._sequence[self._position(index)]

    def __getitem__(self, index):
        return self._sequence[self._position(index)]

    def set_element(self, index, value):
        self._sequence[self._position(index)] = value

    def __setitem__(self, index, value):
        self.set_element(index, value)

    def get_sequence(self):
        return list(self._sequence)

    def set_sequence(self, sequence):
        """
        Replace all labels at once.

        Raises
        ------
        InvalidArgumentError
            If ``sequence`` does not have exactly ``len(self)`` labels.
        """
        sequence = list(sequence)
        if len(sequence) != len(self._sequence):
            raise InvalidArgumentError(
                f"sequence of length {len(sequence)} does not fit a simplex "
                f"of length {len(self._sequence)}"
            )
        self._sequence = sequence

    def __len__(self):
        return len(self._sequence)

    def __iter__(self):
        return iter(self._sequence)

    # -------------------------------------------------------------------------
    # Ordering and identity
    # -------------------------------------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, OrderedSimplex):
            return NotImplemented
        return self._sequence == other._sequence

    def __lt__(self, other):
        if not isinstance(other, OrderedSimplex):
            return NotImplemented
        return self._sequence < other._sequence

    def __hash__(self):
        return hash(tuple(self._sequence))

    def __copy__(self):
        return OrderedSimplex(self._sequence)

    def __deepcopy__(self, memo):
        return OrderedSimplex(copy.deepcopy(self._sequence, memo))

    # -------------------------------------------------------------------------
    # Faces and boundary
    # -------------------------------------------------------------------------

    def faces(self):
        """
        The d faces obtained by deleting one label, in deletion order.

        Face i drops the label at zero-based position i. Level-0 and level-1
        simplices have no faces.
        """
        if len(self._sequence) < 2:
            return []
        return [
            OrderedSimplex(self._sequence[:i] + self._sequence[i + 1:])
            for i in range(len(self._sequence))
        ]

    def boundary(self, modulus=DEFAULT_MODULUS):
        """
        Alternating sum of faces as a FreeModule over simplices of length d-1.

        Parameters
        ----------
        modulus : int, optional
            Ring in which the signs +1/-1 are taken. Default is 0.

        Returns
        -------
        FreeModule
            Empty for d < 2. Otherwise face i (label i removed) carries
            +1 when i is even and -1 when i is odd.

        Example
        -------
        >>> print(OrderedSimplex(['a', 'b']).boundary())
        [(-1,(a)),(1,(b))]
        """
        faces = self.faces()
        signs = [1 if i % 2 == 0 else -1 for i in range(len(faces))]
        return FreeModule(faces, signs, modulus=modulus)

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def __str__(self):
        return "(" + ",".join(str(label) for label in self._sequence) + ")"

    def __repr__(self):
        return f"OrderedSimplex({self._sequence!r})"
