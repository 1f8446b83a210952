"""
================================================================================
chains.py - Chain Groups and the Boundary Operator
================================================================================

A chain of level d is a formal sum of level-d ordered simplices with
coefficients in Z (modulus 0) or Z/pZ (modulus p > 0):

    c = sum_k  a_k * sigma_k,      sigma_k = (v_0, ..., v_{d-1})

The boundary operator maps level-d chains to level-(d-1) chains:

    C_d --∂--> C_{d-1} --∂--> ... --∂--> C_1 --∂--> C_0

and is the linear extension of the simplex face formula:

    ∂c = sum_k a_k * ∂(sigma_k)

with the face signs taken in the chain's own coefficient ring.

LEVEL CONVENTION:
    Level = number of vertex labels, not geometric dimension. Level 0 is
    terminal: its boundary is the empty level-0 chain and every level-0
    chain is a cycle. The boundary of any level-1 chain is defined to be the
    empty level-0 chain.

CYCLES AND BOUNDARIES:
    A chain is a cycle when its boundary is zero. Whether a chain is itself
    a boundary needs the image of the next boundary map and is not computed
    here; is_boundary() says so explicitly with BoundaryStatus.NOT_COMPUTED.

References:
    - Munkres, J. R. (1984). Elements of Algebraic Topology.
    - Hatcher, A. (2002). Algebraic Topology, §2.1.

Author: Simplicial Chains Contributors
Date: 2026
"""

import enum
import functools
import logging
import operator

from .exceptions import InvalidArgumentError
from .free_module import FreeModule, canonicalize
from .ring import DEFAULT_MODULUS
from .simplex import OrderedSimplex


logger = logging.getLogger(__name__)


class BoundaryStatus(enum.Enum):
    """
    Answer to "is this chain a boundary?".

    Only NOT_COMPUTED is ever produced today. The enum refuses to be used as
    a boolean so that an unanswered question cannot pass for "no".
    """

    BOUNDARY = 'boundary'
    NOT_BOUNDARY = 'not_boundary'
    NOT_COMPUTED = 'not_computed'

    def __bool__(self):
        raise TypeError(
            f"{self} has no truth value; compare against BoundaryStatus members"
        )


# =============================================================================
# CHAIN GROUP
# =============================================================================

class ChainGroup(FreeModule):
    """
    Formal sum of level-d ordered simplices over Z or Z/pZ.

    Parameters
    ----------
    level : int
        Number of labels in every simplex of the chain, >= 0.
    generators : iterable of OrderedSimplex, optional
        Simplices of the initial terms. Default is empty.
    coefficients : iterable of int, optional
        Coefficients aligned with ``generators``. Default is all 1.
    modulus : int, optional
        Coefficient ring modulus. Default is 0 (the integers).

    Raises
    ------
    InvalidArgumentError
        If the level is negative, a generator is not an OrderedSimplex of
        length ``level``, or generators and coefficients are misaligned.

    Notes
    -----
    Arithmetic (``+``, ``-``, ``+=``, unary ``-``) is defined only between
    chains of the same level and modulus; anything else raises TypeError.

    Example
    -------
    >>> c = ChainGroup(2, [OrderedSimplex([1, 2]), OrderedSimplex([2, 3])])
    >>> print(c.boundary())
    [(-1,(1)),(1,(3))]
    """

    def __init__(self, level, generators=(), coefficients=None,
                 modulus=DEFAULT_MODULUS):
        level = operator.index(level)
        if level < 0:
            raise InvalidArgumentError(f"chain level must be >= 0, got {level}")
        self._level = level
        super().__init__(generators, coefficients, modulus)

    @classmethod
    def from_simplex(cls, simplex, modulus=DEFAULT_MODULUS):
        """Chain holding ``simplex`` with coefficient 1, at the simplex's level."""
        return cls(len(simplex), [simplex], modulus=modulus)

    from_generator = from_simplex

    def _check_generator(self, simplex):
        if not isinstance(simplex, OrderedSimplex):
            raise InvalidArgumentError(
                f"chain generators must be OrderedSimplex, "
                f"got {type(simplex).__name__}"
            )
        if len(simplex) != self._level:
            raise InvalidArgumentError(
                f"simplex {simplex} has {len(simplex)} labels, "
                f"expected {self._level} for a level-{self._level} chain"
            )

    def _empty_like(self):
        return ChainGroup(self._level, modulus=self._modulus)

    def _compatible(self, other):
        return super()._compatible(other) and other._level == self._level

    # -------------------------------------------------------------------------
    # Parameters
    # -------------------------------------------------------------------------

    @property
    def level(self):
        return self._level

    def get_dimension(self):
        """Level of the chain (vertex count of its simplices)."""
        return self._level

    def get_characteristic(self):
        """Modulus of the coefficient ring, 0 for the integers."""
        return self._modulus

    def is_zero_dimensional(self):
        return self._level == 0

    def is_one_dimensional(self):
        return self._level == 1

    # -------------------------------------------------------------------------
    # Boundary, cycles
    # -------------------------------------------------------------------------

    def boundary(self):
        """
        Apply the boundary operator.

        Returns
        -------
        ChainGroup
            A chain of level ``level - 1`` with the same modulus. For level 0
            and level 1 the result is the empty level-0 chain.
        """
        if self._level < 2:
            return ChainGroup(0, modulus=self._modulus)

        terms = []
        for simplex, coefficient in self._terms:
            for face, sign in simplex.boundary(self._modulus):
                terms.append((face, sign * coefficient))

        result = ChainGroup(self._level - 1, modulus=self._modulus)
        result._terms = canonicalize(terms, self._modulus)

        logger.debug(
            "boundary of level-%d chain: %d simplices -> %d faces (%d raw)",
            self._level, len(self._terms), len(result._terms), len(terms)
        )
        return result

    def is_cycle(self):
        if self._level == 0:
            return True
        return self.boundary().get_nonzero_count() == 0

    def is_boundary(self):
        """Always BoundaryStatus.NOT_COMPUTED; see the module notes."""
        return BoundaryStatus.NOT_COMPUTED

    # -------------------------------------------------------------------------
    # Simplex-level access
    # -------------------------------------------------------------------------

    def get_number_of_simplices(self):
        return self.get_nonzero_count()

    def has_simplices(self):
        return self.get_nonzero_count() > 0

    def has_simplex(self, simplex):
        return simplex in self

    def add_simplex(self, simplex, coefficient=1):
        self.add_generator(simplex, coefficient)

    def remove_simplex(self, simplex):
        self.set_coefficient(simplex, 0)

    def get_simplex_coefficient(self, simplex):
        return self.get_coefficient(simplex)

    def set_simplex_coefficient(self, simplex, coefficient):
        self.set_coefficient(simplex, coefficient)

    def vertices(self):
        """Sorted list of the labels used by the chain's simplices."""
        return sorted({label for simplex, _ in self._terms for label in simplex})

    def __repr__(self):
        generators = [g for g, _ in self._terms]
        coefficients = [int(c) for _, c in self._terms]
        return (
            f"ChainGroup({self._level}, {generators!r}, {coefficients!r}, "
            f"modulus={self._modulus})"
        )


# =============================================================================
# CHAIN UTILITIES
# =============================================================================

def are_homologous(chain1, chain2):
    """
    True when ``chain1 - chain2`` is a cycle.

    Both chains must share level and modulus.
    """
    return (chain1 - chain2).is_cycle()


def create_simplex_chain(simplices, modulus=DEFAULT_MODULUS, level=None):
    """
    Sum of the given simplices, each with coefficient 1.

    Parameters
    ----------
    simplices : iterable of OrderedSimplex
        Simplices of one common length. Repeats add up.
    modulus : int, optional
        Coefficient ring modulus. Default is 0.
    level : int, optional
        Chain level. Taken from the first simplex when omitted; required
        for an empty ``simplices``.

    Returns
    -------
    ChainGroup

    Example
    -------
    >>> tris = [OrderedSimplex([1, 2, 3]), OrderedSimplex([1, 3, 4])]
    >>> create_simplex_chain(tris, modulus=2).get_number_of_simplices()
    2
    """
    simplices = list(simplices)
    if level is None:
        if not simplices:
            raise InvalidArgumentError(
                "cannot infer the level of an empty simplex list; pass level="
            )
        level = len(simplices[0])

    # Same result as adding the simplices one by one, canonicalized once
    return ChainGroup(level, simplices, modulus=modulus)


def get_all_boundary_components(chain):
    """
    Boundary of each generator of ``chain`` taken on its own.

    The components are not scaled by the generator's coefficient in
    ``chain``; they are listed in canonical generator order.
    """
    return [
        ChainGroup.from_simplex(simplex, chain.modulus).boundary()
        for simplex in chain.get_generators()
    ]


def boundary_of_boundary_vanishes(chain):
    """Check the identity ∂∂c = 0 for one chain."""
    return chain.boundary().boundary().is_zero()


# Chains over Z, Z/2Z and Z/3Z
chain_z = functools.partial(ChainGroup, modulus=0)
chain_z2 = functools.partial(ChainGroup, modulus=2)
chain_z3 = functools.partial(ChainGroup, modulus=3)
