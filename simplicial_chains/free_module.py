"""
================================================================================
free_module.py - Formal Sums over an Ordered Set of Generators
================================================================================

This module provides FreeModule, a container for formal sums

    c_1 * g_1 + c_2 * g_2 + ... + c_n * g_n

with generators g_i drawn from any totally ordered type and coefficients c_i
in a ModularRing.

CANONICAL FORM:
    - generators strictly increasing under their own ordering
    - each generator appears at most once
    - every coefficient is nonzero in the ring

The module never holds a non-canonical term list. Every mutating operation
passes the combined raw terms through canonicalize() before storing them, so
reading a module (accessors, iteration, rendering) never changes it and a
value can be read from several threads at once.

Generators are copied when they enter a module and when they leave it, so a
caller mutating a generator it still holds cannot corrupt a module.

Author: Simplicial Chains Contributors
Date: 2026
"""

import copy
import logging
import numbers
from itertools import groupby
from operator import itemgetter

from .exceptions import InvalidArgumentError
from .ring import DEFAULT_MODULUS, ModularRing


logger = logging.getLogger(__name__)


# =============================================================================
# CANONICALIZATION
# =============================================================================

def canonicalize(terms, modulus=DEFAULT_MODULUS):
    """
    Bring raw (generator, coefficient) terms into canonical form.

    Parameters
    ----------
    terms : iterable of (generator, coefficient)
        Raw terms in any order, with repeated generators and zero
        coefficients allowed. Coefficients may be ``int`` or ModularRing.
    modulus : int, optional
        Coefficient ring modulus. Default is 0 (the integers).

    Returns
    -------
    list of (generator, ModularRing)
        Terms sorted by generator, one per generator, zero sums dropped.

    Raises
    ------
    TypeError
        If a ModularRing coefficient has a modulus other than ``modulus``.

    Algorithm
    ---------
    1. Reduce each coefficient into the ring
    2. Sort the pairs by generator (stable)
    3. Sum the coefficients of each run of equal generators
    4. Keep a run only if its sum is nonzero

    Notes
    -----
    The result depends only on the multiset of input terms, never on their
    order, and canonicalize(canonicalize(t)) == canonicalize(t).

    Example
    -------
    >>> canonicalize([('b', 1), ('a', 2), ('b', -1)])
    [('a', ModularRing(2, modulus=0))]
    """
    reduced = []
    for generator, coefficient in terms:
        if isinstance(coefficient, ModularRing) and coefficient.modulus != modulus:
            raise TypeError(
                f"coefficient {coefficient!r} does not belong to the ring "
                f"of modulus {modulus}"
            )
        reduced.append((generator, ModularRing(coefficient, modulus)))
    reduced.sort(key=itemgetter(0))

    canonical = []
    for generator, run in groupby(reduced, key=itemgetter(0)):
        total = ModularRing(0, modulus)
        for _, coefficient in run:
            total = total + coefficient
        if not total.is_zero():
            canonical.append((generator, total))

    logger.debug("canonicalized %d raw terms into %d", len(reduced), len(canonical))
    return canonical


# =============================================================================
# FREE MODULE
# =============================================================================

class FreeModule:
    """
    Formal linear combination of generators with ring coefficients.

    Parameters
    ----------
    generators : iterable, optional
        Generators of the initial terms. Default is empty.
    coefficients : iterable of int or ModularRing, optional
        Coefficients aligned index by index with ``generators``. When
        omitted every generator gets coefficient 1.
    modulus : int, optional
        Coefficient ring modulus. Default is 0 (the integers).

    Raises
    ------
    InvalidArgumentError
        If ``generators`` and ``coefficients`` differ in length, or the
        modulus is negative.

    Example
    -------
    >>> m = FreeModule(['b', 'a', 'b'], [1, 2, 2], modulus=3)
    >>> print(m)
    [(2,a)]
    """

    def __init__(self, generators=(), coefficients=None, modulus=DEFAULT_MODULUS):
        self._modulus = ModularRing(0, modulus).modulus

        generators = list(generators)
        if coefficients is None:
            coefficients = [1] * len(generators)
        else:
            coefficients = list(coefficients)
            if len(coefficients) != len(generators):
                raise InvalidArgumentError(
                    f"got {len(generators)} generators but "
                    f"{len(coefficients)} coefficients"
                )

        for generator in generators:
            self._check_generator(generator)

        self._terms = canonicalize(
            [(copy.copy(g), c) for g, c in zip(generators, coefficients)],
            self._modulus
        )

    @classmethod
    def from_generator(cls, generator, modulus=DEFAULT_MODULUS):
        """Module holding a single generator with coefficient 1."""
        return cls([generator], modulus=modulus)

    # -------------------------------------------------------------------------
    # Hooks for subclasses
    # -------------------------------------------------------------------------

    def _check_generator(self, generator):
        """Validate a generator before it enters the module. Accepts anything."""

    def _empty_like(self):
        return FreeModule(modulus=self._modulus)

    def _compatible(self, other):
        return type(other) is type(self) and other._modulus == self._modulus

    def _with_terms(self, terms):
        result = self._empty_like()
        result._terms = canonicalize(terms, self._modulus)
        return result

    # -------------------------------------------------------------------------
    # Read access (canonical view)
    # -------------------------------------------------------------------------

    @property
    def modulus(self):
        return self._modulus

    def get_generators(self):
        """Generators in ascending order, aligned with get_coefficients()."""
        return [copy.copy(g) for g, _ in self._terms]

    def get_coefficients(self):
        """Nonzero coefficients, aligned with get_generators()."""
        return [c for _, c in self._terms]

    def get_coefficient(self, generator):
        """
        Integer value of the coefficient of ``generator``.

        Returns 0 when the generator is absent from the canonical form.
        """
        for g, c in self._terms:
            if g == generator:
                return int(c)
        return 0

    def get_nonzero_count(self):
        return len(self._terms)

    def terms(self):
        """Canonical (generator, coefficient) pairs as a list."""
        return list(self)

    def is_zero(self):
        return not self._terms

    def __len__(self):
        return len(self._terms)

    def __bool__(self):
        return bool(self._terms)

    def __iter__(self):
        for generator, coefficient in self._terms:
            yield copy.copy(generator), coefficient

    def __contains__(self, generator):
        return any(g == generator for g, _ in self._terms)

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def add_generator(self, generator, coefficient=1):
        """Add ``coefficient * generator`` to the module."""
        self._check_generator(generator)
        self._terms = canonicalize(
            self._terms + [(copy.copy(generator), coefficient)],
            self._modulus
        )

    def set_coefficient(self, generator, coefficient):
        """
        Make ``coefficient`` the coefficient of ``generator``.

        Any existing term for the generator is replaced. Setting 0 removes the
        generator from the module.
        """
        self._check_generator(generator)
        remaining = [(g, c) for g, c in self._terms if g != generator]
        self._terms = canonicalize(
            remaining + [(copy.copy(generator), coefficient)],
            self._modulus
        )

    def clear(self):
        self._terms = []

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def __add__(self, other):
        if not self._compatible(other):
            return NotImplemented
        return self._with_terms(self._terms + other._terms)

    def __iadd__(self, other):
        if not self._compatible(other):
            return NotImplemented
        self._terms = canonicalize(self._terms + other._terms, self._modulus)
        return self

    def __neg__(self):
        return self._with_terms([(g, -c) for g, c in self._terms])

    def __sub__(self, other):
        if not self._compatible(other):
            return NotImplemented
        return self + (-other)

    def __mul__(self, scalar):
        if not isinstance(scalar, numbers.Integral):
            return NotImplemented
        factor = ModularRing(int(scalar), self._modulus)
        return self._with_terms([(g, factor * c) for g, c in self._terms])

    __rmul__ = __mul__

    # -------------------------------------------------------------------------
    # Value semantics
    # -------------------------------------------------------------------------

    def __eq__(self, other):
        if not self._compatible(other):
            return NotImplemented
        return self._terms == other._terms

    # Mutable container
    __hash__ = None

    def copy(self):
        result = self._empty_like()
        result._terms = list(self._terms)
        return result

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def __str__(self):
        return "[" + ",".join(f"({c},{g})" for g, c in self._terms) + "]"

    def __repr__(self):
        generators = [g for g, _ in self._terms]
        coefficients = [int(c) for _, c in self._terms]
        return f"FreeModule({generators!r}, {coefficients!r}, modulus={self._modulus})"
