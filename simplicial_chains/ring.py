"""
================================================================================
ring.py - Coefficient Rings Z and Z/pZ
================================================================================

This module provides ModularRing, the scalar type used for chain coefficients.

    modulus p > 0 : Z/pZ, representatives live in [0, p)
    modulus p = 0 : the integers Z, no reduction at all

Normalization is eager: a ModularRing value always holds its canonical
representative, right after construction and after every operation.

    normalize(x) = ((x mod p) + p) mod p      (p > 0)
    normalize(x) = x                          (p = 0)

Values are immutable and hashable, so they can be shared freely between
chains.

Author: Simplicial Chains Contributors
Date: 2026
"""

import operator

from .exceptions import InvalidArgumentError


# Coefficients over the integers unless told otherwise
DEFAULT_MODULUS = 0


def normalize(value, modulus=DEFAULT_MODULUS):
    """
    Reduce an integer into the canonical range of the ring.

    Parameters
    ----------
    value : int
        Any integer, positive or negative.
    modulus : int, optional
        Ring modulus. 0 selects the integers. Default is 0.

    Returns
    -------
    int
        ``value`` itself when ``modulus == 0``, otherwise the representative
        in [0, modulus).

    Example
    -------
    >>> normalize(-1, 3)
    2
    >>> normalize(-1, 0)
    -1

    Raises
    ------
    InvalidArgumentError
        If ``modulus`` is negative.
    """
    if modulus < 0:
        raise InvalidArgumentError(f"ring modulus must be >= 0, got {modulus}")
    if modulus == 0:
        return value
    return ((value % modulus) + modulus) % modulus


class ModularRing:
    """
    An element of Z (modulus 0) or Z/pZ (modulus p > 0).

    Parameters
    ----------
    value : int, optional
        Integer to reduce into the ring. Anything accepted by
        ``operator.index`` works, including another ModularRing.
        Default is 0.
    modulus : int, optional
        Ring modulus, must be >= 0. Default is 0 (the integers).

    Raises
    ------
    InvalidArgumentError
        If ``modulus`` is negative.

    Notes
    -----
    Arithmetic with a plain ``int`` lifts the integer into the ring first.
    Arithmetic between two different moduli is undefined and raises
    ``TypeError``.

    Example
    -------
    >>> a = ModularRing(4, 3)
    >>> a, -a, a * 2
    (ModularRing(1, modulus=3), ModularRing(2, modulus=3), ModularRing(2, modulus=3))
    """

    __slots__ = ('_value', '_modulus')

    def __init__(self, value=0, modulus=DEFAULT_MODULUS):
        modulus = operator.index(modulus)
        if modulus < 0:
            raise InvalidArgumentError(f"ring modulus must be >= 0, got {modulus}")
        self._modulus = modulus
        self._value = normalize(operator.index(value), modulus)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def value(self):
        """Canonical representative."""
        return self._value

    @property
    def modulus(self):
        return self._modulus

    def is_zero(self):
        return self._value == 0

    def __int__(self):
        return self._value

    def __index__(self):
        return self._value

    def __bool__(self):
        return self._value != 0

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def _coerce(self, other):
        """Return the raw integer of ``other`` or None if it cannot take part."""
        if isinstance(other, ModularRing):
            if other._modulus != self._modulus:
                return None
            return other._value
        if isinstance(other, int):
            return other
        return None

    def __add__(self, other):
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return ModularRing(self._value + rhs, self._modulus)

    __radd__ = __add__

    def __sub__(self, other):
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return ModularRing(self._value - rhs, self._modulus)

    def __rsub__(self, other):
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return ModularRing(lhs - self._value, self._modulus)

    def __mul__(self, other):
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return ModularRing(self._value * rhs, self._modulus)

    __rmul__ = __mul__

    def __neg__(self):
        return ModularRing(-self._value, self._modulus)

    def __pos__(self):
        return self

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def __eq__(self, other):
        if isinstance(other, ModularRing):
            return self._modulus == other._modulus and self._value == other._value
        if isinstance(other, int):
            # Compared against the representative: ModularRing(5, 3) == 2
            return self._value == other
        return NotImplemented

    def __hash__(self):
        return hash(self._value)

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def __str__(self):
        return str(self._value)

    def __repr__(self):
        return f"ModularRing({self._value}, modulus={self._modulus})"
