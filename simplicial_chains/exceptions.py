"""
================================================================================
exceptions.py - Error Taxonomy for Chain Algebra
================================================================================

All errors raised by the package derive from ChainAlgebraError. The concrete
classes also derive from the matching built-in exception, so callers may catch
either ``OutOfRangeError`` or a plain ``IndexError``.

    OutOfRangeError      : simplex element access outside [1, d]
    InvalidArgumentError : wrong sequence length, negative modulus,
                           misaligned generators/coefficients, wrong-level
                           simplex inside a chain

Errors are synchronous precondition violations. The violating operation is
aborted and leaves the value it was called on unchanged.
"""


class ChainAlgebraError(Exception):
    """Base class for every error raised by simplicial_chains."""


class OutOfRangeError(ChainAlgebraError, IndexError):
    """A 1-indexed simplex position outside [1, d] was requested."""

    def __init__(self, index, length):
        self.index = index
        self.length = length
        super().__init__(
            f"index {index} out of range for simplex of length {length} "
            f"(valid positions are 1..{length})"
        )


class InvalidArgumentError(ChainAlgebraError, ValueError):
    """An argument does not satisfy the shape or domain an operation needs."""
