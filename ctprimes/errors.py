"""
Exceptions raised by the prime table builders.

Every failure is deterministic: retrying the same call raises again.
"""


class PrimesError(Exception):
    """Base class for all ctprimes failures."""


class InvalidWidth(PrimesError, TypeError):
    """Requested element type is not a plain integer dtype."""


class InvalidCount(PrimesError, ValueError):
    """Count or bound is negative or not an integer."""


class WidthOverflow(PrimesError, OverflowError):
    """A produced prime does not fit in the requested element width."""

    def __init__(self, value: int, dtype, maximum: int):
        self.value = value
        self.dtype = dtype
        self.maximum = maximum
        super().__init__(
            f"prime {value} does not fit in {dtype} (max {maximum})"
        )


class BoundUnderflow(PrimesError, RuntimeError):
    """Estimated ceiling held fewer primes than were requested."""

    def __init__(self, requested: int, found: int, ceiling: int):
        self.requested = requested
        self.found = found
        self.ceiling = ceiling
        super().__init__(
            f"ceiling {ceiling} holds only {found} primes, {requested} requested"
        )
