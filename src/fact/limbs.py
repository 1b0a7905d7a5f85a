"""Factorial on a hand-managed base 10^9 limb array."""

from __future__ import annotations

from array import array
import logging
import math

from fact.lib import small_value_cache
from fact.render import RADIX, render_limbs

logger = logging.getLogger(__name__)

SAFETY_LIMBS = 1
"""Extra limbs allocated on top of the Stirling estimate."""


def estimate_digits(n: int) -> int:
    """
    Estimate the number of decimal digits of n! with Stirling's approximation.

    The result is only used to size limb buffers and may be off by one digit,
    which the allocator absorbs with ``SAFETY_LIMBS``.

    Args:
        n: A non-negative input value.

    Returns:
        ``floor(0.5 * log10(2 * pi * n) + n * log10(n / e) + 1)``, or 1 for n < 2.
    """
    if n < 2:
        return 1
    return math.floor(0.5 * math.log10(2 * n * math.pi) + n * math.log10(n / math.e) + 1)


class LimbArray:
    """
    A natural number stored in a fixed-capacity array of base 10^9 limbs.

    Limbs are ordered most significant first. ``buf[head..tail]`` holds the
    value, everything before ``head`` is spare capacity and ``tail`` is always
    the last index of the buffer.

    Attributes:
        buf: The limb buffer. Every limb is in ``[0, RADIX)``.
        head: Index of the most significant limb.
        tail: Index of the least significant limb.
    """

    def __init__(self, capacity: int):
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        # "L" is at least 32 bits wide on every platform, enough for a limb.
        self.buf = array("L", [0]) * capacity
        self.tail = capacity - 1
        self.head = self.tail
        self.buf[self.tail] = 1

    @classmethod
    def allocate(cls, n: int) -> LimbArray:
        """Create a buffer holding 1, sized to grow up to n! in place."""
        digits = estimate_digits(n)
        capacity = int(digits / math.log10(RADIX)) + 1 + SAFETY_LIMBS
        logger.debug("n=%d: estimated %d digits, allocating %d limbs", n, digits, capacity)
        return cls(capacity)

    def __len__(self) -> int:
        return self.tail - self.head + 1

    def multiply_small(self, multiplier: int) -> None:
        """
        Multiply the stored value in place by a small non-negative integer.

        Raises:
            IndexError: If the carry runs past the start of the buffer.
        """
        buf = self.buf
        carry = 0
        for p in range(self.tail, self.head - 1, -1):
            carry, buf[p] = divmod(buf[p] * multiplier + carry, RADIX)

        while carry:
            if self.head == 0:
                raise IndexError(
                    f"limb buffer of {len(buf)} limbs exhausted; the digit estimate was too small"
                )
            self.head -= 1
            carry, buf[self.head] = divmod(carry, RADIX)

    def to_decimal(self) -> str:
        return render_limbs(self.buf, self.head, self.tail)

    def __str__(self) -> str:
        return self.to_decimal()

    def __repr__(self) -> str:
        return f"LimbArray(limbs={len(self)}, capacity={len(self.buf)})"


@small_value_cache
def multiply_by_int(n: int) -> str:
    """Computes n! by multiplying a limb array by 2, 3, ..., n in turn.

    Args:
        n: A non-negative input value.

    Raises:
        InvalidFactorialError: If n is less than 0.

    Returns:
        Computed factorial as a decimal string.
    """
    limbs = LimbArray.allocate(n)
    for i in range(2, n + 1):
        limbs.multiply_small(i)
    logger.debug("n=%d: used %d of %d limbs", n, len(limbs), len(limbs.buf))
    return limbs.to_decimal()

