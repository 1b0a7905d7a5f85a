"""Factorial from the prime factorization of n!.

n! is the product of ``p ** e`` over every prime ``p <= n``, where the exponent
``e`` comes from Legendre's formula. For example ``5! = 2**3 * 3 * 5``.
"""

from collections.abc import Iterator
import logging
import math

from fact.lib import small_value_cache
from fact.render import render_natural

logger = logging.getLogger(__name__)


def sieve(n: int) -> bytearray:
    """
    Sieve of Eratosthenes over ``[0, n]``.

    Args:
        n: Upper bound, inclusive.

    Returns:
        Flags indexed by number, 1 for 0, 1 and every composite, 0 for primes.
    """
    flags = bytearray(n + 1)
    flags[: min(2, n + 1)] = b"\x01" * min(2, n + 1)
    for i in range(2, math.isqrt(n) + 1):
        if not flags[i]:
            start = i * i
            flags[start::i] = b"\x01" * len(range(start, n + 1, i))
    return flags


def primes(n: int) -> Iterator[int]:
    """Iterate over the primes up to and including n in increasing order."""
    flags = sieve(n)
    return (i for i in range(2, n + 1) if not flags[i])


def legendre_exponent(n: int, p: int) -> int:
    """
    Exponent of the prime p in n!, ``sum(n // p**k for k >= 1 while p**k <= n)``.

    Powers are computed with integers, so the bound stays exact for any n.
    """
    exponent = 0
    power = p
    while power <= n:
        exponent += n // power
        power *= p
    return exponent


def quick_pow(base: int, exponent: int) -> int:
    """Compute ``base ** exponent`` by repeated squaring."""
    result = 1
    square = base
    while exponent > 0:
        if exponent & 1:
            result *= square
        exponent >>= 1
        if exponent:
            square *= square
    return result


@small_value_cache
def prime(n: int) -> str:
    """Computes n! as a product of prime powers.

    Args:
        n: A non-negative input value.

    Raises:
        InvalidFactorialError: If n is less than 0.

    Returns:
        Computed factorial as a decimal string.
    """
    product = 1
    count = 0
    for p in primes(n):
        product *= quick_pow(p, legendre_exponent(n, p))
        count += 1
    logger.debug("n=%d: multiplied %d prime powers", n, count)
    return render_natural(product)
