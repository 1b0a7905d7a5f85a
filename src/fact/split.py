"""Factorial by balanced binary splitting of the factor range."""

import logging

from fact.lib import CACHE_SIZE, FACTORIALS_CACHE, small_value_cache
from fact.render import render_natural

logger = logging.getLogger(__name__)


def sub_product(a: int, b: int) -> int:
    """
    Product of every integer in ``[a, b]``.

    The range is halved recursively so that both operands of each multiplication
    have about the same size. CPython switches from schoolbook to Karatsuba
    multiplication once both operands exceed 70 digits of 30 bits, and balanced
    operands are what let it do so.

    Args:
        a: Lower bound, inclusive.
        b: Upper bound, inclusive, ``b >= a``.
    """
    span = b - a
    if span == 0:
        return a
    if span == 1:
        return a * b
    if span == 2:
        return a * (a + 1) * b

    mid = (a + b) // 2
    return sub_product(a, mid) * sub_product(mid + 1, b)


@small_value_cache
def binary_split(n: int) -> str:
    """Computes n! as the largest cached factorial times a split product.

    Args:
        n: A non-negative input value.

    Raises:
        InvalidFactorialError: If n is less than 0.

    Returns:
        Computed factorial as a decimal string.
    """
    product = sub_product(CACHE_SIZE, n) * FACTORIALS_CACHE[-1]
    logger.debug("n=%d: product has %d bits", n, product.bit_length())
    return render_natural(product)
