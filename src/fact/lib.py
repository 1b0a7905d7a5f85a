"""Argument validation, the small-value cache and the reference factorial."""

from collections.abc import Callable
import functools
import logging

from fact.render import render_natural

logger = logging.getLogger(__name__)

FACTORIALS_CACHE: tuple[int, ...] = (
    1,
    1,
    2,
    6,
    24,
    120,
    720,
    5040,
    40320,
    362880,
    3628800,
    39916800,
    479001600,
    6227020800,
    87178291200,
    1307674368000,
    20922789888000,
    355687428096000,
    6402373705728000,
    121645100408832000,
    2432902008176640000,
)
"""0! through 20!, every factorial that fits in a signed 64-bit integer."""

CACHE_SIZE = len(FACTORIALS_CACHE)


class InvalidFactorialError(RuntimeError):
    """Error generated if an invalid factorial input is given."""


def check_argument(n: int) -> None:
    """Validates the input of a factorial algorithm.

    Args:
        n: Input value.

    Raises:
        TypeError: If n is not an integer.
        InvalidFactorialError: If n is less than 0.
    """
    # bool is an int subclass but never a meaningful factorial input.
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"n must be an integer, not {type(n).__name__}")
    if n < 0:
        raise InvalidFactorialError(f"n is less than zero: {n}")


def small_value_cache(func: Callable[[int], str]) -> Callable[[int], str]:
    """Wraps a factorial algorithm with validation and the cache lookup.

    Inputs below ``CACHE_SIZE`` are answered from ``FACTORIALS_CACHE`` and never
    reach the wrapped algorithm, so algorithms can assume ``n >= CACHE_SIZE``.
    """

    @functools.wraps(func)
    def wrapper(n: int) -> str:
        check_argument(n)
        if n < CACHE_SIZE:
            logger.debug("%s(%d) answered from cache", func.__name__, n)
            return str(FACTORIALS_CACHE[n])
        return func(n)

    return wrapper


def long_multiplication(n: int) -> str:
    """Computes the factorial by multiplying an int accumulator by 2..n.

    This is the reference the other algorithms are checked against, so it
    deliberately skips the cache.

    Args:
        n: A non-negative input value.

    Raises:
        InvalidFactorialError: If n is less than 0.

    Returns:
        Computed factorial as a decimal string.
    """
    check_argument(n)
    product = 1
    for i in range(2, n + 1):
        product *= i
    return render_natural(product)
