"""Registry of the factorial algorithms by name."""

from collections.abc import Callable
from typing import TypeAlias

from fact.additive import moessner
from fact.legendre import prime
from fact.lib import long_multiplication
from fact.limbs import multiply_by_int
from fact.split import binary_split

FactorialAlgorithm: TypeAlias = Callable[[int], str]
"""A function computing n! as a decimal string."""

ALGORITHMS: dict[str, FactorialAlgorithm] = {
    "long": long_multiplication,
    "limbs": multiply_by_int,
    "split": binary_split,
    "prime": prime,
    "moessner": moessner,
}
"""Every algorithm, the reference first."""

DEFAULT_ALGORITHM = "split"


class UnknownAlgorithmError(KeyError):
    """Error generated if an algorithm name is not registered."""


def get_algorithm(name: str) -> FactorialAlgorithm:
    """
    Look up an algorithm by name.

    Raises:
        UnknownAlgorithmError: If no algorithm is registered under name.
    """
    try:
        return ALGORITHMS[name]
    except KeyError:
        raise UnknownAlgorithmError(
            f"Unknown algorithm '{name}'. Available algorithms: {list(ALGORITHMS)}"
        ) from None


def factorial(n: int, algorithm: str = DEFAULT_ALGORITHM) -> str:
    """Computes n! with the named algorithm.

    Args:
        n: A non-negative input value.
        algorithm: Name of a registered algorithm.

    Raises:
        InvalidFactorialError: If n is less than 0.
        UnknownAlgorithmError: If algorithm is not registered.

    Returns:
        Computed factorial as a decimal string.
    """
    return get_algorithm(algorithm)(n)
