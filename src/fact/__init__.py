"""Exact factorials of arbitrary size with several classic algorithms."""

from fact.additive import moessner
from fact.algorithms import (
    ALGORITHMS,
    DEFAULT_ALGORITHM,
    FactorialAlgorithm,
    UnknownAlgorithmError,
    factorial,
    get_algorithm,
)
from fact.legendre import legendre_exponent, prime, primes, quick_pow, sieve
from fact.lib import FACTORIALS_CACHE, InvalidFactorialError, check_argument, long_multiplication
from fact.limbs import LimbArray, estimate_digits, multiply_by_int
from fact.render import render_limbs, render_natural
from fact.split import binary_split, sub_product

__all__ = [
    "ALGORITHMS",
    "DEFAULT_ALGORITHM",
    "FACTORIALS_CACHE",
    "FactorialAlgorithm",
    "InvalidFactorialError",
    "LimbArray",
    "UnknownAlgorithmError",
    "binary_split",
    "check_argument",
    "estimate_digits",
    "factorial",
    "get_algorithm",
    "legendre_exponent",
    "long_multiplication",
    "moessner",
    "multiply_by_int",
    "prime",
    "primes",
    "quick_pow",
    "render_limbs",
    "render_natural",
    "sieve",
    "sub_product",
]
