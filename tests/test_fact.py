import pytest

from fact.algorithms import ALGORITHMS, FactorialAlgorithm, UnknownAlgorithmError, factorial
from fact.lib import FACTORIALS_CACHE, InvalidFactorialError, check_argument, long_multiplication

algorithms = pytest.mark.parametrize("algorithm", list(ALGORITHMS.values()), ids=list(ALGORITHMS))


# fmt: off
@pytest.mark.parametrize('n,expected', [
    (0, '1'),
    (1, '1'),
    (2, '2'),
    (3, '6'),
    (5, '120'),
    (10, '3628800'),
    (20, '2432902008176640000'),
    (21, '51090942171709440000'),
    (25, '15511210043330985984000000'),
    (30, '265252859812191058636308480000000'),
])
# fmt: on
@algorithms
def test_factorial(algorithm: FactorialAlgorithm, n: int, expected: str) -> None:
    assert algorithm(n) == expected


# fmt: off
@pytest.mark.parametrize('n', [
    (-1),
    (-100),
])
# fmt: on
@algorithms
def test_invalid_factorial(algorithm: FactorialAlgorithm, n: int) -> None:
    with pytest.raises(InvalidFactorialError, match=str(n)):
        algorithm(n)


@pytest.mark.parametrize("n", [2.0, "5", True, None])
def test_non_integer_input(n: object) -> None:
    with pytest.raises(TypeError):
        check_argument(n)  # type: ignore[arg-type]


def test_cache_matches_products() -> None:
    assert len(FACTORIALS_CACHE) == 21
    for i in range(1, len(FACTORIALS_CACHE)):
        assert FACTORIALS_CACHE[i] == FACTORIALS_CACHE[i - 1] * i
    assert FACTORIALS_CACHE[-1] < 2**63


@algorithms
def test_agrees_with_reference(algorithm: FactorialAlgorithm) -> None:
    for n in range(0, 80):
        assert algorithm(n) == long_multiplication(n)


@algorithms
def test_each_result_is_previous_times_n(algorithm: FactorialAlgorithm) -> None:
    previous = int(algorithm(20))
    for n in range(21, 61):
        current = int(algorithm(n))
        assert current == previous * n
        previous = current


@algorithms
def test_repeated_calls_are_identical(algorithm: FactorialAlgorithm) -> None:
    assert algorithm(45) == algorithm(45)


@algorithms
def test_no_leading_zeros(algorithm: FactorialAlgorithm) -> None:
    for n in (1, 21, 37, 52):
        result = algorithm(n)
        assert result.isdigit()
        assert not result.startswith("0")


@pytest.mark.parametrize("n", [500, 1000])
def test_fast_algorithms_agree_on_large_input(n: int) -> None:
    expected = long_multiplication(n)
    for name in ("limbs", "split", "prime"):
        assert ALGORITHMS[name](n) == expected


def test_results_longer_than_int_str_limit() -> None:
    # 2000! has 5736 digits, beyond the default int/str conversion limit.
    expected = long_multiplication(2000)
    assert len(expected) == 5736
    assert expected.endswith("0" * 499)
    for name in ("limbs", "split", "prime"):
        assert ALGORITHMS[name](2000) == expected


def test_factorial_dispatch() -> None:
    assert factorial(21) == "51090942171709440000"
    assert factorial(21, algorithm="moessner") == "51090942171709440000"


def test_factorial_unknown_algorithm() -> None:
    with pytest.raises(UnknownAlgorithmError):
        factorial(5, algorithm="gamma")
