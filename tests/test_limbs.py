import pytest

from fact.lib import long_multiplication
from fact.limbs import LimbArray, estimate_digits, multiply_by_int


# fmt: off
@pytest.mark.parametrize('n,expected', [
    (0, 1),
    (1, 1),
    (2, 1),
    (10, 7),
    (100, 158),
])
# fmt: on
def test_estimate_digits(n: int, expected: int) -> None:
    assert estimate_digits(n) == expected


def test_estimate_digits_is_at_most_one_short() -> None:
    for n in range(2, 400):
        digits = len(long_multiplication(n))
        assert digits - 1 <= estimate_digits(n) <= digits


def test_allocate_covers_result() -> None:
    for n in (21, 50, 100, 333, 1000):
        limbs = LimbArray.allocate(n)
        assert len(limbs.buf) * 9 >= len(long_multiplication(n))


def test_new_array_holds_one() -> None:
    limbs = LimbArray(4)
    assert limbs.head == limbs.tail == 3
    assert list(limbs.buf) == [0, 0, 0, 1]
    assert limbs.to_decimal() == "1"
    assert len(limbs) == 1


def test_multiply_small_carries_into_new_limb() -> None:
    limbs = LimbArray(3)
    limbs.multiply_small(999_999_999)
    limbs.multiply_small(7)
    assert limbs.head == 1
    assert list(limbs.buf) == [0, 6, 999_999_993]
    assert str(limbs) == "6999999993"


def test_multiply_small_pads_inner_limbs() -> None:
    limbs = LimbArray(3)
    limbs.multiply_small(1_000_000_000 // 2)
    limbs.multiply_small(2)
    assert list(limbs.buf) == [0, 1, 0]
    assert limbs.to_decimal() == "1000000000"


def test_multiply_small_spreads_large_carry() -> None:
    limbs = LimbArray(3)
    limbs.multiply_small(10**18)
    assert limbs.head == 0
    assert limbs.to_decimal() == "1" + "0" * 18


def test_multiply_small_by_zero() -> None:
    limbs = LimbArray(2)
    limbs.multiply_small(0)
    assert limbs.to_decimal() == "0"


def test_buffer_exhausted() -> None:
    limbs = LimbArray(1)
    with pytest.raises(IndexError):
        limbs.multiply_small(1_000_000_000)


def test_invalid_capacity() -> None:
    with pytest.raises(ValueError):
        LimbArray(0)


def test_multiply_by_int_matches_reference() -> None:
    for n in range(21, 120):
        assert multiply_by_int(n) == long_multiplication(n)
