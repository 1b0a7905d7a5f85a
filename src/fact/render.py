"""Decimal rendering of limb arrays and arbitrary-precision ints."""

from collections.abc import Sequence

RADIX = 10**9
"""Value of one limb. Each limb holds nine decimal digits."""

LIMB_DIGITS = 9


def render_limbs(buf: Sequence[int], head: int, tail: int) -> str:
    """
    Render the limbs ``buf[head..tail]`` as a decimal string.

    The most significant limb is written as-is, every following limb is
    zero-padded to nine digits.

    Args:
        buf: Limb buffer, most significant limb first.
        head: Index of the first significant limb.
        tail: Index of the least significant limb.

    Returns:
        The decimal representation without leading zeros.
    """
    parts = [str(buf[head])]
    parts.extend(f"{buf[p]:0{LIMB_DIGITS}d}" for p in range(head + 1, tail + 1))
    return "".join(parts)


def render_natural(value: int) -> str:
    """
    Render a non-negative int as a decimal string of any length.

    ``str(int)`` is capped by the interpreter's integer string conversion limit,
    so the value is split recursively by squared powers of ``RADIX`` until every
    piece fits in a single limb.

    Args:
        value: The number to render.

    Returns:
        The decimal representation without leading zeros.

    Raises:
        ValueError: If value is negative.
    """
    if value < 0:
        raise ValueError(f"Cannot render a negative value: {value}")

    # powers[k] == RADIX ** (2 ** k); the last one squared exceeds value.
    powers = [RADIX]
    while powers[-1] * powers[-1] <= value:
        powers.append(powers[-1] * powers[-1])

    parts: list[str] = []
    _render_into(parts, value, powers, len(powers) - 1, padded=False)
    return "".join(parts)


def _render_into(parts: list[str], value: int, powers: list[int], level: int, padded: bool) -> None:
    # value < powers[level + 1], or value < RADIX once level reaches -1.
    if level < 0:
        parts.append(f"{value:0{LIMB_DIGITS}d}" if padded else str(value))
        return

    high, low = divmod(value, powers[level])
    if high or padded:
        _render_into(parts, high, powers, level - 1, padded)
        _render_into(parts, low, powers, level - 1, True)
    else:
        _render_into(parts, low, powers, level - 1, False)
