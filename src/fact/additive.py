"""Factorial from Moessner's construction, using additions only.

See https://thatsmaths.com/2017/09/14/moessners-magical-method/
"""

from fact.lib import small_value_cache
from fact.render import render_natural


@small_value_cache
def moessner(n: int) -> str:
    """Computes n! with Moessner's triangular recurrence.

    Each sweep adds ``buff[k - 1]`` into ``buff[k]`` after ``buff[k - 1]`` was
    already updated in the same sweep, so the loop order must not change.
    Runs in O(n^3) big-number additions.

    Args:
        n: A non-negative input value.

    Raises:
        InvalidFactorialError: If n is less than 0.

    Returns:
        Computed factorial as a decimal string.
    """
    buff = [0] * (n + 1)
    buff[0] = 1

    for i in range(1, n + 1):
        buff[i] = 0
        for j in range(i, 0, -1):
            for k in range(1, j + 1):
                buff[k] += buff[k - 1]

    return render_natural(buff[n])
