"""Configuration dataclasses for factorial benchmarks."""

from __future__ import annotations

from dataclasses import dataclass, field

from fact.algorithms import ALGORITHMS, get_algorithm
from fact.lib import check_argument


@dataclass(kw_only=True)
class BenchmarkConfig:
    """
    Configuration for a benchmark run.

    Attributes:
        n: The input n of fact(n).
        algorithms: Names of the algorithms to run, in order.
        verify: Whether every result must equal the first one.
        show_result: Whether the computed factorial is printed.
    """

    n: int
    algorithms: list[str] = field(default_factory=lambda: list(ALGORITHMS))
    verify: bool = True
    show_result: bool = False

    def __post_init__(self) -> None:
        check_argument(self.n)
        if not self.algorithms:
            raise ValueError("At least one algorithm must be selected.")
        for name in self.algorithms:
            get_algorithm(name)
