"""Run several factorial algorithms on the same input and compare them."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import platform
import sys
import time

from fact.algorithms import get_algorithm
from fact.config import BenchmarkConfig

logger = logging.getLogger(__name__)


class ResultMismatchError(RuntimeError):
    """Error generated if two algorithms disagree on the same input."""


@dataclass
class Timing:
    """
    Outcome of a single algorithm run.

    Attributes:
        algorithm: Name of the algorithm.
        seconds: Elapsed wall-clock time.
        result: The decimal string it returned.
    """

    algorithm: str
    seconds: float
    result: str

    @property
    def milliseconds(self) -> float:
        return self.seconds * 1000


@dataclass
class BenchmarkReport:
    """All timings of one benchmark run, in the order they ran."""

    n: int
    timings: list[Timing] = field(default_factory=list)

    @property
    def result(self) -> str:
        """The result of the first algorithm that ran."""
        return self.timings[0].result

    def mismatches(self) -> list[str]:
        """Names of the algorithms whose result differs from the first one."""
        expected = self.result
        return [t.algorithm for t in self.timings[1:] if t.result != expected]


def environment() -> str:
    """Describe the interpreter the algorithms run on."""
    implementation = platform.python_implementation()
    line = f"{implementation} {platform.python_version()} on {sys.platform}"
    if implementation == "CPython":
        # Objects/longobject.c, KARATSUBA_CUTOFF is counted in 30-bit digits.
        line += " (int multiply: schoolbook, Karatsuba above 70 digits)"
    return line


def time_algorithm(name: str, n: int) -> Timing:
    """Run one algorithm once and measure it."""
    algorithm = get_algorithm(name)
    start = time.perf_counter()
    result = algorithm(n)
    seconds = time.perf_counter() - start
    logger.info("%s(%d) took %.3f ms", name, n, seconds * 1000)
    return Timing(algorithm=name, seconds=seconds, result=result)


def run_benchmark(config: BenchmarkConfig) -> BenchmarkReport:
    """
    Run every configured algorithm once on ``config.n``.

    Args:
        config: Which algorithms to run and whether to verify them.

    Returns:
        The report with one timing per algorithm.

    Raises:
        ResultMismatchError: If verification is enabled and any result differs
            from the first algorithm's result.
    """
    report = BenchmarkReport(n=config.n)
    for name in config.algorithms:
        report.timings.append(time_algorithm(name, config.n))

    if config.verify:
        mismatched = report.mismatches()
        if mismatched:
            raise ResultMismatchError(
                f"fact({config.n}) from {mismatched} differs from {report.timings[0].algorithm}"
            )
        logger.debug("All %d results agree", len(report.timings))

    return report
