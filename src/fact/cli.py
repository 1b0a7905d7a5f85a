#!/usr/bin/env python3

import logging
from typing import Annotated, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from typer import Argument, Exit, Option, Typer

from fact.algorithms import ALGORITHMS, UnknownAlgorithmError
from fact.bench import BenchmarkReport, ResultMismatchError, environment, run_benchmark
from fact.config import BenchmarkConfig
from fact.lib import InvalidFactorialError

app = Typer(add_completion=False)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def timings_table(report: BenchmarkReport) -> Table:
    table = Table(title=f"fact({report.n})")
    table.add_column("Algorithm")
    table.add_column("Time (ms)", justify="right")
    for timing in report.timings:
        table.add_row(timing.algorithm, f"{timing.milliseconds:.3f}")
    return table


@app.command()
def main(
    n: Annotated[int, Argument(min=0, help="The input n of fact(n)")],
    algorithm: Annotated[
        Optional[list[str]],
        Option("--algorithm", "-a", help=f"Algorithm to run, repeatable. One of {list(ALGORITHMS)}"),
    ] = None,
    verify: Annotated[bool, Option(help="Check that every algorithm returns the same result")] = True,
    show_result: Annotated[bool, Option(help="Print the computed factorial")] = False,
    verbose: Annotated[bool, Option("--verbose", "-v", help="Log debug output")] = False,
) -> None:
    """Compute factorial of a given input with several algorithms and time them."""

    configure_logging(verbose)
    console = Console()

    try:
        config = BenchmarkConfig(
            n=n,
            algorithms=algorithm or list(ALGORITHMS),
            verify=verify,
            show_result=show_result,
        )
        report = run_benchmark(config)
    except UnknownAlgorithmError as e:
        Console(stderr=True).print(f"[red]{escape(e.args[0])}[/red]")
        raise Exit(code=1) from e
    except (InvalidFactorialError, ResultMismatchError) as e:
        Console(stderr=True).print(f"[red]{escape(str(e))}[/red]")
        raise Exit(code=1) from e

    console.print(environment(), highlight=False)
    console.print(timings_table(report))
    if config.show_result:
        console.print(f"fact({n}) = {report.result}", soft_wrap=True)


# Allow the script to be run standalone (useful during development).
if __name__ == "__main__":
    app()
