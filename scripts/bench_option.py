"""Benchmarks for Option and Result combinators against hand-written branching."""

import statistics
import timeit
from collections.abc import Callable
from enum import IntEnum, StrEnum, auto
from functools import wraps
from typing import Final, NamedTuple

import typer
from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeRemainingColumn,
)
from rich.table import Table
from rich.text import Text

import pyoutcome as po

app = typer.Typer(help="Combinator benchmarks: pyoutcome vs plain python")


class Runs(IntEnum):
    """Cost category for benchmarks, determining iteration counts."""

    CHEAP = 2_000
    NORMAL = 1_000
    EXPENSIVE = 200


class Implementation(StrEnum):
    """Implementation type for benchmarks."""

    COMBINATOR = auto()
    PLAIN = auto()


class BenchmarkResult(NamedTuple):
    """Result of a single benchmark comparison."""

    category: str
    name: str
    combinator_median: float
    plain_median: float
    overhead: float


class BenchmarkMetadata(NamedTuple):
    """Metadata for a benchmark function."""

    category: str
    name: str
    cost: Runs
    implementation: Implementation


TEST_VALUE: Final[int] = 42
NULLABLE_DATA: Final = [x if x % 3 != 0 else None for x in range(100)]
type BenchFn = Callable[[], object]

CONSOLE: Final = Console()
RESULTS: list[BenchmarkResult] = []
BENCHMARK_REGISTRY: dict[BenchFn, BenchmarkMetadata] = {}


def bench(
    category: str,
    name: str,
    implementation: Implementation,
    cost: Runs = Runs.CHEAP,
) -> Callable[[BenchFn], BenchFn]:
    """Decorator to register a benchmark function with its metadata.

    Args:
        category (str): The category of the benchmark (e.g., "Construction").
        name (str): The name of the benchmark (e.g., "Some(value)").
        implementation (Implementation): Which side of the comparison the function is.
        cost (Runs): The cost category, defaults to CHEAP.

    Returns:
        Callable: The decorated function.
    """

    def decorator(func: BenchFn) -> BenchFn:
        BENCHMARK_REGISTRY[func] = BenchmarkMetadata(
            category=category, name=name, cost=cost, implementation=implementation
        )

        @wraps(func)
        def wrapper() -> object:
            return func()

        return wrapper

    return decorator


# =============================================================================
# CONSTRUCTION
# =============================================================================


@bench("Construction", "Some(value)", Implementation.COMBINATOR)
def bench_some() -> object:
    return po.Some(TEST_VALUE)


@bench("Construction", "Some(value)", Implementation.PLAIN)
def bench_plain_some() -> object:
    return TEST_VALUE


@bench("Construction", "from_nullable", Implementation.COMBINATOR, Runs.NORMAL)
def bench_from_nullable() -> object:
    return [po.Option.from_nullable(x) for x in NULLABLE_DATA]


@bench("Construction", "from_nullable", Implementation.PLAIN, Runs.NORMAL)
def bench_plain_from_nullable() -> object:
    return list(NULLABLE_DATA)


# =============================================================================
# CHAINS
# =============================================================================


def _half(x: int) -> po.Option[int]:
    return po.Some(x // 2) if x % 2 == 0 else po.NONE


@bench("Chain", "map -> bind -> default", Implementation.COMBINATOR, Runs.NORMAL)
def bench_option_chain() -> object:
    return [
        po.Option.from_nullable(x).map(lambda v: v * 2).bind(_half).default_value(0)
        for x in NULLABLE_DATA
    ]


@bench("Chain", "map -> bind -> default", Implementation.PLAIN, Runs.NORMAL)
def bench_plain_option_chain() -> object:
    out: list[int] = []
    for x in NULLABLE_DATA:
        if x is None:
            out.append(0)
            continue
        doubled = x * 2
        out.append(doubled // 2 if doubled % 2 == 0 else 0)
    return out


@po.safe(exceptions=(ZeroDivisionError,))
def _inverse(x: int) -> float:
    return 1 / x


@bench("Chain", "safe -> map -> match", Implementation.COMBINATOR, Runs.EXPENSIVE)
def bench_result_chain() -> object:
    return [
        _inverse(x).map(round, 3).match(str, lambda _: "inf") for x in range(-50, 50)
    ]


@bench("Chain", "safe -> map -> match", Implementation.PLAIN, Runs.EXPENSIVE)
def bench_plain_result_chain() -> object:
    out: list[str] = []
    for x in range(-50, 50):
        try:
            out.append(str(round(1 / x, 3)))
        except ZeroDivisionError:
            out.append("inf")
    return out


def bench_one(combinator_fn: BenchFn, plain_fn: BenchFn) -> None:
    """Run a single benchmark pair and store the median results."""
    meta = BENCHMARK_REGISTRY[combinator_fn]
    n_calls = meta.cost.value // 10
    repeats = meta.cost.value // 20

    combinator_times = [
        timeit.timeit(combinator_fn, number=n_calls) for _ in range(repeats)
    ]
    plain_times = [timeit.timeit(plain_fn, number=n_calls) for _ in range(repeats)]
    combinator_median = statistics.median(combinator_times)
    plain_median = statistics.median(plain_times)
    RESULTS.append(
        BenchmarkResult(
            category=meta.category,
            name=meta.name,
            combinator_median=combinator_median,
            plain_median=plain_median,
            overhead=combinator_median / plain_median,
        )
    )


def _run_all_benchmarks() -> None:
    pairs: dict[tuple[str, str], dict[Implementation, BenchFn]] = {}
    for func, meta in BENCHMARK_REGISTRY.items():
        pairs.setdefault((meta.category, meta.name), {})[meta.implementation] = func

    benchmarks: list[tuple[BenchFn, BenchFn]] = []
    for (category, name), impls in pairs.items():
        if len(impls) != len(Implementation):
            CONSOLE.print(
                f"[yellow]Warning: Skipping {category}/{name} - missing implementation[/yellow]"
            )
            continue
        benchmarks.append((impls[Implementation.COMBINATOR], impls[Implementation.PLAIN]))

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        TimeRemainingColumn(),
        console=CONSOLE,
    ) as progress:
        task = progress.add_task("[cyan]Running benchmarks...", total=len(benchmarks))
        for combinator_fn, plain_fn in benchmarks:
            meta = BENCHMARK_REGISTRY[combinator_fn]
            progress.update(task, description=f"[cyan]{meta.category}: {meta.name}")
            bench_one(combinator_fn, plain_fn)
            progress.advance(task)


def _display_results() -> None:
    table = Table(title="Combinator overhead (pyoutcome vs plain python)")
    table.add_column("Category", style="cyan")
    table.add_column("Operation", style="white")
    table.add_column("pyoutcome (s, median)", justify="right", style="green")
    table.add_column("plain (s, median)", justify="right", style="yellow")
    table.add_column("Overhead", justify="right")

    for result in RESULTS:
        style = "green bold" if result.overhead < 2 else "red bold"
        table.add_row(
            result.category,
            result.name,
            f"{result.combinator_median:.4f}",
            f"{result.plain_median:.4f}",
            Text(f"{result.overhead:.2f}x", style=style),
        )

    CONSOLE.print(table)
    CONSOLE.print()
    CONSOLE.print(
        Text("Median overhead: ", style="bold")
        + Text(
            f"{statistics.median(r.overhead for r in RESULTS):.2f}x",
            style="green bold",
        )
    )


@app.command()
def run(
    category: str | None = typer.Option(
        None, help="Only run benchmarks of this category."
    ),
) -> None:
    """Run the registered benchmarks and display results."""
    if category is not None:
        for func in [f for f, m in BENCHMARK_REGISTRY.items() if m.category != category]:
            del BENCHMARK_REGISTRY[func]
    CONSOLE.print(Text("Running combinator benchmarks...", style="bold blue"))
    CONSOLE.print()
    _run_all_benchmarks()
    if RESULTS:
        _display_results()


if __name__ == "__main__":
    app()
