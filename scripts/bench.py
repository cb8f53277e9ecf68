"""Benchmarks for pyresult containers against plain Python idioms."""

import asyncio
import statistics
import timeit
from collections.abc import Callable
from enum import IntEnum, StrEnum, auto
from functools import wraps
from typing import Annotated, Final, NamedTuple, Self

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

import pyresult as pr

app = typer.Typer(help="pyresult benchmarks: containers vs plain Python")


class Runs(IntEnum):
    """Cost category for benchmarks, determining iteration counts."""

    CHEAP = 2_000
    NORMAL = 1_000
    EXPENSIVE = 200


class Implementation(StrEnum):
    """Implementation type for benchmarks."""

    PYRESULT = auto()
    PLAIN = auto()


class BenchmarkResult(NamedTuple):
    """Result of a single benchmark comparison."""

    category: str
    name: str
    pyresult_median: float
    plain_median: float
    overhead: float


class Stats(NamedTuple):
    """Statistical summary of benchmark results."""

    median: float
    mean: float
    stddev: float

    @classmethod
    def from_times(cls, times: list[float]) -> Self:
        """Compute stats from a list of times."""
        return cls(
            statistics.median(times),
            statistics.mean(times),
            statistics.stdev(times),
        )


class BenchmarkMetadata(NamedTuple):
    """Metadata for a benchmark function."""

    category: str
    name: str
    cost: Runs
    implementation: Implementation


TEST_VALUE: Final[int] = 42
NULLABLE_DATA: Final = [x if x % 3 != 0 else None for x in range(100)]
OPTION_DATA: Final = [pr.NONE if x is None else pr.Some(x) for x in NULLABLE_DATA]
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
        implementation (Implementation): Which side of the comparison this is.
        cost (Runs): The cost category, defaults to CHEAP.

    Returns:
        Callable: The decorated function.
    """

    def decorator(func: BenchFn) -> BenchFn:
        @wraps(func)
        def wrapper() -> object:
            return func()

        BENCHMARK_REGISTRY[wrapper] = BenchmarkMetadata(
            category=category, name=name, cost=cost, implementation=implementation
        )
        return wrapper

    return decorator


# =============================================================================
# BENCHMARKS
# =============================================================================


def _fails() -> int:
    msg = "boom"
    raise ValueError(msg)


@bench("Construction", "present value", Implementation.PYRESULT)
def _some() -> object:
    return pr.Some(TEST_VALUE)


@bench("Construction", "present value", Implementation.PLAIN)
def _plain_some() -> object:
    return TEST_VALUE


@bench("Unwrap", "unwrap_or over mixed data", Implementation.PYRESULT, Runs.NORMAL)
def _unwrap_or() -> object:
    return [opt.unwrap_or(0) for opt in OPTION_DATA]


@bench("Unwrap", "unwrap_or over mixed data", Implementation.PLAIN, Runs.NORMAL)
def _plain_unwrap_or() -> object:
    return [0 if x is None else x for x in NULLABLE_DATA]


@bench("Adapter", "sync success", Implementation.PYRESULT)
def _wrap_ok() -> object:
    return pr.wrap_exception(lambda: TEST_VALUE).unwrap_or(0)


@bench("Adapter", "sync success", Implementation.PLAIN)
def _plain_ok() -> object:
    try:
        return TEST_VALUE
    except ValueError:
        return 0


@bench("Adapter", "sync failure", Implementation.PYRESULT)
def _wrap_err() -> object:
    return pr.wrap_exception(_fails).unwrap_or(0)


@bench("Adapter", "sync failure", Implementation.PLAIN)
def _plain_err() -> object:
    try:
        return _fails()
    except ValueError:
        return 0


async def _async_fails() -> int:
    return _fails()


@bench("Adapter", "async failure", Implementation.PYRESULT, Runs.EXPENSIVE)
def _wrap_async_err() -> object:
    return asyncio.run(pr.wrap_exception(_async_fails)).unwrap_or(0)  # type: ignore[arg-type]


async def _plain_async_err_main() -> int:
    try:
        return await _async_fails()
    except ValueError:
        return 0


@bench("Adapter", "async failure", Implementation.PLAIN, Runs.EXPENSIVE)
def _plain_async_err() -> object:
    return asyncio.run(_plain_async_err_main())


# =============================================================================
# RUNNER
# =============================================================================


def bench_one(pyresult_fn: BenchFn, plain_fn: BenchFn, scale: float) -> None:
    """Run a single benchmark pair multiple times and store median results.

    Args:
        pyresult_fn (BenchFn): The pyresult implementation.
        plain_fn (BenchFn): The plain Python implementation.
        scale (float): Multiplier applied to the registered run count.
    """
    meta = BENCHMARK_REGISTRY[pyresult_fn]
    runs = max(int(meta.cost.value * scale), 3)
    n_calls = max(runs // 10, 1)

    ours = Stats.from_times(
        [timeit.timeit(pyresult_fn, number=n_calls) for _ in range(runs)]
    )
    plain = Stats.from_times(
        [timeit.timeit(plain_fn, number=n_calls) for _ in range(runs)]
    )
    RESULTS.append(
        BenchmarkResult(
            category=meta.category,
            name=meta.name,
            pyresult_median=ours.median,
            plain_median=plain.median,
            overhead=ours.median / plain.median,
        )
    )


def _pairs() -> list[tuple[BenchFn, BenchFn]]:
    grouped: dict[tuple[str, str], dict[Implementation, BenchFn]] = {}
    for func, meta in BENCHMARK_REGISTRY.items():
        grouped.setdefault((meta.category, meta.name), {})[meta.implementation] = func

    pairs: list[tuple[BenchFn, BenchFn]] = []
    for (category, name), impls in grouped.items():
        if len(impls) != len(Implementation):
            CONSOLE.print(
                f"[yellow]Warning: Skipping {category}/{name} - missing implementation[/yellow]"
            )
            continue
        pairs.append((impls[Implementation.PYRESULT], impls[Implementation.PLAIN]))
    return pairs


def _run_all_benchmarks(scale: float) -> None:
    pairs = _pairs()
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        TimeRemainingColumn(),
        console=CONSOLE,
    ) as progress:
        task = progress.add_task("[cyan]Running benchmarks...", total=len(pairs))
        for pyresult_fn, plain_fn in pairs:
            meta = BENCHMARK_REGISTRY[pyresult_fn]
            progress.update(task, description=f"[cyan]{meta.category}: {meta.name}")
            bench_one(pyresult_fn, plain_fn, scale)
            progress.advance(task)


def _display_results() -> None:
    table = Table(title="pyresult vs plain Python")
    table.add_column("Category", style="cyan")
    table.add_column("Operation", style="white")
    table.add_column("pyresult (s, median)", justify="right", style="green")
    table.add_column("plain (s, median)", justify="right", style="yellow")
    table.add_column("Overhead", justify="right")

    for result in RESULTS:
        style = "green bold" if result.overhead < 2 else "red bold"  # noqa: PLR2004
        table.add_row(
            result.category,
            result.name,
            f"{result.pyresult_median:.5f}",
            f"{result.plain_median:.5f}",
            Text(f"{result.overhead:.2f}x", style=style),
        )

    CONSOLE.print(table)
    CONSOLE.print()
    CONSOLE.print(
        Text("Median overhead: ", style="bold")
        + Text(
            f"{statistics.median(r.overhead for r in RESULTS):.2f}x",
            style="cyan bold",
        )
    )


@app.command()
def run(
    *,
    scale: Annotated[
        float, typer.Option("--scale", help="Multiplier applied to run counts.")
    ] = 1.0,
) -> None:
    """Run all benchmarks and display results."""
    CONSOLE.print(Text("Running pyresult benchmarks...", style="bold blue"))
    CONSOLE.print()
    _run_all_benchmarks(scale)
    _display_results()


if __name__ == "__main__":
    app()
