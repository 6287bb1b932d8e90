import timeit
from collections.abc import Callable
from dataclasses import dataclass
from functools import partial
from typing import Any, Final, NamedTuple, Self

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeRemainingColumn,
)

type BenchFn = Callable[[], object]


WARMUP_RUNS: Final = 5
CALLS_BY_RUN: Final = 10
TARGET_BENCH_SEC: Final = 1
MIN_RUNS: Final = 20
SIZES: Final = (256, 512, 1024, 2048)

CONSOLE: Final = Console()


class Variant(NamedTuple):
    """A specific benchmark variant size."""

    size: int
    n_runs: int
    fn: BenchFn

    @classmethod
    def from_fn(cls, fn: BenchFn, size: int) -> Self:
        """Estimate number of runs needed for benchmark variant."""
        warmup_time = timeit.timeit(fn, number=WARMUP_RUNS) / WARMUP_RUNS
        est = int(TARGET_BENCH_SEC / 2 / max(warmup_time, 1e-9) / CALLS_BY_RUN)
        return cls(size, max(MIN_RUNS, est), fn)


class Benchmark(NamedTuple):
    """A benchmark with multiple data sizes."""

    category: str
    name: str
    variants: list[Variant]


@dataclass(slots=True)
class Row:
    """Raw row of timing data."""

    category: str
    name: str
    size: int
    run_idx: int
    time: float


BENCHMARKS: Final[list[Benchmark]] = []


def bench[P](
    *, gen: Callable[[range], P] = list
) -> Callable[[Callable[[P], object]], Callable[[P], object]]:
    """Decorator to register benchmarks with multiple data sizes.

    **gen** builds the benchmark input from `range(size)`. It is called again before every run,
    so benchmarks that consume or mutate their input always start from fresh data.
    """

    def decorator(func: Callable[[P], object]) -> Callable[[P], object]:
        variants = [
            Variant.from_fn(partial(_fresh, func, gen, size), size) for size in SIZES
        ]
        BENCHMARKS.append(
            Benchmark(func.__qualname__.split(".")[0], func.__name__, variants)
        )
        return func

    return decorator


def _fresh[P](
    func: Callable[[P], object], gen: Callable[[range], P], size: int
) -> object:
    return func(gen(range(size)))


def selected(pattern: str | None) -> list[Benchmark]:
    """Registered benchmarks whose category or name contains **pattern**."""
    if pattern is None:
        return list(BENCHMARKS)
    needle = pattern.lower()
    return [
        b
        for b in BENCHMARKS
        if needle in b.category.lower() or needle in b.name.lower()
    ]


def collect_raw_timings(benchmarks: list[Benchmark]) -> list[Row]:
    """Collect raw timing data for all benchmarks. Stats computed at the end."""
    total_runs = sum(v.n_runs for b in benchmarks for v in b.variants)
    CONSOLE.print(
        f"Found {len(benchmarks)} benchmarks, {total_runs} total runs",
        style="bold white",
    )

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        TimeRemainingColumn(),
        console=CONSOLE,
    ) as progress:
        task = progress.add_task("[cyan]Running benchmarks...", total=total_runs)
        f = partial(_run_variant, progress, task)
        return [
            row
            for benchmark in benchmarks
            for variant in benchmark.variants
            for row in f(variant, benchmark)
        ]


def _run_variant(
    progress: Progress,
    task: Any,  # noqa: ANN401
    variant: Variant,
    bench: Benchmark,
) -> list[Row]:
    def _update_progress(run_idx: int, fn: BenchFn) -> Row:
        progress.update(
            task,
            description=f"[cyan]{bench.category}: {bench.name} @ {variant.size}",
        )
        time_taken = timeit.timeit(fn, number=CALLS_BY_RUN)
        progress.advance(task)
        return Row(
            bench.category,
            bench.name,
            variant.size,
            run_idx,
            time_taken,
        )

    return [_update_progress(run_idx, variant.fn) for run_idx in range(variant.n_runs)]
