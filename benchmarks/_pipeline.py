"""Aggregation and display of benchmark timings."""

import statistics
import subprocess
from dataclasses import dataclass

import cytoolz as cz
from rich.table import Table

import pyoview as pv

from ._registery import CALLS_BY_RUN, Benchmark, Row, collect_raw_timings


@dataclass(slots=True, frozen=True)
class Stat:
    """Median timing of one benchmark at one size."""

    category: str
    name: str
    size: int
    runs: int
    median: float


def run_pipeline(benchmarks: list[Benchmark]) -> list[Stat]:
    """Run **benchmarks** and aggregate their timings."""
    if not benchmarks:
        msg = "No benchmarks registered!"
        raise ValueError(msg)
    return _compute_all_stats(collect_raw_timings(benchmarks))


def _compute_all_stats(raw_rows: list[Row]) -> list[Stat]:
    """Compute median stats from raw timings, one per benchmark and size."""
    groups = cz.itertoolz.groupby(lambda r: (r.category, r.name, r.size), raw_rows)
    return [
        Stat(category, name, size, len(rows), statistics.median(r.time for r in rows))
        for (category, name, size), rows in sorted(groups.items())
    ]


def git_hash() -> pv.Option[str]:
    """Get current git commit hash, if the benchmarks run from a checkout."""
    try:
        result = subprocess.run(
            ["git", "rev-parse", "HEAD"],  # noqa: S607
            capture_output=True,
            text=True,
            check=True,
        )
    except (OSError, subprocess.CalledProcessError):
        return pv.NONE
    return pv.Some(result.stdout.strip())


def to_table(stats: list[Stat]) -> Table:
    """Render **stats** as a rich table, in microseconds per call."""
    table = Table(
        title=f"pyoview benchmarks @ {git_hash().map(lambda h: h[:8]).unwrap_or('n/a')}"
    )
    for column in ("category", "name", "size", "runs"):
        table.add_column(column)
    table.add_column("median (µs)", justify="right")
    for stat in stats:
        table.add_row(
            stat.category,
            stat.name,
            str(stat.size),
            str(stat.runs),
            f"{stat.median / CALLS_BY_RUN * 1e6:.2f}",
        )
    return table
