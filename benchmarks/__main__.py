"""Entry point for benchmarks CLI."""

from typing import Annotated

import typer

from . import benchs  # pyright: ignore[reportUnusedImport] # noqa: F401
from ._pipeline import run_pipeline, to_table
from ._registery import CONSOLE, selected

app = typer.Typer(help="Benchmarks for pyoview developments.")


@app.command(name="list")
def list_() -> None:
    """List the registered benchmarks."""
    for benchmark in selected(None):
        CONSOLE.print(f"{benchmark.category}.{benchmark.name}")


@app.command()
def run(
    *,
    only: Annotated[
        str | None,
        typer.Option("--only", help="Run only benchmarks whose name contains this."),
    ] = None,
) -> None:
    """Run benchmarks and print their median timings."""
    benchmarks = selected(only)
    if not benchmarks:
        CONSOLE.print(f"No benchmark matches {only!r}", style="bold red")
        raise typer.Exit(code=1)
    CONSOLE.print("Running benchmarks...", style="bold blue")
    CONSOLE.print(to_table(run_pipeline(benchmarks)))
    return CONSOLE.print("✓ Benchmarks complete", style="bold green")


if __name__ == "__main__":
    app()
