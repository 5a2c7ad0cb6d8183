"""
Command-line interface for the OneMax genetic algorithm.

Running ``onemax`` evolves 100 random 1000-bit genomes until one is all 1s.
It takes no arguments. Standard output gets one ``Current Best`` line per
generation and a three-line summary at the end; diagnostic logging goes to
standard error.
"""

from __future__ import annotations

import typer
from rich.console import Console

app = typer.Typer(
    name="onemax",
    help="""
OneMax genetic algorithm.

Evolves a population of 100 random 1000-bit strings until one of them
is all 1s, using assortative pairing, single-point crossover and
shuffle mutation.
""",
    add_completion=False,
)

# Plain text only: the report format is exact and a 1000-character genome
# must stay on one line.
console = Console(highlight=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False)


def _print_generation(snapshot) -> None:
    if not snapshot.solved:
        console.print(f"Current Best: {snapshot.best_fitness}", markup=False)


@app.command()
def run() -> None:
    """
    Evolve until an all-1s genome appears, then print it.

    Output:
        Current Best: <fitness>      (once per generation until solved)
        Best: <fitness>
        Individual: <genome bits>
        Completed in <n>ms
    """
    from onemax.config import get_default_config
    from onemax.core.genome import format_genome
    from onemax.solve import solve

    cfg = get_default_config()

    try:
        result = solve(cfg, on_generation=_print_generation)
    except KeyboardInterrupt:
        err_console.print("\nInterrupted by user", markup=False)
        raise typer.Exit(130)

    console.print(f"Best: {result.best_fitness}", markup=False)
    console.print(f"Individual: {format_genome(result.best_genome)}", markup=False)
    console.print(f"Completed in {result.elapsed_ms}ms", markup=False)


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
