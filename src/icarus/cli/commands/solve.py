# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Icarus solve command.

Connects to a running maze authority and solves as many mazes as requested,
one after another, then tells the authority it is done.
"""

from typing import Annotated, Optional

import typer
from pydantic import ValidationError
from rich.markup import escape
from rich.table import Table

from icarus.core.config import SolverConfig
from icarus.core.engine import EngineStatus, EpisodeResult
from icarus.core.errors import TransportFailure
from icarus.core.runner import EpisodeRunner, RunSummary
from icarus.core.transport import HTTPMazeClient

from .._cli_utils import configure_logging, console


def _print_episode(index: int, result: EpisodeResult) -> None:
    if result.status is EngineStatus.SOLVED:
        if result.message:
            console.print(f"[dim]{escape(result.message)}[/dim]", highlight=False)
        console.print(
            f"[bold green]Episode {index + 1}:[/bold green] "
            f"Solution with {result.solution_length} steps found"
        )
    elif result.status is EngineStatus.STUCK:
        console.print(
            f"[bold yellow]Episode {index + 1}:[/bold yellow] No solution found."
        )
    else:
        console.print(
            f"[bold red]Episode {index + 1}:[/bold red] "
            f"An error happened: {escape(str(result.error))}",
            highlight=False,
            soft_wrap=True,
        )


def _summary_table(summary: RunSummary) -> Table:
    table = Table(title="Icarus run")
    table.add_column("Episode", justify="right")
    table.add_column("Status")
    table.add_column("Steps", justify="right")
    table.add_column("Moves", justify="right")
    table.add_column("Backtracks", justify="right")
    table.add_column("Cells", justify="right")
    for i, result in enumerate(summary.results, start=1):
        steps = result.solution_length
        table.add_row(
            str(i),
            result.status.value,
            "-" if steps is None else str(steps),
            str(result.total_moves),
            str(result.backtrack_moves),
            str(result.cells_visited),
        )
    return table


def solve(
    times: Annotated[
        Optional[int],
        typer.Option(
            "--times", "-n", help="Number of mazes to solve (env: ICARUS_TIMES)"
        ),
    ] = None,
    host: Annotated[
        Optional[str],
        typer.Option("--host", help="Maze authority host (env: ICARUS_HOST)"),
    ] = None,
    port: Annotated[
        Optional[int],
        typer.Option("--port", "-p", help="Maze authority port (env: ICARUS_PORT)"),
    ] = None,
    base_url: Annotated[
        Optional[str],
        typer.Option(
            "--base-url",
            help="Full authority URL, overrides --host/--port (env: ICARUS_BASE_URL)",
        ),
    ] = None,
    timeout: Annotated[
        Optional[float],
        typer.Option(
            "--timeout", help="Seconds to wait for each move (env: ICARUS_TIMEOUT)"
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log every move")
    ] = False,
) -> None:
    """
    Start the labyrinth solver.

    Icarus can only see his own cell and whether it has a wall to the top,
    right, bottom and left. He explores depth-first and walks back along his
    breadcrumbs when he reaches a dead end.

    Examples:
        $ icarus solve --times 5 --port 9001
        $ ICARUS_BASE_URL=http://maze.local:8080 icarus solve
    """
    configure_logging(verbose)

    try:
        config = SolverConfig.from_env(
            times=times,
            host=host,
            port=port,
            base_url=base_url,
            request_timeout_s=timeout,
        )
        authority_url = config.authority_url
    except (ValidationError, ValueError) as e:
        console.print(
            f"[bold red]Invalid configuration:[/bold red] {escape(str(e))}",
            highlight=False,
            soft_wrap=True,
        )
        raise typer.Exit(2) from e

    console.print(
        f"Solving {config.times} times against {authority_url}", highlight=False
    )

    try:
        with HTTPMazeClient(config) as client:
            summary = EpisodeRunner(client, config, on_episode=_print_episode).run()
    except TransportFailure as e:
        console.print(
            f"[bold red]Error:[/bold red] {escape(str(e))}",
            highlight=False,
            soft_wrap=True,
        )
        raise typer.Exit(1) from e

    if summary.results:
        console.print(_summary_table(summary))
    console.print(
        f"Solved {summary.solved}, stuck {summary.stuck}, failed {summary.failed}"
    )
    if not summary.ok:
        raise typer.Exit(1)
