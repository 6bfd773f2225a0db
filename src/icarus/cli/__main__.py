# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""CLI entry point for Icarus."""

from ._cli_utils import typer_factory
from .commands.solve import solve


app = typer_factory(
    help=(
        "Icarus wakes up in the middle of a labyrinth. He only sees the walls "
        "of his own cell, takes one step, and looks again."
    )
)

app.command(name="solve")(solve)
# 'client' is an alias of 'solve'.
app.command(name="client", hidden=True)(solve)


def main() -> None:
    """Main entry point for the Icarus CLI."""
    app()


if __name__ == "__main__":
    main()
