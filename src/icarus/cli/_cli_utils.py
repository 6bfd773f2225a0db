# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""CLI utilities and helpers."""

import logging
import os

import typer
from rich.console import Console
from rich.traceback import install

# Shared console for user-facing output; logging goes to stderr.
console = Console()
install(show_locals=False)


def typer_factory(help: str) -> typer.Typer:
    """Build the icarus Typer app: rich help text, no locals in tracebacks."""
    return typer.Typer(
        help=help,
        add_completion=True,
        no_args_is_help=True,
        rich_markup_mode="rich",
        pretty_exceptions_show_locals=False,
    )


def configure_logging(verbose: bool = False) -> None:
    """Set up root logging; ICARUS_LOG_LEVEL wins over --verbose."""
    default = "DEBUG" if verbose else "INFO"
    log_level = os.environ.get("ICARUS_LOG_LEVEL", default).upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(levelname)s %(name)s - %(message)s",
    )
    logging.getLogger("urllib3").setLevel(logging.WARNING)
