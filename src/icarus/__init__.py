# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""Icarus: a blind depth-first maze solver driven by a remote maze authority."""

from importlib import metadata

from .core import EpisodeRunner, HTTPMazeClient, SolverConfig, TraversalEngine

__all__ = [
    "EpisodeRunner",
    "HTTPMazeClient",
    "SolverConfig",
    "TraversalEngine",
    "__version__",
]

try:
    __version__ = metadata.version("icarus-maze")
except metadata.PackageNotFoundError:  # pragma: no cover - source checkout
    __version__ = "0.0.0"
