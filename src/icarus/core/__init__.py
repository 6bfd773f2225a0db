# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""Core maze traversal: types, engine, transport and runner."""

from .config import SolverConfig
from .engine import EngineStatus, EpisodeResult, MOVE_PRIORITY, TraversalEngine
from .errors import (
    EmptyHistoryError,
    EpisodeFinishedError,
    IcarusError,
    InvalidDirectionError,
    TransportFailure,
)
from .history import MoveHistory
from .runner import EpisodeRunner, RunSummary
from .transport import HTTPMazeClient, MazeTransport
from .types import (
    Coordinate,
    Move,
    MoveResult,
    ORIGIN,
    Reply,
    Survey,
    inverse,
    transform,
)

__all__ = [
    # Types
    "Coordinate",
    "Move",
    "MoveResult",
    "ORIGIN",
    "Reply",
    "Survey",
    "inverse",
    "transform",
    # Traversal
    "EngineStatus",
    "EpisodeResult",
    "MOVE_PRIORITY",
    "MoveHistory",
    "TraversalEngine",
    # Transport and running
    "EpisodeRunner",
    "HTTPMazeClient",
    "MazeTransport",
    "RunSummary",
    "SolverConfig",
    # Errors
    "EmptyHistoryError",
    "EpisodeFinishedError",
    "IcarusError",
    "InvalidDirectionError",
    "TransportFailure",
]
