# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Depth-first traversal of an unknown maze.

The engine only ever knows the walls of the cell it stands in. It walks
forward into unvisited cells and, at a dead end, undoes its last forward move
by really walking back, so every backtrack step is a round trip to the
authority and the survey after it is the authority's, not a remembered one.

Example:
    >>> with HTTPMazeClient(SolverConfig(port=9001)) as transport:
    ...     result = TraversalEngine(transport).run()
    ...     print(result.status, result.solution_length)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Set

from .errors import (
    EmptyHistoryError,
    EpisodeFinishedError,
    IcarusError,
    TransportFailure,
)
from .history import MoveHistory
from .transport import MazeTransport
from .types import Coordinate, Move, MoveResult, ORIGIN, Survey

logger = logging.getLogger(__name__)

# Fixed tie-break so identical mazes are always walked the same way.
MOVE_PRIORITY = (Move.DOWN, Move.RIGHT, Move.UP, Move.LEFT)


class EngineStatus(str, Enum):
    """States of the traversal state machine."""

    EXPLORING = "exploring"
    BACKTRACKING = "backtracking"
    SOLVED = "solved"
    STUCK = "stuck"
    FAILED = "failed"

    @property
    def terminal(self) -> bool:
        return self in (EngineStatus.SOLVED, EngineStatus.STUCK, EngineStatus.FAILED)


@dataclass
class EpisodeResult:
    """What one episode achieved."""

    status: EngineStatus
    path: List[Move] = field(default_factory=list)
    forward_moves: int = 0
    backtrack_moves: int = 0
    cells_visited: int = 0
    message: Optional[str] = None
    error: Optional[str] = None

    @property
    def solved(self) -> bool:
        return self.status is EngineStatus.SOLVED

    @property
    def solution_length(self) -> Optional[int]:
        """Number of steps of the path found, or None when unsolved."""
        return len(self.path) if self.solved else None

    @property
    def total_moves(self) -> int:
        return self.forward_moves + self.backtrack_moves


class TraversalEngine:
    """State machine solving a single maze episode.

    An engine owns the visited set and move history of exactly one episode
    and must not be reused; build a new one per maze.

    Args:
        transport: Connection to the maze authority.
        survey: Survey of the start cell. Fetched with ``transport.wake()``
            when omitted.
    """

    def __init__(self, transport: MazeTransport, survey: Optional[Survey] = None):
        self.transport = transport
        self.position: Coordinate = ORIGIN
        self.history = MoveHistory()
        self.visited: Set[Coordinate] = {ORIGIN}
        self.status = EngineStatus.EXPLORING
        self.forward_moves = 0
        self.backtrack_moves = 0
        self.message: Optional[str] = None
        self.error: Optional[str] = None
        self._survey = survey

    @property
    def survey(self) -> Optional[Survey]:
        """Walls of the current cell, or None before the engine has woken up."""
        return self._survey

    def wake(self) -> Survey:
        """Fetch the start cell's survey from the authority unless already known.

        Raises:
            TransportFailure: If the authority failed; the engine is then
                left in the FAILED state.
        """
        if self._survey is None:
            try:
                self._survey = self.transport.wake()
            except TransportFailure as e:
                self._fail("waking up", e)
                raise
            logger.debug("Woke up at %s with %s", self.position, self._survey)
        return self._survey

    def next_move(self) -> Optional[Move]:
        """Return the first open move leading to an unvisited cell, if any."""
        survey = self._survey
        if survey is None:
            raise IcarusError("no survey of the current cell yet; call wake() first")
        for move in MOVE_PRIORITY:
            if survey.is_walled(move):
                continue
            if self.position.transform(move) in self.visited:
                continue
            return move
        return None

    def step(self) -> EngineStatus:
        """Advance by one move (forward or back) and return the new status.

        Raises:
            EpisodeFinishedError: If the episode already ended.
            TransportFailure: If the authority failed; the engine is then
                left in the FAILED state.
        """
        if self.status.terminal:
            raise EpisodeFinishedError(f"episode already ended as {self.status.value}")

        self.wake()
        move = self.next_move()
        if move is not None:
            result = self._execute(move)
            self.history.push(move)
            self.forward_moves += 1
            self.position = self.position.transform(move)
            self.visited.add(self.position)
            self.status = EngineStatus.EXPLORING
        else:
            try:
                undo = self.history.pop()
            except EmptyHistoryError:
                logger.warning(
                    "No solution found after visiting %d cells", len(self.visited)
                )
                self.status = EngineStatus.STUCK
                return self.status
            back = undo.inverse
            try:
                result = self._execute(back)
            except TransportFailure:
                # Still standing where the popped move led.
                self.history.push(undo)
                raise
            self.backtrack_moves += 1
            self.position = self.position.transform(back)
            self.status = EngineStatus.BACKTRACKING

        self._survey = result.survey
        if result.victory:
            self.message = result.message
            self.status = EngineStatus.SOLVED
            logger.info("Solution with %d steps found", len(self.history))
        return self.status

    def run(self) -> EpisodeResult:
        """Step until the maze is solved, proven stuck, or the transport fails.

        Raises:
            TransportFailure: Propagated from the transport; never retried.
        """
        while not self.status.terminal:
            self.step()
        return self.result()

    def result(self) -> EpisodeResult:
        return EpisodeResult(
            status=self.status,
            path=self.history.moves(),
            forward_moves=self.forward_moves,
            backtrack_moves=self.backtrack_moves,
            cells_visited=len(self.visited),
            message=self.message,
            error=self.error,
        )

    def _execute(self, move: Move) -> MoveResult:
        logger.debug("Moving %s from %s", move.value, self.position)
        try:
            return self.transport.move(move)
        except TransportFailure as e:
            self._fail(f"moving {move.value} from {self.position}", e)
            raise

    def _fail(self, action: str, error: TransportFailure) -> None:
        self.status = EngineStatus.FAILED
        self.error = str(error)
        logger.error("Transport failure while %s: %s", action, error)
