# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""Run several maze episodes back to back against one authority."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .config import SolverConfig
from .engine import EngineStatus, EpisodeResult, TraversalEngine
from .errors import TransportFailure
from .transport import MazeTransport

logger = logging.getLogger(__name__)


@dataclass
class RunSummary:
    """Results of every episode of a run, in order."""

    results: List[EpisodeResult] = field(default_factory=list)

    def _count(self, status: EngineStatus) -> int:
        return sum(1 for r in self.results if r.status is status)

    @property
    def solved(self) -> int:
        return self._count(EngineStatus.SOLVED)

    @property
    def stuck(self) -> int:
        return self._count(EngineStatus.STUCK)

    @property
    def failed(self) -> int:
        return self._count(EngineStatus.FAILED)

    @property
    def ok(self) -> bool:
        return self.failed == 0


class EpisodeRunner:
    """
    Solve ``config.times`` mazes one after another.

    Each episode gets a brand new TraversalEngine, so no visited cell or
    breadcrumb leaks from one maze into the next. A transport failure ends
    only the episode it happened in; it is recorded and the next episode
    starts. Once every episode has run, the authority is told ``done``.

    Args:
        transport: Connection to the maze authority.
        config: Run settings; only ``times`` is read here.
        on_episode: Optional callback invoked with (index, result) after
            each episode.
    """

    def __init__(
        self,
        transport: MazeTransport,
        config: Optional[SolverConfig] = None,
        on_episode: Optional[Callable[[int, EpisodeResult], None]] = None,
    ):
        self.transport = transport
        self.config = config or SolverConfig()
        self.on_episode = on_episode

    def run_episode(self) -> EpisodeResult:
        engine = TraversalEngine(self.transport)
        try:
            return engine.run()
        except TransportFailure:
            return engine.result()

    def run(self) -> RunSummary:
        summary = RunSummary()
        logger.info("Solving %d times", self.config.times)
        for index in range(self.config.times):
            logger.info("Starting episode %d/%d", index + 1, self.config.times)
            result = self.run_episode()
            summary.results.append(result)
            if self.on_episode is not None:
                self.on_episode(index, result)

        self.transport.done()
        return summary
