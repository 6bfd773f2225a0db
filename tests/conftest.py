# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Pytest configuration for Icarus tests.

This file adds the src directory to sys.path so that tests can import the
icarus package without installing it, and provides a fake maze authority.

NOTE: Do not create __init__.py files in test directories that have
the same name as source directories (e.g., tests/core/) to avoid
import conflicts.
"""

import sys
from pathlib import Path

import pytest

# Add src to path for tests to find the icarus package
_src_path = str(Path(__file__).resolve().parent.parent / "src")
if _src_path not in sys.path:
    sys.path.insert(0, _src_path)

from icarus.core.errors import TransportFailure  # noqa: E402
from icarus.core.transport import MazeTransport  # noqa: E402
from icarus.core.types import Coordinate, Move, MoveResult, ORIGIN, Survey  # noqa: E402


class FakeAuthority(MazeTransport):
    """In-memory maze authority.

    The maze is described by the passages between adjacent cells; every
    other edge is a wall. Surveys are derived from the agent's true position,
    so a test can check the engine against the real layout.
    """

    def __init__(self, passages, exit=None, fail_on_move=None):
        self.passages = {frozenset(p) for p in passages}
        self.exit = exit
        self.fail_on_move = fail_on_move
        self.position = ORIGIN
        self.moves = []
        self.positions = [ORIGIN]
        self.wakes = 0
        self.done_calls = 0
        self.closed = False

    @classmethod
    def from_paths(cls, *paths, exit=None, **kwargs):
        """Open a corridor along each sequence of moves walked from the start."""
        passages = []
        for path in paths:
            here = ORIGIN
            for move in path:
                there = here.transform(move)
                passages.append((here, there))
                here = there
        return cls(passages, exit=exit, **kwargs)

    def survey_at(self, cell):
        def walled(move):
            return frozenset((cell, cell.transform(move))) not in self.passages

        return Survey(
            top=walled(Move.UP),
            right=walled(Move.RIGHT),
            bottom=walled(Move.DOWN),
            left=walled(Move.LEFT),
        )

    def wake(self):
        self.wakes += 1
        self.position = ORIGIN
        return self.survey_at(self.position)

    def move(self, direction):
        move = Move.parse(direction)
        self.moves.append(move)
        if self.fail_on_move is not None and len(self.moves) == self.fail_on_move:
            raise TransportFailure("authority went away")
        target = self.position.transform(move)
        if frozenset((self.position, target)) not in self.passages:
            raise TransportFailure(f"walked into a wall going {move.value}")
        self.position = target
        self.positions.append(target)
        victory = target == self.exit
        return MoveResult(
            survey=self.survey_at(target),
            victory=victory,
            message="You escaped the labyrinth" if victory else None,
        )

    def done(self):
        self.done_calls += 1

    def close(self):
        self.closed = True


class ScriptedAuthority(MazeTransport):
    """Authority that replays a fixed list of move results, in order."""

    def __init__(self, start, results):
        self.start = start
        self.results = list(results)
        self.moves = []
        self.done_calls = 0

    def wake(self):
        return self.start

    def move(self, direction):
        self.moves.append(Move.parse(direction))
        return self.results.pop(0)

    def done(self):
        self.done_calls += 1


@pytest.fixture
def make_authority():
    return FakeAuthority


@pytest.fixture
def scripted_authority():
    return ScriptedAuthority


@pytest.fixture
def boxed_in():
    """A one-cell maze with walls on all four sides."""
    return FakeAuthority([])


@pytest.fixture
def origin():
    return Coordinate(0, 0)
