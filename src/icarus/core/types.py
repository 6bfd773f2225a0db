# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Value types shared by the traversal engine and the maze transport.

Coordinates use screen orientation: ``x`` grows to the right and ``y`` grows
downwards, so ``up`` is ``(0, -1)``. The ``top`` wall of a survey blocks
``up``, ``bottom`` blocks ``down``, ``left`` blocks ``left`` and ``right``
blocks ``right``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from .errors import InvalidDirectionError


class Move(str, Enum):
    """One step in a cardinal direction. Values are the authority's tokens."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def parse(cls, value: Union["Move", str]) -> "Move":
        """Return the Move named by ``value``.

        Raises:
            InvalidDirectionError: If ``value`` is not one of the four directions.
        """
        if isinstance(value, Move):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidDirectionError(value)

    @property
    def delta(self) -> Tuple[int, int]:
        return _DELTAS[self]

    @property
    def inverse(self) -> "Move":
        return _INVERSES[self]


_DELTAS = {
    Move.UP: (0, -1),
    Move.DOWN: (0, 1),
    Move.LEFT: (-1, 0),
    Move.RIGHT: (1, 0),
}

_INVERSES = {
    Move.UP: Move.DOWN,
    Move.DOWN: Move.UP,
    Move.LEFT: Move.RIGHT,
    Move.RIGHT: Move.LEFT,
}


@dataclass(frozen=True)
class Coordinate:
    """A cell position relative to the start cell ``(0, 0)``."""

    x: int = 0
    y: int = 0

    def transform(self, move: Union[Move, str]) -> "Coordinate":
        dx, dy = Move.parse(move).delta
        return Coordinate(self.x + dx, self.y + dy)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


ORIGIN = Coordinate(0, 0)


def transform(coordinate: Coordinate, move: Union[Move, str]) -> Coordinate:
    """Return the coordinate reached by applying ``move`` to ``coordinate``."""
    return coordinate.transform(move)


def inverse(move: Union[Move, str]) -> Move:
    """Return the move that undoes ``move``."""
    return Move.parse(move).inverse


class Survey(BaseModel):
    """Walls around the agent's current cell, as reported by the authority."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    top: bool = Field(default=False, description="Wall on the up edge")
    right: bool = Field(default=False, description="Wall on the right edge")
    bottom: bool = Field(default=False, description="Wall on the down edge")
    left: bool = Field(default=False, description="Wall on the left edge")

    def is_walled(self, move: Union[Move, str]) -> bool:
        move = Move.parse(move)
        if move is Move.UP:
            return self.top
        if move is Move.DOWN:
            return self.bottom
        if move is Move.LEFT:
            return self.left
        return self.right


class Reply(BaseModel):
    """JSON body returned by every authority endpoint."""

    model_config = ConfigDict(extra="ignore")

    survey: Survey
    victory: bool = False
    message: str = ""
    error: bool = False


@dataclass(frozen=True)
class MoveResult:
    """Outcome of one move: the new cell's survey and whether it is the exit."""

    survey: Survey
    victory: bool = False
    message: Optional[str] = None
