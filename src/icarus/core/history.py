# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""Breadcrumb stack of the forward moves taken from the start cell."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

from .errors import EmptyHistoryError
from .types import Coordinate, Move, ORIGIN


class MoveHistory:
    """LIFO record of forward moves.

    The history is the path from the start cell to the current cell, so its
    length when the exit is reached is the length of the solution.
    """

    def __init__(self, moves: Optional[Iterable[Move]] = None):
        self._moves: List[Move] = [Move.parse(m) for m in moves or ()]

    def __len__(self) -> int:
        return len(self._moves)

    def __iter__(self) -> Iterator[Move]:
        return iter(self._moves)

    def __bool__(self) -> bool:
        return bool(self._moves)

    def __repr__(self) -> str:
        return f"MoveHistory({[m.value for m in self._moves]!r})"

    def push(self, move: Move) -> None:
        self._moves.append(Move.parse(move))

    def pop(self) -> Move:
        """Remove and return the most recent move.

        Raises:
            EmptyHistoryError: If there is nothing left to undo.
        """
        if not self._moves:
            raise EmptyHistoryError("move history is empty")
        return self._moves.pop()

    def peek(self) -> Optional[Move]:
        return self._moves[-1] if self._moves else None

    def moves(self) -> List[Move]:
        """Copy of the moves, oldest first."""
        return list(self._moves)

    def replay(self, start: Coordinate = ORIGIN) -> Coordinate:
        """Return the coordinate reached by applying every move to ``start``."""
        position = start
        for move in self._moves:
            position = position.transform(move)
        return position
