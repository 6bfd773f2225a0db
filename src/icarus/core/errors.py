# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Exceptions raised while solving a maze.
"""


class IcarusError(Exception):
    """Base class for all Icarus errors."""

    pass


class InvalidDirectionError(IcarusError, ValueError):
    """Raised when a move outside up/down/left/right is requested."""

    def __init__(self, direction: object):
        self.direction = direction
        super().__init__(f"invalid direction: {direction!r}")


class EmptyHistoryError(IcarusError):
    """Raised when popping a move from an empty move history."""

    pass


class TransportFailure(IcarusError):
    """Raised when the maze authority is unreachable or its reply is unusable.

    Fatal to the current episode. Never retried.
    """

    pass


class EpisodeFinishedError(IcarusError):
    """Raised when stepping an engine that already reached a terminal state."""

    pass
