# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""Tests for moves, coordinates and surveys."""

import pytest
from pydantic import ValidationError

from icarus.core.errors import IcarusError, InvalidDirectionError
from icarus.core.types import Coordinate, Move, ORIGIN, Reply, Survey, inverse, transform


class TestMove:
    """Tests for the Move enumeration."""

    def test_values_are_wire_tokens(self):
        assert [m.value for m in Move] == ["up", "down", "left", "right"]

    def test_is_string_enum(self):
        assert isinstance(Move.UP, str)
        assert Move.DOWN == "down"

    @pytest.mark.parametrize("move", list(Move))
    def test_inverse_is_involution(self, move):
        assert inverse(inverse(move)) is move
        assert move.inverse is not move

    def test_inverse_pairs(self):
        assert inverse("up") is Move.DOWN
        assert inverse("left") is Move.RIGHT

    def test_parse_accepts_case_and_whitespace(self):
        assert Move.parse(" Right ") is Move.RIGHT
        assert Move.parse(Move.LEFT) is Move.LEFT

    @pytest.mark.parametrize("bad", ["north", "", "upp", 0, None, ("up",)])
    def test_parse_rejects_unknown_direction(self, bad):
        with pytest.raises(InvalidDirectionError) as exc_info:
            Move.parse(bad)
        assert exc_info.value.direction == bad

    def test_invalid_direction_is_value_error(self):
        assert issubclass(InvalidDirectionError, ValueError)
        assert issubclass(InvalidDirectionError, IcarusError)


class TestCoordinate:
    """Tests for Coordinate and transform()."""

    def test_origin(self):
        assert ORIGIN == Coordinate(0, 0)

    def test_screen_orientation(self):
        assert transform(ORIGIN, Move.UP) == Coordinate(0, -1)
        assert transform(ORIGIN, Move.DOWN) == Coordinate(0, 1)
        assert transform(ORIGIN, Move.LEFT) == Coordinate(-1, 0)
        assert transform(ORIGIN, Move.RIGHT) == Coordinate(1, 0)

    @pytest.mark.parametrize("move", list(Move))
    @pytest.mark.parametrize("start", [Coordinate(0, 0), Coordinate(-3, 7), Coordinate(12, -5)])
    def test_transform_then_inverse_returns_home(self, start, move):
        assert transform(transform(start, move), inverse(move)) == start

    def test_transform_does_not_mutate(self):
        start = Coordinate(2, 2)
        start.transform("up")
        assert start == Coordinate(2, 2)

    def test_is_immutable(self):
        with pytest.raises(AttributeError):
            ORIGIN.x = 5

    def test_structural_equality_as_set_key(self):
        visited = {Coordinate(1, 2)}
        assert Coordinate(1, 2) in visited
        assert ORIGIN.transform("right").transform("down").transform("down") in visited

    def test_transform_rejects_unknown_direction(self):
        with pytest.raises(InvalidDirectionError):
            transform(ORIGIN, "sideways")


class TestSurvey:
    """Tests for Survey and the reply model."""

    def test_walls_map_to_moves(self):
        survey = Survey(top=True, right=False, bottom=True, left=False)
        assert survey.is_walled(Move.UP)
        assert survey.is_walled("down")
        assert not survey.is_walled(Move.LEFT)
        assert not survey.is_walled(Move.RIGHT)

    def test_defaults_to_open(self):
        assert not any(Survey().is_walled(m) for m in Move)

    def test_is_frozen(self):
        with pytest.raises(ValidationError):
            Survey().top = True

    def test_reply_parses_authority_json(self):
        reply = Reply.model_validate(
            {
                "survey": {"top": True, "right": False, "bottom": False, "left": True},
                "victory": True,
                "message": "Well done",
                "error": False,
            }
        )
        assert reply.survey == Survey(top=True, left=True)
        assert reply.victory is True
        assert reply.message == "Well done"

    def test_reply_fills_missing_fields(self):
        reply = Reply.model_validate({"survey": {"top": True}})
        assert reply.survey.top is True
        assert reply.survey.bottom is False
        assert reply.victory is False
        assert reply.error is False

    def test_reply_requires_survey(self):
        with pytest.raises(ValidationError):
            Reply.model_validate({})
        with pytest.raises(ValidationError):
            Reply.model_validate({"victory": True, "message": "no walls sent"})

    def test_reply_rejects_wrong_types(self):
        with pytest.raises(ValidationError):
            Reply.model_validate({"survey": {"top": "maybe"}})
