"""Tests for grid positions and the action set."""

from __future__ import annotations

from maze_search.domain.actions import (
    ACTIONS,
    Action,
    manhattan_distance,
    position_after,
)


class TestAction:
    def test_declared_order(self) -> None:
        assert ACTIONS == (Action.NORTH, Action.WEST, Action.SOUTH, Action.EAST)

    def test_displacements_and_degrees(self) -> None:
        assert (Action.NORTH.dx, Action.NORTH.dy, Action.NORTH.degrees) == (0, -1, 90)
        assert (Action.WEST.dx, Action.WEST.dy, Action.WEST.degrees) == (-1, 0, 180)
        assert (Action.SOUTH.dx, Action.SOUTH.dy, Action.SOUTH.degrees) == (0, 1, 270)
        assert (Action.EAST.dx, Action.EAST.dy, Action.EAST.degrees) == (1, 0, 360)

    def test_destination(self) -> None:
        assert Action.NORTH.destination((3, 3)) == (3, 2)
        assert Action.EAST.destination((3, 3)) == (4, 3)

    def test_opposite_undoes_move(self) -> None:
        for action in ACTIONS:
            assert action.opposite.destination(action.destination((5, 5))) == (5, 5)
            assert action.opposite.opposite is action


def test_manhattan_distance_is_symmetric() -> None:
    assert manhattan_distance((0, 0), (3, 4)) == 7
    assert manhattan_distance((3, 4), (0, 0)) == 7
    assert manhattan_distance((2, 2), (2, 2)) == 0


def test_position_after_applies_actions_in_order() -> None:
    path = [Action.EAST, Action.EAST, Action.SOUTH]
    assert position_after((1, 1), path) == (3, 2)
    assert position_after((1, 1), []) == (1, 1)
