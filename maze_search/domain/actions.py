"""Grid positions and the fixed four-direction action set.

Coordinates follow screen convention: ``x`` grows eastward, ``y`` grows
southward. The declared order of :data:`ACTIONS` is significant: every
search routine enumerates successors in this order, so it decides ties
between equally good moves.
"""

from __future__ import annotations

from enum import Enum
from typing import TypeAlias

Position: TypeAlias = tuple[int, int]
"""Grid cell coordinate ``(x, y)``."""


class Action(Enum):
    """Unit displacement ``(dx, dy, degrees)``; there is no wait action."""

    NORTH = (0, -1, 90)
    WEST = (-1, 0, 180)
    SOUTH = (0, 1, 270)
    EAST = (1, 0, 360)

    def __init__(self, dx: int, dy: int, degrees: int) -> None:
        self.dx = dx
        self.dy = dy
        self.degrees = degrees

    def destination(self, position: Position) -> Position:
        """Return the cell reached by taking this action from ``position``."""
        return (position[0] + self.dx, position[1] + self.dy)

    @property
    def opposite(self) -> Action:
        return _OPPOSITES[self]


_OPPOSITES: dict[Action, Action] = {
    Action.NORTH: Action.SOUTH,
    Action.SOUTH: Action.NORTH,
    Action.WEST: Action.EAST,
    Action.EAST: Action.WEST,
}

ACTIONS: tuple[Action, ...] = (Action.NORTH, Action.WEST, Action.SOUTH, Action.EAST)
"""Shared action set in enumeration order."""


def manhattan_distance(a: Position, b: Position) -> int:
    """Manhattan distance between two cells."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def position_after(start: Position, actions: list[Action] | tuple[Action, ...]) -> Position:
    """Return the cell reached by applying ``actions`` in order from ``start``."""
    position = start
    for action in actions:
        position = action.destination(position)
    return position
