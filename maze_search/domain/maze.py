"""Maze grid and text layouts.

A layout is a rectangular block of characters:

``%`` wall, ``.`` food, ``o`` pellet, `` `` (space) empty passage,
``P`` mover start, ``1``-``9`` adversary starts (the digit is the agent index).

Cells outside the rectangle are impassable, so a layout does not need a
wall border, although the built-in one has it.
"""

from __future__ import annotations

from dataclasses import dataclass

import networkx as nx
import numpy as np

from maze_search.domain.actions import ACTIONS, Position

WALL = "%"
FOOD = "."
PELLET = "o"
EMPTY = " "
MOVER_START = "P"

DEFAULT_LAYOUT = """\
%%%%%%%%%%%%%
%o....%....o%
%.%%%.%.%%%.%
%.....3.....%
%.%%.%%%.%%.%
%....1 2....%
%.%%.%%%.%%.%
%.....P.....%
%o%%%.%.%%%o%
%.....4.....%
%%%%%%%%%%%%%
"""
"""Built-in 13x11 maze with four pellets and four adversary starts."""


@dataclass(frozen=True, eq=False)
class Maze:
    """Static wall grid; ``walls[y, x]`` is True on impassable cells."""

    width: int
    height: int
    walls: np.ndarray

    def __post_init__(self) -> None:
        if self.walls.shape != (self.height, self.width):
            raise ValueError(
                f"walls shape {self.walls.shape} does not match {self.height}x{self.width}"
            )

    def in_bounds(self, position: Position) -> bool:
        x, y = position
        return 0 <= x < self.width and 0 <= y < self.height

    def is_passable(self, position: Position) -> bool:
        """Return True if an agent may stand on ``position``."""
        if not self.in_bounds(position):
            return False
        x, y = position
        return not bool(self.walls[y, x])

    def passable_cells(self) -> list[Position]:
        """All passable cells in row-major order."""
        ys, xs = np.nonzero(~self.walls)
        return [(int(x), int(y)) for y, x in zip(ys, xs, strict=True)]

    def to_graph(self) -> nx.Graph:
        """Return an undirected graph of passable cells joined by unit moves."""
        graph = nx.Graph()
        cells = self.passable_cells()
        graph.add_nodes_from(cells)
        for cell in cells:
            for action in ACTIONS:
                neighbor = action.destination(cell)
                if self.is_passable(neighbor):
                    graph.add_edge(cell, neighbor)
        return graph


@dataclass(frozen=True, eq=False)
class Layout:
    """Parsed layout: maze plus initial agent, food and pellet placement.

    ``starts[0]`` is the mover start; ``starts[i]`` for ``i >= 1`` is the
    start of adversary ``i``.
    """

    maze: Maze
    starts: tuple[Position, ...]
    food: frozenset[Position]
    pellets: frozenset[Position]

    @property
    def max_adversaries(self) -> int:
        return len(self.starts) - 1


def parse_layout(text: str) -> Layout:
    """Parse layout text into a :class:`Layout`.

    Raises :exc:`ValueError` for ragged rows, unknown characters, a missing
    or repeated mover start, repeated or non-contiguous adversary digits, and
    food, pellets or starts that the mover cannot reach.
    """
    rows = text.splitlines()
    # A row of spaces is open passage; only empty edge lines are dropped.
    while rows and not rows[0]:
        rows.pop(0)
    while rows and not rows[-1]:
        rows.pop()
    if not rows:
        raise ValueError("layout must not be empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("layout rows must all have the same length")
    height = len(rows)

    walls = np.zeros((height, width), dtype=bool)
    food: set[Position] = set()
    pellets: set[Position] = set()
    mover_start: Position | None = None
    adversary_starts: dict[int, Position] = {}

    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            cell = (x, y)
            if char == WALL:
                walls[y, x] = True
            elif char == FOOD:
                food.add(cell)
            elif char == PELLET:
                pellets.add(cell)
            elif char == EMPTY:
                continue
            elif char == MOVER_START:
                if mover_start is not None:
                    raise ValueError("layout must contain exactly one mover start 'P'")
                mover_start = cell
            elif char.isdigit() and char != "0":
                index = int(char)
                if index in adversary_starts:
                    raise ValueError(f"adversary start {index} appears more than once")
                adversary_starts[index] = cell
            else:
                raise ValueError(f"unknown layout character {char!r} at {cell}")

    if mover_start is None:
        raise ValueError("layout must contain exactly one mover start 'P'")
    expected = list(range(1, len(adversary_starts) + 1))
    if sorted(adversary_starts) != expected:
        raise ValueError("adversary starts must be numbered 1..N without gaps")

    maze = Maze(width=width, height=height, walls=walls)
    starts = (mover_start,) + tuple(adversary_starts[i] for i in expected)

    reachable = nx.node_connected_component(maze.to_graph(), mover_start)
    unreachable = (food | pellets | set(starts)) - reachable
    if unreachable:
        raise ValueError(f"layout has cells unreachable from the mover start: {sorted(unreachable)}")

    return Layout(maze=maze, starts=starts, food=frozenset(food), pellets=frozenset(pellets))
