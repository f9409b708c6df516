"""Turn-based game state shared by the mover and its adversaries.

Two entry points change a state. ``successor_state`` returns a consequence-
complete copy and is what the search algorithms call; ``apply_action`` and
``finish_turn`` advance the single live state in place and report what
happened. Both routes run the same rules in :meth:`GameState._apply`.

Rule order for one action:

1. the agent moves;
2. the mover sharing a cell with an unconfused adversary loses, and nothing
   else is applied;
3. a mover move costs a step and eats the food or pellet on its cell; a
   pellet confuses every adversary and restarts the shared countdown;
4. every confused adversary on the mover's cell is captured, sent back to
   its start and sits out the rest of the round.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from maze_search.config.constants import CONFUSION_DURATION
from maze_search.domain.actions import ACTIONS, Action, Position
from maze_search.domain.maze import Layout, Maze
from maze_search.domain.scoring import ScoreCounter, game_score
from maze_search.domain.scoring import heuristic_evaluation as evaluate_heuristic


@dataclass(frozen=True)
class ActionOutcome:
    """What one applied action did to the live state."""

    agent_id: int
    action: Action
    position: Position
    food_eaten: bool = False
    pellet_eaten: bool = False
    captured: tuple[int, ...] = ()
    won: bool = False
    lost: bool = False


@dataclass(frozen=True)
class TurnSummary:
    """Result of closing a round with :meth:`GameState.finish_turn`."""

    round_index: int
    confusion_ended: bool
    won: bool


@dataclass
class GameState:
    """Positions, consumables, confusion and score of one game."""

    maze: Maze
    starts: dict[int, Position]
    positions: dict[int, Position]
    food: set[Position]
    pellets: set[Position]
    confused: dict[int, bool]
    mover_id: int = 0
    confusion_countdown: int = 0
    counter: ScoreCounter = field(default_factory=ScoreCounter)
    won: bool = False
    lost: bool = False
    sitting_out: set[int] = field(default_factory=set)
    round_index: int = 0

    @classmethod
    def create(cls, layout: Layout, n_adversaries: int, mover_id: int = 0) -> GameState:
        """Build the opening state of ``layout`` with ``n_adversaries`` adversaries.

        The mover takes the ``P`` start; adversaries take the numbered starts
        in increasing agent-index order.
        """
        if n_adversaries < 0:
            raise ValueError("n_adversaries must be >= 0")
        if n_adversaries > layout.max_adversaries:
            raise ValueError(
                f"layout has {layout.max_adversaries} adversary starts, "
                f"{n_adversaries} requested"
            )
        if not 0 <= mover_id <= n_adversaries:
            raise ValueError(f"mover_id must be in [0, {n_adversaries}]")

        adversary_ids = [i for i in range(n_adversaries + 1) if i != mover_id]
        starts = {mover_id: layout.starts[0]}
        for slot, agent_id in enumerate(adversary_ids, start=1):
            starts[agent_id] = layout.starts[slot]

        return cls(
            maze=layout.maze,
            starts=starts,
            positions=dict(starts),
            food=set(layout.food),
            pellets=set(layout.pellets),
            confused={agent_id: False for agent_id in adversary_ids},
            mover_id=mover_id,
        )

    def clone(self) -> GameState:
        """Deep enough copy: the maze is shared, every mutable field is copied."""
        return GameState(
            maze=self.maze,
            starts=self.starts,
            positions=dict(self.positions),
            food=set(self.food),
            pellets=set(self.pellets),
            confused=dict(self.confused),
            mover_id=self.mover_id,
            confusion_countdown=self.confusion_countdown,
            counter=self.counter.copy(),
            won=self.won,
            lost=self.lost,
            sitting_out=set(self.sitting_out),
            round_index=self.round_index,
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def position(self, agent_id: int) -> Position:
        return self.positions[agent_id]

    def adversary_ids(self) -> list[int]:
        return sorted(self.confused)

    def is_confused(self, agent_id: int) -> bool:
        return self.confused.get(agent_id, False)

    def is_win(self) -> bool:
        return self.won

    def is_lose(self) -> bool:
        return self.lost

    def is_terminal(self) -> bool:
        return self.won or self.lost

    def players_number(self) -> int:
        return len(self.positions)

    def food_remaining(self) -> int:
        return len(self.food)

    def score(self) -> float:
        return game_score(self.counter, self.won, self.lost)

    def heuristic_evaluation(self) -> float:
        adversaries = {i: self.positions[i] for i in self.confused}
        return evaluate_heuristic(
            self.positions[self.mover_id], self.food, adversaries, self.confused
        )

    def legal_actions_as_map(self, position: Position) -> dict[Position, Action]:
        """Passable destinations from ``position`` in action-set order."""
        moves: dict[Position, Action] = {}
        for action in ACTIONS:
            destination = action.destination(position)
            if self.maze.is_passable(destination):
                moves[destination] = action
        return moves

    def legal_actions_as_map_no_kins(
        self, position: Position, agent_id: int
    ) -> dict[Position, Action]:
        """Like :meth:`legal_actions_as_map` minus cells held by other adversaries.

        The mover has no kin, so its map is the plain one.
        """
        if agent_id == self.mover_id:
            return self.legal_actions_as_map(position)
        kin_cells = {
            self.positions[other] for other in self.confused if other != agent_id
        }
        return {
            destination: action
            for destination, action in self.legal_actions_as_map(position).items()
            if destination not in kin_cells
        }

    def legal_actions(self, agent_id: int) -> list[Action]:
        return list(self.legal_actions_as_map(self.positions[agent_id]).values())

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def successor_state(self, agent_id: int, action: Action) -> GameState:
        """Return a new state with ``action`` applied; ``self`` is unchanged."""
        successor = self.clone()
        if not successor.is_terminal():
            successor._apply(agent_id, action)
        return successor

    def apply_action(self, agent_id: int, action: Action) -> ActionOutcome:
        """Apply ``action`` to this live state and report its consequences.

        Raises :exc:`ValueError` when the destination is impassable. On a
        terminal state nothing is applied.
        """
        current = self.positions[agent_id]
        destination = action.destination(current)
        if not self.maze.is_passable(destination):
            raise ValueError(f"agent {agent_id} cannot move {action.name} from {current}")
        if self.is_terminal():
            return ActionOutcome(
                agent_id=agent_id,
                action=action,
                position=current,
                won=self.won,
                lost=self.lost,
            )
        food_before = self.counter.food_eaten
        pellets_before = self.counter.pellets_eaten
        captured = self._apply(agent_id, action)
        return ActionOutcome(
            agent_id=agent_id,
            action=action,
            position=self.positions[agent_id],
            food_eaten=self.counter.food_eaten > food_before,
            pellet_eaten=self.counter.pellets_eaten > pellets_before,
            captured=captured,
            won=self.won,
            lost=self.lost,
        )

    def finish_turn(self) -> TurnSummary:
        """Close the current round: confusion countdown, win check, sit-outs."""
        if self.confusion_countdown > 0:
            self.confusion_countdown -= 1
        confusion_ended = False
        if self.confusion_countdown == 0:
            confusion_ended = any(self.confused.values())
            for agent_id in self.confused:
                self.confused[agent_id] = False

        if not self.food and not self.lost:
            self.won = True

        self.sitting_out.clear()
        self.round_index += 1
        return TurnSummary(
            round_index=self.round_index,
            confusion_ended=confusion_ended,
            won=self.won,
        )

    def _apply(self, agent_id: int, action: Action) -> tuple[int, ...]:
        """Run the action rules in place; return the captured adversary ids."""
        self.positions[agent_id] = action.destination(self.positions[agent_id])
        mover_cell = self.positions[self.mover_id]

        if any(
            not confused and self.positions[other] == mover_cell
            for other, confused in self.confused.items()
        ):
            self.lost = True
            return ()

        if agent_id == self.mover_id:
            self.counter.steps += 1
            if mover_cell in self.food:
                self.food.remove(mover_cell)
                self.counter.food_eaten += 1
            if mover_cell in self.pellets:
                self.pellets.remove(mover_cell)
                self.counter.pellets_eaten += 1
                for other in self.confused:
                    self.confused[other] = True
                self.confusion_countdown = CONFUSION_DURATION

        captured = tuple(
            other
            for other, confused in sorted(self.confused.items())
            if confused and self.positions[other] == mover_cell
        )
        for other in captured:
            self.counter.captures += 1
            self.confused[other] = False
            self.positions[other] = self.starts[other]
            self.sitting_out.add(other)
        return captured
