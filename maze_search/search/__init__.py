"""Search algorithms and the state protocols they depend on."""

from maze_search.search.bfs import BfsResult, BreadthFirstSearch, PersonalizedBFS
from maze_search.search.contracts import BasicState, ExtendedState, SearchAlgorithm
from maze_search.search.minimax import Minimax, MinimaxResult
from maze_search.search.reflex import Reflex

__all__ = [
    "BasicState",
    "BfsResult",
    "BreadthFirstSearch",
    "ExtendedState",
    "Minimax",
    "MinimaxResult",
    "PersonalizedBFS",
    "Reflex",
    "SearchAlgorithm",
]
