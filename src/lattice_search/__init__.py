"""
lattice-search: lazy k-best A* search over implicit graphs.

Enumerates the final states of a (possibly infinite) graph in non-decreasing
order of path cost, one answer per pull, without a closed set, so the same
final state can come back once per distinct path.

Submodules:
    queue      - PriorityQueue contract and indexed binary min-heap
    search     - Search nodes, the AStar iterator, k-best helpers
    types      - Structural contracts (QueueElement, SearchState, AStarState)
    errors     - Exception types
    config     - SearchConfig (direct or from environment)
    monitoring - Sentry error monitoring

Usage:
    from lattice_search import AStar, CallableState
    from lattice_search.search import best_answers
"""

from .errors import (
    SearchError,
    EmptyQueueError,
    ElementNotPresentError,
    UnsupportedMutationError,
    ConfigurationError,
)

from .types import QueueElement, SearchState, AStarState

from .config import SearchConfig

from .queue import PriorityQueue, MinHeap

from .search import (
    SearchNode,
    AStarNode,
    AStar,
    Lookahead,
    SearchStats,
    CallableState,
    Answer,
    best_answers,
    best_paths,
)

__version__ = "0.1.0"

__all__ = [
    # Errors
    "SearchError",
    "EmptyQueueError",
    "ElementNotPresentError",
    "UnsupportedMutationError",
    "ConfigurationError",
    # Contracts
    "QueueElement",
    "SearchState",
    "AStarState",
    # Config
    "SearchConfig",
    # Queue
    "PriorityQueue",
    "MinHeap",
    # Search
    "SearchNode",
    "AStarNode",
    "AStar",
    "Lookahead",
    "SearchStats",
    "CallableState",
    "Answer",
    "best_answers",
    "best_paths",
]
