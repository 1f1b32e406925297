"""
Best-first search over implicit graphs.

This module provides:
- Search tree nodes (node.py)
- Lazy A* answer enumeration (astar.py)
- Function-backed graph states (states.py)
- k-best answer extraction (kbest.py)
"""

from .node import (
    SearchNode,
    AStarNode,
)

from .astar import (
    AStar,
    Lookahead,
    SearchStats,
    FRONTIER_EXHAUSTED,
)

from .states import CallableState

from .kbest import (
    Answer,
    best_answers,
    best_paths,
    answers_to_frame,
)

__all__ = [
    # Nodes
    'SearchNode',
    'AStarNode',
    # A*
    'AStar',
    'Lookahead',
    'SearchStats',
    'FRONTIER_EXHAUSTED',
    # States
    'CallableState',
    # k-best
    'Answer',
    'best_answers',
    'best_paths',
    'answers_to_frame',
]
