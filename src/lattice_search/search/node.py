"""
Search tree nodes.

A node wraps a graph state together with the cost of the path that reached
it and a link to the node it was expanded from. Walking parent links back to
a root reconstructs the path. The same state can sit in many nodes, one per
path that reached it.
"""

import math
from typing import Any, Iterator, List, Optional

from ..types import AStarState, SearchState


class SearchNode:
    """
    Node in an implicit search tree.

    Implements the QueueElement contract: ``priority`` and ``position`` are
    written by the search and the heap; everything else is fixed at
    construction.

    Attributes:
        state: The wrapped graph state.
        parent: Node this one was expanded from (None for roots).
        priority: Queue priority, math.inf until the search sets it.
        position: Slot in the heap's storage, -1 when not enqueued.
    """

    __slots__ = ('state', 'parent', '_cost', 'priority', 'position')

    def __init__(self, state: SearchState, parent: Optional['SearchNode'] = None, cost: float = 0.0):
        """
        Args:
            state: Graph state to wrap.
            parent: Node whose expansion produced this one.
            cost: Accumulated path cost (parent's cost plus the edge cost).
        """
        self.state = state
        self.parent = parent
        self._cost = cost
        self.priority = math.inf
        self.position = -1

    @property
    def cost(self) -> float:
        """Accumulated cost of the path from the root to this node."""
        return self._cost

    def is_final(self) -> bool:
        return self.state.is_final()

    def _make_child(self, state: Any, cost: float) -> 'SearchNode':
        return SearchNode(state, self, cost)

    def expand(self) -> Iterator['SearchNode']:
        """
        Lazily generate one child node per outgoing edge.

        Each child is constructed only when the iterator is advanced, so
        abandoning the expansion early costs nothing for the rest.
        """
        for next_state, edge_cost in self.state.next_states():
            yield self._make_child(next_state, self._cost + edge_cost)

    next_nodes = expand

    @property
    def depth(self) -> int:
        """Number of edges between the root and this node."""
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth

    def path(self) -> List['SearchNode']:
        """Return the nodes from the root down to this node."""
        nodes = []
        node = self
        while node is not None:
            nodes.append(node)
            node = node.parent
        nodes.reverse()
        return nodes

    def states(self) -> List[Any]:
        """Return the wrapped states from the root down to this node."""
        return [node.state for node in self.path()]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.state!r}: {self._cost})"


class AStarNode(SearchNode):
    """SearchNode over an AStarState; children are AStarNodes too."""

    __slots__ = ()

    def completion_cost(self) -> float:
        """Heuristic estimate of the remaining cost, from the wrapped state."""
        return self.state.completion_cost()

    def _make_child(self, state: AStarState, cost: float) -> 'AStarNode':
        return AStarNode(state, self, cost)


__all__ = ['SearchNode', 'AStarNode']
