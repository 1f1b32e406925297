"""
Shared type definitions for the search core.

This module contains the structural contracts used across the queue and
search subpackages, kept here to avoid circular imports.

Types:
    QueueElement: Anything the priority queue can hold
    SearchState: A graph state with a terminal test and lazy neighbors
    AStarState: A SearchState with an admissible completion-cost estimate
"""

from typing import Any, Iterator, Protocol, Tuple, runtime_checkable


@runtime_checkable
class QueueElement(Protocol):
    """An element of a PriorityQueue.

    The queue owns both attributes while the element is enqueued:
    ``priority`` orders the queue and ``position`` is the element's slot in
    the queue's backing storage (-1 when not enqueued).
    """
    priority: float
    position: int


@runtime_checkable
class SearchState(Protocol):
    """A state of an implicitly defined graph."""

    def is_final(self) -> bool:
        ...

    def next_states(self) -> Iterator[Tuple[Any, float]]:
        """Lazily yield (neighbor_state, transition_cost) pairs.

        Costs must be non-negative. The iterator may be empty, finite or
        unbounded; the search pulls only what it expands.
        """
        ...


@runtime_checkable
class AStarState(SearchState, Protocol):
    """A SearchState with a remaining-cost estimate.

    completion_cost() must never overestimate the true minimal cost from this
    state to a final state, otherwise answers may come out of order.
    """

    def completion_cost(self) -> float:
        ...


__all__ = ['QueueElement', 'SearchState', 'AStarState']
