"""
Lazy A* search enumerating final states in order of path cost.

AStar is an iterator over final SearchNodes. Each pull pops minimum-priority
nodes off a MinHeap, expanding non-final ones, until a final node comes off
the heap. With admissible heuristics the answers arrive in non-decreasing
cost order.

There is no closed set: a state reached along several paths is expanded
(and, if final, returned) once per path. That is what makes the search
enumerate the k best paths rather than only the best one. On graphs with
cycles or unboundedly many paths into a state the search may never stop;
callers search finite lattices / DAGs or set max_expansions.

Usage:
    search = AStar(initial_states, capacity=1024)

    for answer in itertools.islice(search, 10):
        print(answer.cost, answer.states())

Architecture:
    __init__:  one root AStarNode per initial state, priority = h(state)
    pull:      lookahead NOT_COMPUTED -> run _search() -> READY | EXHAUSTED
    _search(): extract-min; return it if final, else insert its children
               with priority = cost + h(child)
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from ..config import SearchConfig
from ..errors import UnsupportedMutationError
from ..queue.min_heap import MIN_CAPACITY, MinHeap
from ..types import AStarState
from .node import AStarNode

logger = logging.getLogger(__name__)

FRONTIER_EXHAUSTED = "frontier_exhausted"


class Lookahead(Enum):
    """State of the one-answer lookahead."""
    NOT_COMPUTED = "not_computed"
    READY = "ready"
    EXHAUSTED = "exhausted"


@dataclass
class SearchStats:
    """
    Counters for a running search.

    Attributes:
        nodes_created: Nodes constructed (roots and children).
        nodes_expanded: Non-final nodes whose children were generated.
        answers_found: Final nodes returned so far.
        max_frontier: Largest heap size observed.
    """
    nodes_created: int = 0
    nodes_expanded: int = 0
    answers_found: int = 0
    max_frontier: int = 0


class AStar:
    """
    Iterator over final AStarNodes in non-decreasing cost order.

    Single-threaded; one instance owns one heap. To cancel, stop pulling
    and drop the instance.
    """

    def __init__(
        self,
        initial_states: Iterable[AStarState],
        capacity: int = MIN_CAPACITY,
        max_expansions: Optional[int] = None,
        verbose: bool = False,
    ):
        """
        Seed the search with one root node per initial state.

        Args:
            initial_states: States to start from.
            capacity: Expected frontier size, used only to size the heap.
            max_expansions: Optional budget of node expansions, after which
                the search reports no further answers.
            verbose: Log progress at INFO instead of DEBUG.
        """
        self.max_expansions = max_expansions
        self.verbose = verbose
        self.stats = SearchStats()
        self.stopped_reason: Optional[str] = None

        self._heap = MinHeap(capacity)
        self._lookahead = Lookahead.NOT_COMPUTED
        self._answer: Optional[AStarNode] = None

        for state in initial_states:
            root = AStarNode(state)
            root.priority = root.completion_cost()
            self._push(root)

        self._log("Seeded search with %d root node(s)", self._heap.size())

    @classmethod
    def from_config(cls, initial_states: Iterable[AStarState], config: SearchConfig) -> 'AStar':
        """Create a search using the settings in ``config``."""
        return cls(
            initial_states,
            capacity=config.capacity,
            max_expansions=config.max_expansions,
            verbose=config.verbose,
        )

    # =========================================================================
    # PULL PROTOCOL
    # =========================================================================

    def has_next(self) -> bool:
        """Return True if another answer exists, searching for it if needed."""
        self._lookahead_answer()
        return self._lookahead is Lookahead.READY

    def next_answer(self) -> Optional[AStarNode]:
        """Return the next final node, or None when the search is exhausted."""
        self._lookahead_answer()
        if self._lookahead is not Lookahead.READY:
            return None
        answer = self._answer
        self._answer = None
        self._lookahead = Lookahead.NOT_COMPUTED
        return answer

    def __iter__(self) -> 'AStar':
        return self

    def __next__(self) -> AStarNode:
        answer = self.next_answer()
        if answer is None:
            raise StopIteration
        return answer

    def remove(self) -> None:
        """Answers cannot be removed from a search."""
        raise UnsupportedMutationError()

    def frontier_size(self) -> int:
        """Number of nodes waiting in the heap."""
        return self._heap.size()

    @property
    def lookahead(self) -> Lookahead:
        return self._lookahead

    # =========================================================================
    # SEARCH
    # =========================================================================

    def _lookahead_answer(self) -> None:
        if self._lookahead is not Lookahead.NOT_COMPUTED:
            return
        answer = self._search()
        if answer is None:
            self._lookahead = Lookahead.EXHAUSTED
        else:
            self._answer = answer
            self._lookahead = Lookahead.READY

    def _search(self) -> Optional[AStarNode]:
        heap = self._heap
        while heap.size() > 0:
            u = heap.extract_min()
            if u.is_final():
                self.stats.answers_found += 1
                logger.debug(
                    "Answer %d: %r (priority %s)",
                    self.stats.answers_found, u, u.priority,
                )
                return u

            if self.max_expansions is not None and self.stats.nodes_expanded >= self.max_expansions:
                self.stopped_reason = f"expansion_budget_exhausted ({self.max_expansions})"
                logger.warning(
                    "Stopping: %s, %d node(s) left on the frontier",
                    self.stopped_reason, heap.size() + 1,
                )
                return None

            self.stats.nodes_expanded += 1
            for v in u.expand():
                v.priority = v.cost + v.completion_cost()
                self._push(v)

        self.stopped_reason = FRONTIER_EXHAUSTED
        self._log("Frontier exhausted: %s", self.stats)
        return None

    def _push(self, node: AStarNode) -> None:
        self._heap.insert(node)
        self.stats.nodes_created += 1
        if self._heap.size() > self.stats.max_frontier:
            self.stats.max_frontier = self._heap.size()

    def _log(self, msg: str, *args) -> None:
        logger.log(logging.INFO if self.verbose else logging.DEBUG, msg, *args)

    def __repr__(self) -> str:
        return (
            f"AStar(frontier={self._heap.size()}, "
            f"lookahead={self._lookahead.value}, answers={self.stats.answers_found})"
        )


__all__ = ['AStar', 'Lookahead', 'SearchStats', 'FRONTIER_EXHAUSTED']
