"""
k-best path extraction on top of AStar.

Pulls the n cheapest answers out of a search and turns them into plain
records, e.g. for n-best decoding of a label lattice:

    answers = best_answers(final_lattice_nodes, n=5, capacity=length * num_states)
    for answer in answers:
        print(answer.rank, answer.cost, answer.states)

    df = answers_to_frame(answers)
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional

import pandas as pd

from .. import monitoring
from ..config import SearchConfig
from ..errors import SearchError
from ..types import AStarState
from .astar import AStar
from .node import AStarNode

logger = logging.getLogger(__name__)


@dataclass
class Answer:
    """
    One of the n best answers.

    Attributes:
        rank: 0 for the cheapest answer, 1 for the next, and so on.
        cost: Accumulated path cost.
        states: States along the path, from the initial state to the final one.
        node: The final search node (walk ``parent`` for the raw tree).
    """
    rank: int
    cost: float
    states: List[Any]
    node: AStarNode = field(repr=False)

    @property
    def length(self) -> int:
        """Number of edges on the path."""
        return len(self.states) - 1


def best_answers(
    initial_states: Iterable[AStarState],
    n: int,
    capacity: Optional[int] = None,
    max_expansions: Optional[int] = None,
    config: Optional[SearchConfig] = None,
) -> List[Answer]:
    """
    Return up to n cheapest answers reachable from the initial states.

    Fewer than n answers are returned when the search runs out.

    Args:
        initial_states: States to start from.
        n: Maximum number of answers.
        capacity: Heap capacity hint (overrides config).
        max_expansions: Expansion budget (overrides config).
        config: Base SearchConfig (default: SearchConfig()).

    Returns:
        Answers in non-decreasing cost order.

    Raises:
        SearchError: Reported to Sentry, then re-raised.
    """
    config = config or SearchConfig()
    search = AStar(
        initial_states,
        capacity=config.capacity if capacity is None else capacity,
        max_expansions=config.max_expansions if max_expansions is None else max_expansions,
        verbose=config.verbose,
    )

    answers: List[Answer] = []
    try:
        while len(answers) < n and search.has_next():
            node = search.next_answer()
            answers.append(Answer(
                rank=len(answers),
                cost=node.cost,
                states=node.states(),
                node=node,
            ))
    except SearchError as exc:
        logger.error("Search failed after %d answer(s): %s", len(answers), exc)
        monitoring.capture_exception(exc)
        raise

    logger.debug("Collected %d of %d requested answer(s): %s", len(answers), n, search.stats)
    return answers


def best_paths(initial_states: Iterable[AStarState], n: int, **kwargs) -> List[List[Any]]:
    """Like best_answers(), but return only the state paths."""
    return [answer.states for answer in best_answers(initial_states, n, **kwargs)]


def answers_to_frame(answers: List[Answer]) -> pd.DataFrame:
    """
    Tabulate answers for reporting.

    Returns:
        DataFrame with columns rank, cost, length, path (path is the list of
        states).
    """
    return pd.DataFrame(
        [
            {
                "rank": a.rank,
                "cost": a.cost,
                "length": a.length,
                "path": a.states,
            }
            for a in answers
        ],
        columns=["rank", "cost", "length", "path"],
    )


__all__ = ['Answer', 'best_answers', 'best_paths', 'answers_to_frame']
