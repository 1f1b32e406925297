"""
Graph states built from plain functions.

CallableState bundles a value with the three callables the search needs,
so any graph that can be described by functions over its vertices can be
searched without writing a state class.

Usage:
    graph = {"a": [("b", 1.0), ("c", 5.0)], "b": [("d", 1.0)], "c": [("d", 1.0)], "d": []}

    start = CallableState(
        "a",
        final=lambda v: v == "d",
        neighbors=lambda v: graph[v],
    )
    search = AStar([start])
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Iterator, Tuple, Union


def _zero(value: Any) -> float:
    return 0.0


@dataclass(frozen=True)
class CallableState:
    """
    AStarState backed by callables over plain vertex values.

    Equality and hashing use ``value`` only, so states for the same vertex
    compare equal even when reached along different paths.

    Attributes:
        value: The vertex this state stands for.
        final: Predicate over values, or a constant bool.
        neighbors: Returns (neighbor_value, cost) pairs for a value.
        heuristic: Admissible remaining-cost estimate (default: zero,
            which turns the search into uniform-cost search).
    """
    value: Any
    final: Union[Callable[[Any], bool], bool] = field(compare=False, repr=False)
    neighbors: Callable[[Any], Iterable[Tuple[Any, float]]] = field(compare=False, repr=False)
    heuristic: Callable[[Any], float] = field(default=_zero, compare=False, repr=False)

    def is_final(self) -> bool:
        if callable(self.final):
            return bool(self.final(self.value))
        return bool(self.final)

    def completion_cost(self) -> float:
        return self.heuristic(self.value)

    def next_states(self) -> Iterator[Tuple['CallableState', float]]:
        for value, cost in self.neighbors(self.value):
            yield self._wrap(value), cost

    def _wrap(self, value: Any) -> 'CallableState':
        return CallableState(value, self.final, self.neighbors, self.heuristic)


__all__ = ['CallableState']
