"""Shared pytest fixtures and graph builders for lattice-search tests."""

import pytest


class GraphState:
    """Explicit graph vertex with a fixed heuristic, for building test graphs."""

    def __init__(self, name, final=False, h=0.0):
        self.name = name
        self.final = final
        self.h = h
        self.edges = []
        self.expansions = 0

    def connect(self, other, cost):
        self.edges.append((other, cost))
        return self

    def is_final(self):
        return self.final

    def completion_cost(self):
        return self.h

    def next_states(self):
        self.expansions += 1
        for edge in self.edges:
            yield edge

    def __repr__(self):
        return f"node {self.name}"


class Item:
    """Minimal QueueElement."""

    def __init__(self, priority):
        self.priority = priority
        self.position = -1

    def __repr__(self):
        return f"Item({self.priority})"


@pytest.fixture
def diamond():
    """A -> B (1), A -> C (5), B -> D (1), C -> D (1); D final, zero heuristic."""
    a = GraphState("A")
    b = GraphState("B")
    c = GraphState("C")
    d = GraphState("D", final=True)
    a.connect(b, 1).connect(c, 5)
    b.connect(d, 1)
    c.connect(d, 1)
    return {"A": a, "B": b, "C": c, "D": d}


@pytest.fixture
def small_lattice():
    """
    Two start states, two final states, six paths with distinct costs.

    Heuristics are exact remaining costs, so every answer's priority
    equals its cost.

    Returns:
        (initial_states, expected) where expected is a list of
        (cost, [state names from start to final]) in answer order.
    """
    node5 = GraphState(5, final=True)
    node6 = GraphState(6, final=True)
    node2 = GraphState(2, h=6).connect(node5, 6)
    node3 = GraphState(3, h=2).connect(node5, 4).connect(node6, 2)
    node4 = GraphState(4, h=6).connect(node6, 6)
    node0 = GraphState(0, h=4).connect(node2, 2).connect(node3, 2)
    node1 = GraphState(1, h=3).connect(node3, 1).connect(node4, 1)

    expected = [
        (3, [1, 3, 6]),
        (4, [0, 3, 6]),
        (5, [1, 3, 5]),
        (6, [0, 3, 5]),
        (7, [1, 4, 6]),
        (8, [0, 2, 5]),
    ]
    return [node0, node1], expected
