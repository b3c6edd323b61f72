"""Global pytest configuration and shared sample graphs.

Fixtures return ``(store, nodes)`` where ``nodes`` maps a node label to its
handle. Each node's payload is its label.
"""

from __future__ import annotations

from typing import Dict, Tuple

import pytest

from metricgraph import GraphStore, NodeHandle

SampleGraph = Tuple[GraphStore[str], Dict[str, NodeHandle[str]]]


def build_graph(labels: str, links) -> SampleGraph:
    """Build a store with one node per label and the given (src, dst, metric) links."""
    store: GraphStore[str] = GraphStore()
    nodes = {label: store.add(label) for label in labels}
    for src, dst, metric in links:
        nodes[src].connect_to(nodes[dst], metric)
    return store, nodes


@pytest.fixture
def square_with_diagonal() -> SampleGraph:
    # Metric:
    #      [1]        [5]
    #   A──────►B────────►D
    #   │       │         ▲
    #   │[4]    │[2]      │[1]
    #   │       ▼         │
    #   └──────►C─────────┘
    #
    # Best A->D is A-B-C-D (4); A-B-D costs 6, A-C-D costs 5.
    return build_graph(
        "ABCD",
        [
            ("A", "B", 1),
            ("A", "C", 4),
            ("B", "C", 2),
            ("B", "D", 5),
            ("C", "D", 1),
        ],
    )


@pytest.fixture
def equal_cost_diamond() -> SampleGraph:
    # Two equal-cost paths A-B-D and A-C-D; A->B is stored first.
    return build_graph(
        "ABCD",
        [
            ("A", "B", 1),
            ("A", "C", 1),
            ("B", "D", 1),
            ("C", "D", 1),
        ],
    )


@pytest.fixture
def bidirectional_ring() -> SampleGraph:
    # A<->B<->C<->D<->E<->A, metric 1 in each direction.
    links = []
    ring = "ABCDE"
    for i, src in enumerate(ring):
        dst = ring[(i + 1) % len(ring)]
        links.append((src, dst, 1))
        links.append((dst, src, 1))
    return build_graph(ring, links)
