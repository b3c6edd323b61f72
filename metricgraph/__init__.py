"""metricgraph: in-memory directed weighted graphs with minimum-cost paths.

metricgraph stores nodes carrying arbitrary payloads and integer-weighted
directed links between them, and finds the minimum-cost simple path between
two nodes with an exhaustive backtracking search.

Primary API:
    create() - Create an empty GraphStore
    GraphStore - Node/link owner with lookup, removal and path queries
    NodeHandle, LinkHandle - Stable references handed out by a store
    PathResult - Outcome of GraphStore.find_path()

Example:
    from metricgraph import create

    graph = create()
    a, b, c = graph.add("A"), graph.add("B"), graph.add("C")
    a.connect_to(b, 1)
    b.connect_to(c, 2)
    a.connect_to(c, 5)

    result = graph.find_path(a, c)
    assert result.values == ("A", "B", "C") and result.cost == 3
"""

from __future__ import annotations

from typing import Any, Optional

from metricgraph import logging
from metricgraph._version import __version__
from metricgraph.config import SEARCH_CONFIG, PathSearchConfig
from metricgraph.errors import InvalidHandleError, MetricGraphError
from metricgraph.graph.convert import from_networkx, to_networkx
from metricgraph.graph.link import LinkHandle
from metricgraph.graph.node import NodeHandle
from metricgraph.graph.store import GraphStore
from metricgraph.model.path import PathResult
from metricgraph.types.base import Cost, Metric, SearchStrategy


def create(config: Optional[PathSearchConfig] = None) -> GraphStore[Any]:
    """Create an empty GraphStore.

    Args:
        config: Path search configuration; defaults to ``SEARCH_CONFIG``.
    """
    return GraphStore(config)


__all__ = [
    # Version
    "__version__",
    # Graph
    "create",
    "GraphStore",
    "NodeHandle",
    "LinkHandle",
    "PathResult",
    # Types
    "Cost",
    "Metric",
    "SearchStrategy",
    # Configuration
    "PathSearchConfig",
    "SEARCH_CONFIG",
    # Errors
    "MetricGraphError",
    "InvalidHandleError",
    # Library integrations (NetworkX)
    "from_networkx",
    "to_networkx",
    # Utilities
    "logging",
]
