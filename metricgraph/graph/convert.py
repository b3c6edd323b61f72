"""Conversion utilities between GraphStore and NetworkX graphs.

``to_networkx`` exports a store as a ``networkx.MultiDiGraph`` keyed by node
and link ids, which lets NetworkX algorithms inspect the topology.
``from_networkx`` builds a store from any NetworkX directed graph.
"""

from __future__ import annotations

from typing import Any, Dict, Hashable, Optional, Tuple

import networkx as nx

from metricgraph.config import PathSearchConfig
from metricgraph.graph.node import NodeHandle
from metricgraph.graph.store import GraphStore


def to_networkx(store: GraphStore[Any]) -> nx.MultiDiGraph:
    """Convert a GraphStore to a NetworkX MultiDiGraph.

    Nodes are keyed by node id and carry the payload in ``value``. Each link
    becomes one edge keyed by link id with its weight in ``metric``. Nodes and
    each node's edges are added in store order.

    Args:
        store: The store to export.

    Returns:
        A new MultiDiGraph; later changes to the store are not reflected.
    """
    nx_graph = nx.MultiDiGraph()
    for node in store.nodes():
        nx_graph.add_node(node.node_id, value=node.value)
    for node in store.nodes():
        for link in node.links():
            nx_graph.add_edge(
                node.node_id,
                link.destination.node_id,
                key=link.link_id,
                metric=link.metric,
            )
    return nx_graph


def from_networkx(
    nx_graph: nx.DiGraph,
    metric_attr: str = "metric",
    default_metric: int = 1,
    config: Optional[PathSearchConfig] = None,
) -> Tuple[GraphStore[Hashable], Dict[Hashable, NodeHandle[Hashable]]]:
    """Build a GraphStore from a NetworkX directed graph.

    Each NetworkX node becomes a store node whose payload is the node key.
    Links are created per source node in NetworkX adjacency order, so the
    branch order of the path search follows that order.

    Args:
        nx_graph: A ``DiGraph`` or ``MultiDiGraph``.
        metric_attr: Edge attribute holding the integer metric. Values are
            passed through unchanged, so non-integers are rejected.
        default_metric: Metric for edges without ``metric_attr``.
        config: Path search configuration for the new store.

    Returns:
        The new store and a mapping of NetworkX node key to node handle.

    Raises:
        ValueError: If ``nx_graph`` is undirected.
        TypeError: If an edge metric is not an ``int``.
    """
    if not nx_graph.is_directed():
        raise ValueError("Only directed NetworkX graphs can be converted.")

    store: GraphStore[Hashable] = GraphStore(config)
    handles: Dict[Hashable, NodeHandle[Hashable]] = {}
    for key in nx_graph.nodes:
        handles[key] = store.add(key)
    for u, v, data in nx_graph.edges(data=True):
        handles[u].connect_to(handles[v], data.get(metric_attr, default_metric))
    return store, handles
