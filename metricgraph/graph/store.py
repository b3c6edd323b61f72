"""Graph container owning nodes and links.

`GraphStore` is the only owner of node and link storage. Callers hold
`NodeHandle`/`LinkHandle` values, which name records by integer ids that
are never reused. Removing a node destroys its outgoing links and every
incoming link from other nodes in the same operation, so no surviving link
can point at a removed node.

A store is not thread-safe. Concurrent mutation requires external locking.
"""

from __future__ import annotations

from typing import Any, Dict, Generic, Iterator, List, Optional, TypeVar

from metricgraph.algorithms.path_finder import OutLink, PathFinder, Route
from metricgraph.config import SEARCH_CONFIG, PathSearchConfig
from metricgraph.errors import InvalidHandleError
from metricgraph.graph.link import LinkHandle, LinkRecord
from metricgraph.graph.node import NodeHandle, NodeRecord
from metricgraph.logging import get_logger
from metricgraph.model.path import PathResult
from metricgraph.types.base import Metric, SearchStrategy

LOGGER = get_logger(__name__)

T = TypeVar("T")


class GraphStore(Generic[T]):
    """Directed weighted multigraph with a minimum-cost path query.

    Nodes are kept in insertion order, which is the order of
    ``get_by_value`` results and of iteration. Each node keeps its outgoing
    links in creation order, which decides tie-breaks in the path search.

    Attributes:
        config: Path search configuration used by this store.
    """

    def __init__(self, config: Optional[PathSearchConfig] = None) -> None:
        self.config = config if config is not None else SEARCH_CONFIG
        self._nodes: Dict[int, NodeRecord[T]] = {}
        self._links: Dict[int, LinkRecord] = {}
        # Ids only advance; removed nodes and links never give theirs back.
        self._next_node_id: int = 0
        self._next_link_id: int = 0
        self._finder = PathFinder(self, self.config)

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node: object) -> bool:
        return isinstance(node, NodeHandle) and self._owns(node)

    def __iter__(self) -> Iterator[NodeHandle[T]]:
        return iter(self.nodes())

    def __repr__(self) -> str:
        return f"GraphStore(nodes={len(self._nodes)}, links={len(self._links)})"

    #
    # Node management
    #
    def add(self, value: T) -> NodeHandle[T]:
        """Create a node holding ``value`` and return its handle."""
        node_id = self._next_node_id
        self._next_node_id += 1
        self._nodes[node_id] = NodeRecord(value)
        LOGGER.debug("Added node %d", node_id)
        return NodeHandle(self, node_id)

    def get_by_value(self, value: T) -> List[NodeHandle[T]]:
        """Return every node whose payload equals ``value``.

        Args:
            value: Payload to compare against with ``==``.

        Returns:
            Matching handles in insertion order; empty if none match.
        """
        found: List[NodeHandle[T]] = []
        self.get_by_value_into(found, value)
        return found

    def get_by_value_into(self, out: List[NodeHandle[T]], value: T) -> None:
        """Append every node whose payload equals ``value`` to ``out``."""
        for node_id, record in self._nodes.items():
            if record.value == value:
                out.append(NodeHandle(self, node_id))

    def remove(self, node: NodeHandle[T]) -> bool:
        """Remove a node together with all links that touch it.

        Incoming links from every other node are destroyed, and so are the
        node's own outgoing links.

        Args:
            node: Handle of the node to remove.

        Returns:
            True if the node belonged to this store and was removed, False for any
            other argument, in which case nothing changes.
        """
        if not isinstance(node, NodeHandle) or not self._owns(node):
            return False

        record = self._nodes.pop(node.node_id)
        incoming = 0
        for other in self._nodes.values():
            incoming += self._drop_links_to(other, node.node_id)
        for link_id in record.links:
            del self._links[link_id]
        outgoing = len(record.links)
        record.links.clear()

        LOGGER.debug(
            "Removed node %d (%d incoming, %d outgoing links destroyed)",
            node.node_id,
            incoming,
            outgoing,
        )
        return True

    def clear(self) -> None:
        """Destroy all nodes and links. Outstanding handles become dead."""
        for record in self._nodes.values():
            record.links.clear()
        LOGGER.debug(
            "Cleared store (%d nodes, %d links)", len(self._nodes), len(self._links)
        )
        self._nodes.clear()
        self._links.clear()

    def nodes(self) -> List[NodeHandle[T]]:
        """Return handles of all nodes in insertion order."""
        return [NodeHandle(self, node_id) for node_id in self._nodes]

    def links(self) -> List[LinkHandle]:
        """Return handles of all links in creation order."""
        return [LinkHandle(self, link_id) for link_id in self._links]

    def link_count(self) -> int:
        """Return the number of live links."""
        return len(self._links)

    #
    # Path queries
    #
    def find_path(
        self,
        node1: NodeHandle[T],
        node2: NodeHandle[T],
        strategy: Optional[SearchStrategy] = None,
    ) -> PathResult:
        """Find the minimum-cost simple path from ``node1`` to ``node2``.

        Among paths of equal cost, the first discovered in link order wins.
        A node is trivially reachable from itself at cost 0.

        Args:
            node1: Start node; must be a live node of this store.
            node2: Destination node; must be a live node of this store.
            strategy: Overrides ``config.strategy`` for this query.

        Returns:
            PathResult with ``found=False`` when no simple path exists.

        Raises:
            InvalidHandleError: If either endpoint is not a live node of
                this store.
        """
        self._require_node(node1, "Start")
        self._require_node(node2, "Destination")

        route = self._finder.search(node1.node_id, node2.node_id, strategy)
        if route is None:
            return PathResult.not_found()
        return self._to_result(node1, route)

    def dijkstra(self, node1: NodeHandle[T], node2: NodeHandle[T]) -> List[LinkHandle]:
        """Return the links of the minimum-cost path, or an empty list.

        An empty list is also returned when ``node1`` is ``node2``; use
        ``find_path`` or ``dijkstra_into`` to tell the two cases apart.
        """
        return list(self.find_path(node1, node2).links)

    def dijkstra_nodes(
        self, node1: NodeHandle[T], node2: NodeHandle[T]
    ) -> List[NodeHandle[T]]:
        """Return the nodes of the minimum-cost path including the start node.

        Returns an empty list when no path exists.
        """
        return list(self.find_path(node1, node2).nodes)

    def dijkstra_into(
        self,
        out: List[Any],
        node1: NodeHandle[T],
        node2: NodeHandle[T],
        links: bool = False,
    ) -> bool:
        """Append the minimum-cost path to ``out``.

        Args:
            out: List to append to; left untouched when no path exists.
            node1: Start node.
            node2: Destination node.
            links: Append link handles instead of node handles. The node form
                includes the start node.

        Returns:
            True if a path exists, False otherwise.
        """
        result = self.find_path(node1, node2)
        if not result.found:
            return False
        out.extend(result.links if links else result.nodes)
        return True

    #
    # Internal accessors used by handles and the path finder
    #
    def _owns(self, node: NodeHandle[Any]) -> bool:
        return node.store is self and node.node_id in self._nodes

    def _has_node(self, node_id: int) -> bool:
        return node_id in self._nodes

    def _has_link(self, link_id: int) -> bool:
        return link_id in self._links

    def _require_node(self, node: NodeHandle[Any], role: str = "Node") -> None:
        if node.store is not self:
            raise InvalidHandleError(
                f"{role} node {node.node_id} belongs to a different graph store."
            )
        if node.node_id not in self._nodes:
            raise InvalidHandleError(
                f"{role} node {node.node_id} has been removed from the graph store."
            )

    def _node_record(self, node_id: int) -> NodeRecord[T]:
        try:
            return self._nodes[node_id]
        except KeyError:
            raise InvalidHandleError(
                f"Node {node_id} has been removed from the graph store."
            ) from None

    def _node_handle(self, node_id: int) -> NodeHandle[T]:
        return NodeHandle(self, node_id)

    def _link_record(self, link_id: int) -> LinkRecord:
        try:
            return self._links[link_id]
        except KeyError:
            raise InvalidHandleError(
                f"Link {link_id} has been removed from the graph store."
            ) from None

    def _register_link(self, source: int, destination: int, metric: Metric) -> int:
        link_id = self._next_link_id
        self._next_link_id += 1
        self._links[link_id] = LinkRecord(metric, source, destination)
        LOGGER.debug(
            "Added link %d: %d -> %d (metric=%d)", link_id, source, destination, metric
        )
        return link_id

    def _drop_links_to(self, record: NodeRecord[T], destination: int) -> int:
        """Destroy every link of ``record`` pointing at ``destination``."""
        kept: List[int] = []
        for link_id in record.links:
            if self._links[link_id].destination == destination:
                del self._links[link_id]
            else:
                kept.append(link_id)
        removed = len(record.links) - len(kept)
        record.links[:] = kept
        return removed

    def _out_links(self, node_id: int) -> List[OutLink]:
        links = self._links
        return [
            (link_id, links[link_id].metric, links[link_id].destination)
            for link_id in self._nodes[node_id].links
        ]

    def _to_result(self, start: NodeHandle[T], route: Route) -> PathResult:
        nodes = (start,) + tuple(NodeHandle(self, node_id) for node_id in route.nodes)
        links = tuple(LinkHandle(self, link_id) for link_id in route.links)
        return PathResult(found=True, cost=route.cost, nodes=nodes, links=links)
