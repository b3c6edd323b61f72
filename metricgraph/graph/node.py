"""Graph nodes: payload storage and outgoing link management.

A node's outgoing links are kept in creation order. That order decides the
branch order of the path search and therefore which of several equal-cost
paths is returned.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic, List, Optional, TypeVar

from metricgraph.graph.link import LinkHandle
from metricgraph.types.base import Metric

if TYPE_CHECKING:
    from metricgraph.graph.store import GraphStore

T = TypeVar("T")


@dataclass
class NodeRecord(Generic[T]):
    """Storage for one node, owned by a GraphStore.

    Attributes:
        value: Opaque payload. Only equality is ever required of it.
        links: Ids of outgoing links in creation order.
    """

    value: T
    links: List[int] = field(default_factory=list)


@dataclass(frozen=True)
class NodeHandle(Generic[T]):
    """Stable reference to a node in a GraphStore.

    Handles are only created by ``GraphStore.add`` and by store lookups.
    Node ids are never reused; once the node is removed every operation on
    the handle raises ``InvalidHandleError``.
    """

    store: GraphStore[T] = field(repr=False)
    node_id: int

    def is_alive(self) -> bool:
        """Return True while the node is owned by its store."""
        return self.store._has_node(self.node_id)

    @property
    def value(self) -> T:
        """Payload of the node."""
        return self.store._node_record(self.node_id).value

    def set_value(self, value: T) -> None:
        """Replace the payload of the node."""
        self.store._node_record(self.node_id).value = value

    def links(self) -> List[LinkHandle]:
        """Return handles for the outgoing links in stored order."""
        record = self.store._node_record(self.node_id)
        return [LinkHandle(self.store, link_id) for link_id in record.links]

    def connect_to(self, destination: NodeHandle[T], metric: Metric) -> LinkHandle:
        """Create a link from this node to ``destination``.

        Links are appended after the existing ones. Parallel links to the
        same destination are allowed and are not merged.

        Args:
            destination: Live node of the same store. May be this node.
            metric: Integer cost of the link; negative values are allowed.

        Returns:
            Handle of the created link.

        Raises:
            InvalidHandleError: If this node or ``destination`` is not a live
                node of this store.
            TypeError: If ``metric`` is not an ``int``.
        """
        record = self.store._node_record(self.node_id)
        self.store._require_node(destination, "Destination")
        if isinstance(metric, bool) or not isinstance(metric, int):
            raise TypeError(
                f"Link metric must be an int, got {type(metric).__name__}."
            )
        link_id = self.store._register_link(self.node_id, destination.node_id, metric)
        record.links.append(link_id)
        return LinkHandle(self.store, link_id)

    def get_link_to(self, destination: NodeHandle[T]) -> Optional[LinkHandle]:
        """Return the first outgoing link to ``destination``, or None.

        A removed or foreign ``destination`` matches nothing.
        """
        record = self.store._node_record(self.node_id)
        if destination.store is not self.store:
            return None
        for link_id in record.links:
            if self.store._link_record(link_id).destination == destination.node_id:
                return LinkHandle(self.store, link_id)
        return None

    def unconnect_to(self, destination: NodeHandle[T]) -> bool:
        """Destroy every outgoing link to ``destination``.

        Returns:
            True if at least one link was destroyed, False otherwise.
        """
        record = self.store._node_record(self.node_id)
        if destination.store is not self.store:
            return False
        return self.store._drop_links_to(record, destination.node_id) > 0
