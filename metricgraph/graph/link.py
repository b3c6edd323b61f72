"""Directed weighted links and their caller-facing handles."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from metricgraph.types.base import Metric

if TYPE_CHECKING:
    from metricgraph.graph.node import NodeHandle
    from metricgraph.graph.store import GraphStore


@dataclass
class LinkRecord:
    """Storage for one link, owned by its source node's store.

    Endpoints are node ids in the owning store, never object references,
    so a removed node cannot be reached through a stale link.

    Attributes:
        metric: Integer cost of traversing the link.
        source: Id of the node that owns the link.
        destination: Id of the node the link points to.
    """

    metric: Metric
    source: int
    destination: int


@dataclass(frozen=True)
class LinkHandle:
    """Stable reference to a link in a GraphStore.

    Handles compare equal when they name the same link of the same store.
    Link ids are never reused, so a handle to a destroyed link stays dead
    and accessors raise ``InvalidHandleError`` instead of aliasing a newer
    link.
    """

    store: GraphStore[Any] = field(repr=False)
    link_id: int

    def is_alive(self) -> bool:
        """Return True while the link still exists in its store."""
        return self.store._has_link(self.link_id)

    @property
    def metric(self) -> Metric:
        """Integer metric of the link."""
        return self.store._link_record(self.link_id).metric

    @property
    def source(self) -> NodeHandle[Any]:
        """Handle of the node that owns this link."""
        return self.store._node_handle(self.store._link_record(self.link_id).source)

    @property
    def destination(self) -> NodeHandle[Any]:
        """Handle of the node this link points to."""
        return self.store._node_handle(
            self.store._link_record(self.link_id).destination
        )
