"""Result of a minimum-cost path query.

``PathResult`` carries the outcome of ``GraphStore.find_path``: whether a
path exists, its total metric, and the node and link sequences. The node
sequence includes the start node, so ``nodes[1:]`` names the same nodes as
the destinations of ``links``, in the same order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional, Tuple

from metricgraph.graph.link import LinkHandle
from metricgraph.graph.node import NodeHandle
from metricgraph.types.base import Cost


@dataclass(frozen=True)
class PathResult:
    """Outcome of a path query.

    Attributes:
        found: True if a simple path connects the endpoints.
        cost: Sum of link metrics along the path; None when not found.
        nodes: Nodes from start to destination inclusive; empty when not found.
        links: Links traversed in order; empty when not found or when the
            start is the destination.
    """

    found: bool
    cost: Optional[Cost] = None
    nodes: Tuple[NodeHandle[Any], ...] = ()
    links: Tuple[LinkHandle, ...] = ()

    @classmethod
    def not_found(cls) -> PathResult:
        """Return the result for an unreachable destination."""
        return cls(found=False)

    def __bool__(self) -> bool:
        return self.found

    def __len__(self) -> int:
        """Return the number of nodes on the path."""
        return len(self.nodes)

    def __iter__(self) -> Iterator[NodeHandle[Any]]:
        return iter(self.nodes)

    @property
    def src_node(self) -> Optional[NodeHandle[Any]]:
        """First node of the path, or None when not found."""
        return self.nodes[0] if self.nodes else None

    @property
    def dst_node(self) -> Optional[NodeHandle[Any]]:
        """Last node of the path, or None when not found."""
        return self.nodes[-1] if self.nodes else None

    @property
    def values(self) -> Tuple[Any, ...]:
        """Payloads of the path's nodes, in order."""
        return tuple(node.value for node in self.nodes)
