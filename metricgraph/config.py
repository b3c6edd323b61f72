"""Configuration classes for metricgraph components."""

from dataclasses import dataclass
from typing import Optional

from metricgraph.types.base import SearchStrategy


@dataclass
class PathSearchConfig:
    """Configuration for the minimum-cost path search."""

    # Requested strategy; AUTO defers to recursion_node_limit
    strategy: SearchStrategy = SearchStrategy.AUTO

    # Largest graph (in nodes) searched recursively under AUTO.
    # Search depth is bounded by the node count, so this keeps AUTO well
    # below the default interpreter recursion limit.
    recursion_node_limit: int = 256

    def resolve_strategy(
        self, node_count: int, strategy: Optional[SearchStrategy] = None
    ) -> SearchStrategy:
        """Return the concrete strategy to use for a graph of ``node_count`` nodes.

        Args:
            node_count: Number of nodes in the searched graph.
            strategy: Per-query request; ``self.strategy`` when None.
        """
        requested = strategy if strategy is not None else self.strategy
        if requested != SearchStrategy.AUTO:
            return requested
        if node_count <= self.recursion_node_limit:
            return SearchStrategy.RECURSIVE
        return SearchStrategy.ITERATIVE


# Global configuration instance
SEARCH_CONFIG = PathSearchConfig()
