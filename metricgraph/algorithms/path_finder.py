"""Minimum-cost simple-path search.

The search is an exhaustive depth-first backtracking walk over simple paths,
not a priority-queue Dijkstra. Each query keeps one visited stack holding
the nodes of the candidate path being extended: a node is pushed before its
outgoing links are explored and popped once they are exhausted, so sibling
branches see exactly the ancestors of the current node.

At every node the links are tried in stored order. A completed sub-path
replaces the best one so far only when its cost is strictly lower, so among
equal-cost paths the first one discovered in link order wins.

No best-cost-per-node memo is kept, so the running time is exponential in
the worst case. Failure is ``None``, never a sentinel cost, so negative
metrics are ordinary values.

Notes:
    Two executions are provided. ``RECURSIVE`` uses one Python frame per
    node on the candidate path. ``ITERATIVE`` replays the same walk on an
    explicit frame stack for graphs deeper than the interpreter recursion
    limit. Both return identical routes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, List, NamedTuple, Optional, Sequence, Tuple

from metricgraph.config import SEARCH_CONFIG, PathSearchConfig
from metricgraph.logging import get_logger
from metricgraph.types.base import Cost, Metric, SearchStrategy

if TYPE_CHECKING:
    from metricgraph.graph.store import GraphStore

LOGGER = get_logger(__name__)

# (link_id, metric, destination_id)
OutLink = Tuple[int, Metric, int]


class Route(NamedTuple):
    """Best path found from some node to the destination.

    ``nodes`` and ``links`` exclude the node the route starts from.
    """

    cost: Cost
    nodes: Tuple[int, ...]
    links: Tuple[int, ...]


_ARRIVED = Route(0, (), ())


def _prefer(
    best: Optional[Route], link: OutLink, sub_route: Optional[Route]
) -> Optional[Route]:
    """Return the better of ``best`` and ``link`` followed by ``sub_route``."""
    if sub_route is None:
        return best
    link_id, metric, next_id = link
    cost = metric + sub_route.cost
    if best is not None and cost >= best.cost:
        return best
    return Route(cost, (next_id,) + sub_route.nodes, (link_id,) + sub_route.links)


@dataclass
class _Frame:
    """One node on the explicit stack of the iterative search."""

    node_id: int
    out_links: Sequence[OutLink]
    cursor: int = 0
    pending: Optional[OutLink] = None
    best: Optional[Route] = None


class PathFinder:
    """Search a GraphStore for minimum-cost simple paths.

    The finder holds no per-query state; the visited stack and the search
    frames live only for the duration of one ``search`` call.
    """

    def __init__(
        self, store: GraphStore[Any], config: Optional[PathSearchConfig] = None
    ) -> None:
        self._store = store
        self._config = config if config is not None else SEARCH_CONFIG

    def search(
        self,
        src_id: int,
        dst_id: int,
        strategy: Optional[SearchStrategy] = None,
    ) -> Optional[Route]:
        """Find the minimum-cost simple path from ``src_id`` to ``dst_id``.

        Args:
            src_id: Id of a live start node.
            dst_id: Id of a live destination node.
            strategy: Overrides the configured strategy for this query.

        Returns:
            The winning route, or None if no simple path exists.
        """
        resolved = self._config.resolve_strategy(len(self._store), strategy)

        LOGGER.debug(
            "Searching path %s -> %s (%s, %d nodes)",
            src_id,
            dst_id,
            resolved.name,
            len(self._store),
        )
        if resolved == SearchStrategy.RECURSIVE:
            route = self._search_recursive(src_id, dst_id, [])
        else:
            route = self._search_iterative(src_id, dst_id)

        if route is None:
            LOGGER.debug("No path %s -> %s", src_id, dst_id)
        else:
            LOGGER.debug(
                "Path %s -> %s found: cost=%s hops=%d",
                src_id,
                dst_id,
                route.cost,
                len(route.links),
            )
        return route

    def _search_recursive(
        self, current: int, destination: int, visited: List[int]
    ) -> Optional[Route]:
        if current == destination:
            return _ARRIVED

        visited.append(current)
        best: Optional[Route] = None
        for link in self._store._out_links(current):
            next_id = link[2]
            if next_id in visited:
                continue
            sub_route = self._search_recursive(next_id, destination, visited)
            best = _prefer(best, link, sub_route)
        visited.pop()
        return best

    def _search_iterative(self, start: int, destination: int) -> Optional[Route]:
        if start == destination:
            return _ARRIVED

        visited: List[int] = [start]
        frames: List[_Frame] = [_Frame(start, self._store._out_links(start))]
        while True:
            frame = frames[-1]
            if frame.cursor < len(frame.out_links):
                link = frame.out_links[frame.cursor]
                frame.cursor += 1
                next_id = link[2]
                if next_id in visited:
                    continue
                if next_id == destination:
                    frame.best = _prefer(frame.best, link, _ARRIVED)
                    continue
                frame.pending = link
                visited.append(next_id)
                frames.append(_Frame(next_id, self._store._out_links(next_id)))
                continue

            # Links exhausted: return this frame's result to its parent
            frames.pop()
            visited.pop()
            if not frames:
                return frame.best
            parent = frames[-1]
            if parent.pending is not None:
                parent.best = _prefer(parent.best, parent.pending, frame.best)
                parent.pending = None
