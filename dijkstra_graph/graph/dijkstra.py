"""Shortest-path computation using Dijkstra's algorithm.

The frontier is a ``heapq`` min-heap of PriorityEntry items. Improved
distances are pushed again instead of being decreased in place; entries
superseded that way are discarded when popped. The search stops as soon
as the target vertex is popped.
"""

from __future__ import annotations

import heapq
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional

from ..domain.models import PathResult, Vertex

if TYPE_CHECKING:
    from ..ports.graph import GraphStorePort


@dataclass(frozen=True, slots=True)
class PriorityEntry:
    """Frontier entry ordered by distance alone.

    Smaller distance means higher priority. The vertex never takes part
    in the comparison, so ties are left to the heap. NaN distances make
    the ordering undefined.
    """

    distance: float
    vertex: Vertex

    def __lt__(self, other: PriorityEntry) -> bool:
        # heapq pops the smallest entry first, so "less than" means "served
        # earlier": the shorter distance wins
        return self.distance < other.distance


def dijkstra(graph: GraphStorePort, from_id: int, to_id: int) -> PathResult:
    """Compute the shortest path between two vertices.

    Parameters
    ----------
    graph:
        Store to search. It is only read.
    from_id:
        Identity of the start vertex.
    to_id:
        Identity of the target vertex.

    Returns
    -------
    PathResult
        Vertices from start to end (inclusive) and the total cost.
        If no path exists, returns an empty path with an infinite cost.

    Raises
    ------
    VertexNotFoundError
        If either identity is unknown. Raised before any search work.
    """
    start = graph.get_vertex(from_id)
    end = graph.get_vertex(to_id)

    size = len(graph)
    distances: List[float] = [math.inf] * size
    previous: List[Optional[Vertex]] = [None] * size
    finalized: List[bool] = [False] * size
    distances[start.id] = 0.0

    heap: List[PriorityEntry] = [PriorityEntry(0.0, start)]

    while heap:
        entry = heapq.heappop(heap)
        current = entry.vertex
        finalized[current.id] = True

        # stale entry
        if entry.distance > distances[current.id]:
            continue

        for edge in graph.edges_from(current.id):
            target = edge.target
            if finalized[target.id]:
                continue

            candidate = distances[current.id] + edge.cost
            if candidate < distances[target.id]:
                distances[target.id] = candidate
                previous[target.id] = current
                heapq.heappush(heap, PriorityEntry(candidate, target))

        if current.id == end.id:
            return PathResult(
                path=_reconstruct(previous, start, end),
                total_cost=distances[end.id],
            )

    return PathResult.unreachable()


def _reconstruct(
    previous: List[Optional[Vertex]], start: Vertex, end: Vertex
) -> tuple[Vertex, ...]:
    path: List[Vertex] = []
    current: Optional[Vertex] = end
    while current is not None:
        path.append(current)
        if current.id == start.id:
            break
        current = previous[current.id]

    path.reverse()
    return tuple(path)
