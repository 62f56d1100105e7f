"""Dijkstra shortest-path solver adapter.

This adapter wraps the search in graph/dijkstra.py and adds:
- Logging of the request and its outcome
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...domain.models import PathResult
from ...graph.dijkstra import dijkstra
from ...ports.graph import GraphStorePort


@dataclass
class DijkstraSolver:
    """Shortest-path solver using Dijkstra's algorithm.

    This adapter implements ShortestPathSolverPort. It holds no search
    state; every call allocates its own tables.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(
        self,
        graph: GraphStorePort,
        from_id: int,
        to_id: int,
    ) -> PathResult:
        """Find the shortest path between two vertices.

        Args:
            graph: The store to search.
            from_id: Identity of the start vertex.
            to_id: Identity of the target vertex.

        Returns:
            PathResult with path and total cost. Unreachable targets
            yield an empty path and an infinite cost.

        Raises:
            VertexNotFoundError: If either identity is unknown.
        """
        self._logger.debug(
            "Solving shortest path",
            extra={"from_id": from_id, "to_id": to_id, "vertices": len(graph)},
        )

        result = dijkstra(graph, from_id, to_id)

        if result.is_reachable:
            self._logger.info(
                "Path found",
                extra={
                    "from_id": from_id,
                    "to_id": to_id,
                    "stops": result.num_stops,
                    "total_cost": result.total_cost,
                },
            )
        else:
            self._logger.warning(
                "Target unreachable",
                extra={"from_id": from_id, "to_id": to_id},
            )
        return result
