"""Path service - Orchestrates path search and presentation.

The service binds a solver and a renderer together so front-ends (the
demo, tests) only deal with vertex identities and strings.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..domain.errors import NoRouteFoundError, VertexNotFoundError
from ..domain.models import PathResult
from ..ports.graph import GraphStorePort, ShortestPathSolverPort
from ..ports.rendering import GraphRendererPort


@dataclass
class PathService:
    """Main service for answering shortest-path queries.

    Attributes:
        solver: Computes shortest paths
        renderer: Renders graphs and results as text
    """

    solver: ShortestPathSolverPort
    renderer: GraphRendererPort

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def resolve(self, graph: GraphStorePort, from_id: int, to_id: int) -> PathResult:
        """Answer a shortest-path query.

        Args:
            graph: The store to search.
            from_id: Identity of the start vertex.
            to_id: Identity of the target vertex.

        Returns:
            PathResult with the computed path.

        Raises:
            VertexNotFoundError: If either identity is unknown.
            NoRouteFoundError: If no path exists between the vertices.
        """
        self._logger.info(
            "Starting path query",
            extra={"from_id": from_id, "to_id": to_id},
        )

        result = self.solver.solve(graph, from_id, to_id)

        if not result.is_reachable:
            raise NoRouteFoundError(
                f"No path from {from_id} to {to_id}",
                from_id=from_id,
                to_id=to_id,
            )
        return result

    def resolve_safe(
        self, graph: GraphStorePort, from_id: int, to_id: int
    ) -> tuple[Optional[PathResult], Optional[str]]:
        """Answer a query, returning an error message instead of raising.

        Returns:
            Tuple of (PathResult or None, error message or None).
        """
        try:
            return self.resolve(graph, from_id, to_id), None
        except VertexNotFoundError as e:
            return None, f"Error: {e.message}"
        except NoRouteFoundError as e:
            return None, f"No path found between {e.from_id} and {e.to_id}"

    def describe(self, graph: GraphStorePort) -> str:
        """Render the debug dump of a graph."""
        return self.renderer.render_graph(graph)

    def format_result(self, result: PathResult) -> str:
        """Render a result as a human-readable summary."""
        return self.renderer.render_path(result)
