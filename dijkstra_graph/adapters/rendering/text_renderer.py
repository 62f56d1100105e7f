"""Plain-text renderer adapter.

Produces the debug dump of a graph store and a one-line summary of a
shortest-path result. By default integral costs print without a trailing
``.0`` and every other cost prints its shortest exact representation;
``RenderConfig.cost_format`` overrides this with a format spec.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from ...config import RenderConfig, get_config
from ...domain.models import PathResult
from ...ports.graph import GraphStorePort


@dataclass
class TextGraphRenderer:
    """Text renderer for graphs and path results.

    This adapter implements GraphRendererPort.

    Attributes:
        config: Render configuration (cost format, path separator)
    """

    config: RenderConfig = field(default_factory=lambda: get_config().render)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def render_graph(self, graph: GraphStorePort) -> str:
        """Render each vertex followed by its outgoing edges.

        One line per vertex, e.g. ``[A] -> [B (1)][C (3)]``. Edges keep
        their insertion order; vertices follow the store's iteration.

        Args:
            graph: The store to render.

        Returns:
            The rendered dump, lines separated by newlines.
        """
        lines: List[str] = []
        for vertex in graph.vertices():
            edges = "".join(
                f"[{edge.target.value} ({self._format_cost(edge.cost)})]"
                for edge in graph.edges_from(vertex.id)
            )
            lines.append(f"[{vertex.value}] -> {edges}")

        self._logger.debug("Graph rendered", extra={"vertices": len(lines)})
        return "\n".join(lines)

    def render_path(self, result: PathResult) -> str:
        """Render the total cost and the vertex sequence of a result.

        Args:
            result: The search result.

        Returns:
            A one-line summary.
        """
        if not result.is_reachable:
            return f"No path found (cost {self._format_cost(result.total_cost)})"

        path_str = self.config.path_separator.join(str(v) for v in result.values)
        return (
            f"The shortest path has value of {self._format_cost(result.total_cost)}"
            f" and leads via {path_str}"
        )

    def _format_cost(self, cost: float) -> str:
        if self.config.cost_format:
            return format(cost, self.config.cost_format)
        if float(cost).is_integer():
            return str(int(cost))
        return repr(float(cost))
