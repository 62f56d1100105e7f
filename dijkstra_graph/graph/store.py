"""In-memory graph store.

Vertices live in an arena indexed by identity and each vertex owns the
list of its outgoing edges. Identities are handed out sequentially from
0 and are never reused, so ``_vertices[i].id == i`` always holds.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List

from ..domain.errors import VertexNotFoundError
from ..domain.models import Edge, Vertex


@dataclass
class GraphStore:
    """Directed weighted graph addressed by vertex identity.

    This class implements GraphStorePort. The internal containers are
    private; callers read through ``get_vertex``, ``edges_from`` and
    ``vertices``.

    Example:
        graph = GraphStore()
        a = graph.add_vertex("A")
        b = graph.add_vertex("B")
        graph.add_edge(a, b, 1.0)
    """

    _vertices: List[Vertex] = field(default_factory=list, init=False, repr=False)
    _adjacency: Dict[Vertex, List[Edge]] = field(
        default_factory=dict, init=False, repr=False
    )
    _head: int = field(default=0, init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def add_vertex(self, value: Any) -> int:
        """Create a vertex with the next identity.

        Args:
            value: Payload carried by the vertex.

        Returns:
            The identity assigned to the new vertex.
        """
        vertex = Vertex(id=self._head, value=value)
        self._vertices.append(vertex)
        self._adjacency[vertex] = []
        self._head += 1

        self._logger.debug(
            "Vertex added",
            extra={"vertex_id": vertex.id, "value": repr(value)},
        )
        return vertex.id

    def get_vertex(self, vertex_id: int) -> Vertex:
        """Resolve an identity to its vertex.

        Args:
            vertex_id: Identity returned by ``add_vertex``.

        Returns:
            The matching Vertex.

        Raises:
            VertexNotFoundError: If no vertex has that identity.
        """
        if vertex_id not in self:
            raise VertexNotFoundError(
                f"There is no vertex with id {vertex_id}",
                vertex_id=vertex_id,
            )
        return self._vertices[vertex_id]

    def add_edge(self, from_id: int, to_id: int, cost: float) -> None:
        """Append a directed edge ``from_id -> to_id``.

        The cost is not validated. Negative or NaN costs make later
        searches return unspecified results.

        Args:
            from_id: Identity of the source vertex.
            to_id: Identity of the target vertex.
            cost: Traversal cost.

        Raises:
            VertexNotFoundError: If either endpoint is unknown.
        """
        target = self.get_vertex(to_id)
        source = self.get_vertex(from_id)
        self._adjacency[source].append(Edge(target=target, cost=cost))

        self._logger.debug(
            "Edge added",
            extra={"from_id": from_id, "to_id": to_id, "cost": cost},
        )

    def edges_from(self, vertex_id: int) -> tuple[Edge, ...]:
        """Return the outgoing edges of a vertex, in insertion order.

        Raises:
            VertexNotFoundError: If the vertex is unknown.
        """
        return tuple(self._adjacency[self.get_vertex(vertex_id)])

    def vertices(self) -> Iterator[Vertex]:
        """Iterate over all vertices."""
        return iter(self._vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return self.vertices()

    def __len__(self) -> int:
        return self._head

    def __contains__(self, vertex_id: object) -> bool:
        if isinstance(vertex_id, bool) or not isinstance(vertex_id, int):
            return False
        return 0 <= vertex_id < self._head
