"""Graph ports - Abstractions for graph storage and path search.

These protocols define the contracts between the shortest-path engine
and the store it reads from. The engine only ever reads through
GraphStorePort; it never mutates the store.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterator, Protocol

if TYPE_CHECKING:
    from ..domain.models import Edge, PathResult, Vertex


class GraphStorePort(Protocol):
    """Port for an in-memory directed weighted graph.

    Implementation: graph/store.py

    Vertices are addressed by the integer identity returned from
    ``add_vertex``. Identities are contiguous, starting at 0.
    """

    def add_vertex(self, value: Any) -> int:
        """Insert a vertex and return its identity."""
        ...

    def get_vertex(self, vertex_id: int) -> Vertex:
        """Resolve an identity.

        Raises:
            VertexNotFoundError: If no vertex has that identity.
        """
        ...

    def add_edge(self, from_id: int, to_id: int, cost: float) -> None:
        """Append a directed edge to ``from_id``'s adjacency list.

        Raises:
            VertexNotFoundError: If either endpoint is unknown.
        """
        ...

    def edges_from(self, vertex_id: int) -> tuple[Edge, ...]:
        """Return the outgoing edges of a vertex in insertion order."""
        ...

    def vertices(self) -> Iterator[Vertex]:
        """Iterate over all vertices."""
        ...

    def __len__(self) -> int: ...


class ShortestPathSolverPort(Protocol):
    """Port for single-source, single-target shortest path search.

    Implementation: adapters/graph/dijkstra_solver.py
    """

    def solve(
        self,
        graph: GraphStorePort,
        from_id: int,
        to_id: int,
    ) -> PathResult:
        """Find the cheapest path between two vertices.

        Args:
            graph: The store to search.
            from_id: Identity of the start vertex.
            to_id: Identity of the target vertex.

        Returns:
            PathResult; unreachable targets yield an empty path and an
            infinite cost.
        """
        ...
