"""Top-level package for dijkstra-graph.

A small in-memory directed weighted graph and a Dijkstra search over
it. Build a GraphStore, then query it:

    graph = GraphStore()
    a = graph.add_vertex("A")
    b = graph.add_vertex("B")
    graph.add_edge(a, b, 2.0)
    result = shortest_path(graph, a, b)
"""

from .domain.errors import (
    ConfigurationError,
    GraphStoreError,
    NoRouteFoundError,
    VertexNotFoundError,
)
from .domain.models import Edge, PathResult, Vertex
from .graph.dijkstra import dijkstra
from .graph.store import GraphStore

shortest_path = dijkstra

__all__ = [
    "GraphStore",
    "shortest_path",
    "dijkstra",
    "Vertex",
    "Edge",
    "PathResult",
    "GraphStoreError",
    "VertexNotFoundError",
    "NoRouteFoundError",
    "ConfigurationError",
]
