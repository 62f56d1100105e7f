"""Demonstration on a hard-coded five-vertex graph.

Run with ``python -m dijkstra_graph.demo``. Prints the graph dump and
the shortest path from A to E (cost 5 via A -> B -> C -> E).
"""

from __future__ import annotations

from typing import Dict, Optional

from .config import AppConfig, get_config
from .container import Container
from .logging_config import configure_logging
from .ports.graph import GraphStorePort
from .services import PathService

EXAMPLE_VERTICES = ("A", "B", "C", "D", "E")
EXAMPLE_EDGES = (
    ("A", "B", 1.0),
    ("A", "C", 3.0),
    ("B", "D", 2.0),
    ("B", "E", 8.0),
    ("B", "C", 1.0),
    ("C", "D", 1.0),
    ("D", "E", 4.0),
    ("E", "C", 3.0),
    ("C", "E", 3.0),
)


def build_example_graph(graph: GraphStorePort) -> Dict[str, int]:
    """Fill ``graph`` with the example vertices and edges.

    Returns:
        Mapping of vertex label to assigned identity.
    """
    ids = {label: graph.add_vertex(label) for label in EXAMPLE_VERTICES}
    for source, target, cost in EXAMPLE_EDGES:
        graph.add_edge(ids[source], ids[target], cost)
    return ids


def run_demo(config: Optional[AppConfig] = None) -> str:
    """Build the example graph, solve A -> E and return the printed text."""
    config = config or get_config()
    container = Container.create_default(config)

    graph: GraphStorePort = container.resolve(GraphStorePort)
    ids = build_example_graph(graph)

    service: PathService = container.resolve(PathService)
    result = service.resolve(graph, ids["A"], ids["E"])

    return f"{service.describe(graph)}\n{service.format_result(result)}"


def main() -> None:
    configure_logging()
    print(run_demo())


if __name__ == "__main__":
    main()
