"""Tests for the PathService orchestration layer."""

from unittest.mock import MagicMock

import pytest

from dijkstra_graph.adapters.graph import DijkstraSolver
from dijkstra_graph.adapters.rendering import TextGraphRenderer
from dijkstra_graph.config import RenderConfig
from dijkstra_graph.domain.errors import NoRouteFoundError, VertexNotFoundError
from dijkstra_graph.domain.models import PathResult, Vertex
from dijkstra_graph.graph.store import GraphStore
from dijkstra_graph.services import PathService


@pytest.fixture
def graph():
    graph = GraphStore()
    a, b = graph.add_vertex("A"), graph.add_vertex("B")
    graph.add_edge(a, b, 2.0)
    return graph


@pytest.fixture
def service():
    return PathService(
        solver=DijkstraSolver(),
        renderer=TextGraphRenderer(RenderConfig()),
    )


def test_resolve_returns_result(service, graph):
    result = service.resolve(graph, 0, 1)

    assert result.values == ("A", "B")
    assert result.total_cost == 2.0


def test_resolve_raises_when_unreachable(service, graph):
    with pytest.raises(NoRouteFoundError) as exc_info:
        service.resolve(graph, 1, 0)

    assert (exc_info.value.from_id, exc_info.value.to_id) == (1, 0)


def test_resolve_propagates_unknown_vertex(service, graph):
    with pytest.raises(VertexNotFoundError):
        service.resolve(graph, 0, 5)


def test_resolve_safe_success(service, graph):
    result, error = service.resolve_safe(graph, 0, 1)

    assert error is None
    assert result is not None and result.total_cost == 2.0


def test_resolve_safe_unreachable(service, graph):
    result, error = service.resolve_safe(graph, 1, 0)

    assert result is None
    assert error == "No path found between 1 and 0"


def test_resolve_safe_unknown_vertex(service, graph):
    result, error = service.resolve_safe(graph, 7, 0)

    assert result is None
    assert error == "Error: There is no vertex with id 7"


def test_describe_and_format(service, graph):
    assert service.describe(graph) == "[A] -> [B (2)]\n[B] -> "
    assert (
        service.format_result(service.resolve(graph, 0, 1))
        == "The shortest path has value of 2 and leads via A -> B"
    )


def test_service_delegates_to_ports(graph):
    solver = MagicMock()
    solver.solve.return_value = PathResult(path=(Vertex(0, "A"),), total_cost=0.0)
    renderer = MagicMock()
    renderer.render_path.return_value = "rendered"

    service = PathService(solver=solver, renderer=renderer)
    result = service.resolve(graph, 0, 0)

    solver.solve.assert_called_once_with(graph, 0, 0)
    assert service.format_result(result) == "rendered"
    renderer.render_path.assert_called_once_with(result)
