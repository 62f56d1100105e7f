"""Tests for the Dijkstra solver adapter."""

import logging
import math

import pytest

from dijkstra_graph.adapters.graph import DijkstraSolver
from dijkstra_graph.domain.errors import VertexNotFoundError
from dijkstra_graph.graph.store import GraphStore


class TestDijkstraSolver:
    """Test suite for DijkstraSolver."""

    @pytest.fixture
    def graph(self):
        graph = GraphStore()
        a, b, c = (graph.add_vertex(label) for label in "ABC")
        graph.add_edge(a, b, 1.5)
        graph.add_edge(b, c, 2.0)
        graph.add_vertex("lonely")
        return graph

    @pytest.fixture
    def solver(self):
        return DijkstraSolver()

    def test_solve_returns_path(self, solver, graph):
        result = solver.solve(graph, 0, 2)

        assert result.values == ("A", "B", "C")
        assert result.total_cost == 3.5

    def test_solve_unreachable_is_not_an_error(self, solver, graph):
        result = solver.solve(graph, 0, 3)

        assert result.is_empty
        assert math.isinf(result.total_cost)

    def test_solve_unknown_vertex_propagates(self, solver, graph):
        with pytest.raises(VertexNotFoundError):
            solver.solve(graph, 0, 99)

    def test_logs_outcome(self, solver, graph, caplog):
        with caplog.at_level(logging.INFO, logger="dijkstra_graph"):
            solver.solve(graph, 0, 2)
            solver.solve(graph, 0, 3)

        messages = [record.getMessage() for record in caplog.records]
        assert "Path found" in messages
        assert "Target unreachable" in messages

    def test_solver_is_stateless(self, solver, graph):
        first = solver.solve(graph, 0, 2)
        solver.solve(graph, 1, 0)

        assert solver.solve(graph, 0, 2) == first
