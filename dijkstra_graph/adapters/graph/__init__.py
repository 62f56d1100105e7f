"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- DijkstraSolver: Finds shortest paths using Dijkstra's algorithm
"""

from .dijkstra_solver import DijkstraSolver

__all__ = ["DijkstraSolver"]
