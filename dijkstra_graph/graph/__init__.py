"""Graph-related modules.

This subpackage contains the in-memory graph store and the path-finding
algorithm that runs on top of it.
"""

from .dijkstra import PriorityEntry, dijkstra
from .store import GraphStore

__all__ = ["GraphStore", "PriorityEntry", "dijkstra"]
