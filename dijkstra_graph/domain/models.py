"""Immutable domain models for the graph store.

All models are frozen dataclasses with slots. Vertices compare, hash and
order by identity only: payloads are opaque and may not support any of
these operations themselves.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from functools import total_ordering
from typing import Any


@total_ordering
@dataclass(frozen=True, slots=True, eq=False)
class Vertex:
    """A node of the graph.

    Attributes:
        id: Sequential identity assigned by the store, starting at 0
        value: Opaque payload (a label, a scalar, ...)
    """

    id: int
    value: Any

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self.id == other.id

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self.id < other.id

    def __hash__(self) -> int:
        return hash(self.id)


@dataclass(frozen=True, slots=True)
class Edge:
    """A directed arc towards ``target``.

    The source vertex is implicit: it is the key of the adjacency list
    the edge is stored in.

    Attributes:
        target: Vertex the edge leads to
        cost: Non-negative traversal cost
    """

    target: Vertex
    cost: float


@dataclass(frozen=True, slots=True)
class PathResult:
    """Result of a shortest-path search.

    Attributes:
        path: Ordered vertices from start to end (inclusive), empty if
            the target is unreachable
        total_cost: Accumulated cost, ``inf`` if unreachable
    """

    path: tuple[Vertex, ...] = field(default_factory=tuple)
    total_cost: float = math.inf

    @classmethod
    def unreachable(cls) -> PathResult:
        """Return the result used for an unreachable target."""
        return cls(path=(), total_cost=math.inf)

    @property
    def is_reachable(self) -> bool:
        """Check if the target was reached."""
        return not math.isinf(self.total_cost)

    @property
    def is_empty(self) -> bool:
        """Check if no path was found."""
        return len(self.path) == 0

    @property
    def num_stops(self) -> int:
        """Return the number of vertices on the path."""
        return len(self.path)

    @property
    def values(self) -> tuple[Any, ...]:
        """Return the payloads along the path."""
        return tuple(vertex.value for vertex in self.path)
