"""Typed domain errors for the graph store and shortest-path engine.

All errors inherit from GraphStoreError and can optionally wrap a root
cause exception for debugging.

Note that an unreachable target is *not* an error for the core engine:
it is reported through ``PathResult`` with an infinite cost. Only the
strict solver/service variants turn it into ``NoRouteFoundError``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class GraphStoreError(Exception):
    """Base error for the graph domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class VertexNotFoundError(GraphStoreError):
    """Vertex identity not present in the store.

    Identities are only ever produced by ``GraphStore.add_vertex``, so
    this always signals a caller bug. Nothing in the engine catches it.

    Attributes:
        vertex_id: The identity that was requested
    """

    vertex_id: int = -1


@dataclass
class NoRouteFoundError(GraphStoreError):
    """No directed path exists between the requested vertices.

    Attributes:
        from_id: Identity of the start vertex
        to_id: Identity of the target vertex
    """

    from_id: int = -1
    to_id: int = -1


@dataclass
class ConfigurationError(GraphStoreError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
