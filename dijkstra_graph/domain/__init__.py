"""Domain layer - Core graph models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    GraphStoreError,
    NoRouteFoundError,
    VertexNotFoundError,
)
from .models import Edge, PathResult, Vertex

__all__ = [
    # Models
    "Vertex",
    "Edge",
    "PathResult",
    # Errors
    "GraphStoreError",
    "VertexNotFoundError",
    "NoRouteFoundError",
    "ConfigurationError",
]
