"""Services layer - Application orchestration.

Available services:
- PathService: Shortest-path queries with text presentation
"""

from .path_service import PathService

__all__ = ["PathService"]
