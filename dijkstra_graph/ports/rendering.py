"""Rendering port - Abstraction for textual presentation.

The renderer is a presentation collaborator: it reads an already-built
store or a finished PathResult and never mutates either.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import PathResult
    from .graph import GraphStorePort


class GraphRendererPort(Protocol):
    """Port for graph and path rendering.

    Implementation: adapters/rendering/text_renderer.py
    """

    def render_graph(self, graph: GraphStorePort) -> str:
        """Render every vertex followed by its outgoing edges."""
        ...

    def render_path(self, result: PathResult) -> str:
        """Render the total cost and vertex sequence of a search result."""
        ...
