"""Rendering adapters - Implementations of GraphRendererPort.

Available implementations:
- TextGraphRenderer: Plain-text graph dump and path summary
"""

from .text_renderer import TextGraphRenderer

__all__ = ["TextGraphRenderer"]
