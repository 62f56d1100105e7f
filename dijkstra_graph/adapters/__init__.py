"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces:
- Path search (Dijkstra)
- Rendering (plain text)
"""
