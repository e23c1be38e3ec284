"""
Core graph data structures and the pipeline facade.

This module contains the adjacency representation and the class that wires
the pipeline stages together.
"""

from .graph import AdjacencyBuilder, build

__all__ = ['AdjacencyBuilder', 'build']
