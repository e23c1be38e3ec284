"""
Core data classes for degree distribution analysis.

This module contains the fundamental data structures and error types used
throughout the degreegraph library.
"""

from .edge import Edge, AdjacencyMap, DegreeList, Histogram
from .exceptions import (
    DegreeGraphError,
    ParseError,
    InputFileError,
    RenderError,
    ConfigError,
)

__all__ = [
    'Edge',
    'AdjacencyMap',
    'DegreeList',
    'Histogram',
    'DegreeGraphError',
    'ParseError',
    'InputFileError',
    'RenderError',
    'ConfigError',
]
