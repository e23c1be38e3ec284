"""
Edge and derived container types shared by the pipeline stages.
"""

from typing import Mapping, NamedTuple, Tuple


class Edge(NamedTuple):
    """A directed edge between two opaque node identifiers."""
    source: str
    target: str


# source -> targets, in first-seen-then-appended order
AdjacencyMap = Mapping[str, Tuple[str, ...]]

# one out-degree per adjacency key, order irrelevant
DegreeList = Tuple[int, ...]

# (degree, count) pairs sorted ascending by degree
Histogram = Tuple[Tuple[int, int], ...]
