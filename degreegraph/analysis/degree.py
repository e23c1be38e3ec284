"""
Out-degree reduction over adjacency maps.
"""

import logging
from collections import Counter
from typing import Iterable, Mapping, Sequence

from ..classes.edge import Edge, DegreeList

logger = logging.getLogger(__name__)


class DegreeReducer:
    """Reduces an adjacency map to one out-degree per source node."""

    def reduce(self, adjacency: Mapping[str, Sequence[str]]) -> DegreeList:
        """
        Emit the length of every value in the adjacency map.

        Args:
            adjacency: Mapping of node -> targets (empty values allowed)

        Returns:
            Tuple of out-degrees, one per key, in no particular order
        """
        degrees = tuple(len(targets) for targets in adjacency.values())
        logger.debug(f"Reduced {len(degrees)} nodes to out-degrees")
        return degrees


def reduce(adjacency: Mapping[str, Sequence[str]]) -> DegreeList:
    """Return the out-degree of every node in the adjacency map."""
    return DegreeReducer().reduce(adjacency)


def count_out_degrees(edges: Iterable[Edge]) -> DegreeList:
    """
    Count out-degrees directly from edges in a single pass.

    Equivalent to ``reduce(build(edges))`` but never materialises the
    target lists, so memory stays proportional to the number of distinct
    source nodes.

    Args:
        edges: Directed edges as (source, target) pairs

    Returns:
        Tuple of out-degrees, one per distinct source node
    """
    out_degree = Counter(source for source, _ in edges)
    logger.debug(f"Counted out-degrees for {len(out_degree)} source nodes in a single pass")
    return tuple(out_degree.values())
