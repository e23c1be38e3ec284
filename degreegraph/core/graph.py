"""
Adjacency construction for directed edge lists.

This module provides the fundamental graph structure used by the degree
pipeline: a mapping from each source node to the targets it points to.
"""

import logging
from types import MappingProxyType
from typing import DefaultDict, Iterable, List
from collections import defaultdict

from ..classes.edge import Edge, AdjacencyMap

logger = logging.getLogger(__name__)


class AdjacencyBuilder:
    """
    Builds an adjacency map from a sequence of directed edges.

    The map has one key per distinct source node. Its value holds every
    target recorded for that source, in input order, with one entry per
    edge occurrence (parallel edges and self-loops are kept). Nodes that
    only ever appear as targets are not keys.
    """

    def build(self, edges: Iterable[Edge]) -> AdjacencyMap:
        """
        Fold edges into an adjacency map.

        Args:
            edges: Directed edges as (source, target) pairs

        Returns:
            Read-only mapping of source -> tuple of targets
        """
        adjacency_list: DefaultDict[str, List[str]] = defaultdict(list)
        edge_count = 0

        for source, target in edges:
            adjacency_list[source].append(target)
            edge_count += 1

        logger.debug(f"Built adjacency map with {len(adjacency_list)} source nodes and {edge_count} edges")

        return MappingProxyType({source: tuple(targets) for source, targets in adjacency_list.items()})


def build(edges: Iterable[Edge]) -> AdjacencyMap:
    """Build an adjacency map from directed edges."""
    return AdjacencyBuilder().build(edges)
