"""
Degree histogram aggregation and summary statistics.

This module turns a list of out-degrees into a sparse frequency histogram
(degree -> number of nodes with that degree) sorted ascending by degree,
and computes a small numeric summary of the same degrees.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Sequence, Tuple

import numpy as np

from ..classes.edge import Histogram

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DegreeSummary:
    """Descriptive statistics of an out-degree list."""
    node_count: int
    edge_count: int
    min_degree: int
    max_degree: int
    mean_degree: float
    median_degree: float


class HistogramAggregator:
    """
    Aggregates out-degrees into a sparse, sorted histogram.

    Degrees observed zero times are absent from the result rather than
    emitted with a count of 0. Because the result is sorted by degree the
    output does not depend on the order of the input.
    """

    def aggregate(self, degrees: Iterable[int]) -> Histogram:
        """
        Count how many nodes have each out-degree.

        Args:
            degrees: Out-degree values, any order, duplicates expected

        Returns:
            Tuple of (degree, count) pairs sorted ascending by degree
        """
        frequency: Dict[int, int] = {}
        for degree in degrees:
            frequency[degree] = frequency.get(degree, 0) + 1

        histogram = tuple(sorted(frequency.items()))
        logger.debug(f"Aggregated degrees into {len(histogram)} histogram bins")
        return histogram

    def summarize(self, degrees: Sequence[int], edge_count: Optional[int] = None) -> DegreeSummary:
        """
        Compute descriptive statistics of the degrees.

        Args:
            degrees: Out-degree values
            edge_count: Number of edges, defaults to the sum of the degrees

        Returns:
            DegreeSummary; all fields are zero for an empty input
        """
        aDegree = np.asarray(degrees, dtype=np.int64)
        if aDegree.size == 0:
            return DegreeSummary(0, edge_count or 0, 0, 0, 0.0, 0.0)

        if edge_count is None:
            edge_count = int(aDegree.sum())

        return DegreeSummary(
            node_count=int(aDegree.size),
            edge_count=int(edge_count),
            min_degree=int(aDegree.min()),
            max_degree=int(aDegree.max()),
            mean_degree=float(aDegree.mean()),
            median_degree=float(np.median(aDegree)),
        )


def aggregate(degrees: Iterable[int]) -> Histogram:
    """Return the sparse (degree, count) histogram sorted by degree."""
    return HistogramAggregator().aggregate(degrees)


def summarize(degrees: Sequence[int], edge_count: Optional[int] = None) -> DegreeSummary:
    """Return descriptive statistics of the degrees."""
    return HistogramAggregator().summarize(degrees, edge_count)


def format_histogram(histogram: Iterable[Tuple[int, int]]) -> str:
    """
    Format a histogram as a tuple list for console output.

    Example:
        >>> format_histogram(((1, 1), (3, 1)))
        '[(1, 1), (3, 1)]'
    """
    return repr([(int(degree), int(count)) for degree, count in histogram])
