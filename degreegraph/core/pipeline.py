"""
Main facade for degree distribution analysis.

This module provides the DegreePipeline class that wires the pipeline
stages together:

    parse -> build adjacency -> reduce to out-degrees -> aggregate -> render

Each stage fully materialises its output before the next one starts and no
stage reads state from a later one.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from ..classes.edge import Edge, AdjacencyMap, DegreeList, Histogram
from ..config import PipelineConfig
from ..io.reader import EdgeReader
from ..io.render import ChartRenderer
from ..analysis.degree import DegreeReducer, count_out_degrees
from ..analysis.histogram import DegreeSummary, HistogramAggregator
from .graph import AdjacencyBuilder

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineResult:
    """Outputs of one pipeline run."""
    edge_count: int
    degrees: DegreeList
    histogram: Histogram
    summary: DegreeSummary


class DegreePipeline:
    """
    Computes and renders the out-degree distribution of an edge file.

    Only nodes that appear as a source contribute a degree; nodes that are
    only ever targets are left out of the distribution.
    """

    def __init__(self, config: Optional[PipelineConfig] = None):
        """
        Initialize the pipeline stages.

        Args:
            config: Run settings, defaults to PipelineConfig()
        """
        self.config = config if config is not None else PipelineConfig()

        self._reader = EdgeReader()
        self._builder = AdjacencyBuilder()
        self._reducer = DegreeReducer()
        self._aggregator = HistogramAggregator()
        self._renderer = ChartRenderer(self.config.chart)

    # ========================================================================
    # INDIVIDUAL STAGES
    # ========================================================================

    def load_edges(self) -> List[Edge]:
        """Read edges from the configured input file."""
        return self._reader.parse(self.config.input_path)

    def build_adjacency(self, edges: List[Edge]) -> AdjacencyMap:
        """Build the source -> targets map."""
        return self._builder.build(edges)

    def compute_degrees(self, edges: List[Edge]) -> DegreeList:
        """Compute one out-degree per source node."""
        if self.config.single_pass:
            return count_out_degrees(edges)
        return self._reducer.reduce(self.build_adjacency(edges))

    # ========================================================================
    # FULL RUN
    # ========================================================================

    def compute(self, edges: Optional[List[Edge]] = None) -> PipelineResult:
        """
        Run the aggregation stages.

        Args:
            edges: Edges to analyse; read from config.input_path when omitted

        Returns:
            PipelineResult with degrees, histogram and summary

        Raises:
            ParseError: If the input file is unreadable or malformed
        """
        if edges is None:
            edges = self.load_edges()

        degrees = self.compute_degrees(edges)
        histogram = self._aggregator.aggregate(degrees)
        summary = self._aggregator.summarize(degrees, edge_count=len(edges))

        logger.info(
            f"{summary.node_count} source nodes, {summary.edge_count} edges, "
            f"out-degree min={summary.min_degree} max={summary.max_degree} "
            f"mean={summary.mean_degree:.3f} median={summary.median_degree:.1f}"
        )

        return PipelineResult(
            edge_count=len(edges),
            degrees=degrees,
            histogram=histogram,
            summary=summary,
        )

    def render(self, histogram: Histogram) -> Path:
        """
        Render the histogram to config.output_path.

        Raises:
            RenderError: If the chart cannot be written
        """
        return self._renderer.render(histogram, self.config.output_path)
