"""
degreegraph - Out-degree Distribution Analysis Library

A Python library for computing the out-degree distribution of a directed
graph read from a tab-separated edge list, and rendering it as a bar chart.
Parallel edges and self-loops are counted; nodes that never appear as a
source are not part of the distribution.

Main Classes:
    DegreePipeline: End-to-end run driven by a PipelineConfig (facade)
    AdjacencyBuilder: Edge list -> source -> targets map
    DegreeReducer: Adjacency map -> out-degrees
    HistogramAggregator: Out-degrees -> sorted (degree, count) pairs

Example:
    >>> from degreegraph import build, reduce, aggregate
    >>> edges = [("A", "B"), ("A", "C"), ("B", "C"), ("A", "B")]
    >>> aggregate(reduce(build(edges)))
    ((1, 1), (3, 1))
"""

__version__ = "0.1.0"

from degreegraph.classes.edge import Edge
from degreegraph.classes.exceptions import (
    DegreeGraphError,
    ParseError,
    InputFileError,
    RenderError,
    ConfigError,
)
from degreegraph.core.graph import AdjacencyBuilder, build
from degreegraph.analysis.degree import DegreeReducer, reduce, count_out_degrees
from degreegraph.analysis.histogram import (
    DegreeSummary,
    HistogramAggregator,
    aggregate,
    summarize,
    format_histogram,
)
from degreegraph.io.reader import EdgeReader, parse
from degreegraph.io.render import ChartRenderer, ChartStyle, render
from degreegraph.config import PipelineConfig, load_config
from degreegraph.core.pipeline import DegreePipeline, PipelineResult

__all__ = [
    'DegreePipeline',
    'PipelineResult',
    'PipelineConfig',
    'load_config',
    'Edge',
    'AdjacencyBuilder',
    'DegreeReducer',
    'HistogramAggregator',
    'DegreeSummary',
    'EdgeReader',
    'ChartRenderer',
    'ChartStyle',
    'build',
    'reduce',
    'count_out_degrees',
    'aggregate',
    'summarize',
    'format_histogram',
    'parse',
    'render',
    'DegreeGraphError',
    'ParseError',
    'InputFileError',
    'RenderError',
    'ConfigError',
]
