"""
Degree analysis modules.

This module contains the out-degree reducer and the histogram aggregator.
"""

from .degree import DegreeReducer, reduce, count_out_degrees
from .histogram import DegreeSummary, HistogramAggregator, aggregate, summarize, format_histogram

__all__ = [
    'DegreeReducer',
    'reduce',
    'count_out_degrees',
    'DegreeSummary',
    'HistogramAggregator',
    'aggregate',
    'summarize',
    'format_histogram',
]
