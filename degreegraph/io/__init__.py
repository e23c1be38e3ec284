"""
Input and output boundaries: edge file parsing and chart rendering.
"""

from .reader import EdgeReader, parse
from .render import ChartRenderer, ChartStyle, render

__all__ = ['EdgeReader', 'parse', 'ChartRenderer', 'ChartStyle', 'render']
