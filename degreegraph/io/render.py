"""
Bar chart rendering of degree histograms.

Bars are placed at sequential integer positions (the ordinal index of each
histogram entry), not at the degree value, over a fixed visible axis
range. The default style reproduces the original 600x400 chart.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Tuple, Union

import numpy as np
import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

from ..classes.exceptions import ConfigError, RenderError  # noqa: E402

logger = logging.getLogger(__name__)

Pathish = Union[str, Path]


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass
class ChartStyle:
    """Visual constants of the degree distribution chart."""
    title: str = "Distribution of Frequencies of Lengths"
    title_fontsize: float = 20.0
    width_px: int = 600
    height_px: int = 400
    dpi: int = 100
    x_min: float = 0.0
    x_max: float = 90.0
    y_min: float = 0.0
    y_max: float = 4500.0
    bar_color: str = "blue"
    background_color: str = "white"
    # fraction of a unit slot left empty on each side of a bar
    bar_margin: float = 0.1

    def __post_init__(self):
        for name in ("title", "bar_color", "background_color"):
            if not isinstance(getattr(self, name), str):
                raise ConfigError(f"chart.{name} must be a string")
        for name in ("title_fontsize", "width_px", "height_px", "dpi"):
            value = getattr(self, name)
            if not _is_number(value) or value <= 0:
                raise ConfigError(f"chart.{name} must be a positive number, got {value!r}")
        for name in ("x_min", "x_max", "y_min", "y_max", "bar_margin"):
            if not _is_number(getattr(self, name)):
                raise ConfigError(f"chart.{name} must be a number, got {getattr(self, name)!r}")
        if self.x_max <= self.x_min:
            raise ConfigError("chart.x_max must be greater than chart.x_min")
        if self.y_max <= self.y_min:
            raise ConfigError("chart.y_max must be greater than chart.y_min")
        if not 0 <= self.bar_margin < 0.5:
            raise ConfigError("chart.bar_margin must be in [0, 0.5)")


class ChartRenderer:
    """
    Draws a histogram as a bar chart and writes it to an image file.

    Args:
        style: Chart style, defaults to ChartStyle()
    """

    def __init__(self, style: Optional[ChartStyle] = None):
        self.style = style if style is not None else ChartStyle()

    def bar_geometry(self, histogram: Sequence[Tuple[int, int]]) -> Tuple[np.ndarray, np.ndarray, float]:
        """
        Compute left edges, heights and common width of the bars.

        Args:
            histogram: Ordered (degree, count) pairs

        Returns:
            Tuple of (left edges, heights, bar width)
        """
        margin = self.style.bar_margin
        aLeft = np.arange(len(histogram), dtype=float) + margin
        aHeight = np.array([count for _, count in histogram], dtype=float)
        return aLeft, aHeight, 1.0 - 2.0 * margin

    def render(self, histogram: Sequence[Tuple[int, int]], output_path: Pathish) -> Path:
        """
        Render the histogram and save it as a raster image.

        Args:
            histogram: Ordered (degree, count) pairs
            output_path: Destination image; format follows the suffix

        Returns:
            Path of the written image

        Raises:
            RenderError: If the image cannot be written
        """
        style = self.style
        output = Path(output_path)
        aLeft, aHeight, width = self.bar_geometry(histogram)

        fig, ax = plt.subplots(
            figsize=(style.width_px / style.dpi, style.height_px / style.dpi),
            dpi=style.dpi,
        )
        try:
            fig.patch.set_facecolor(style.background_color)
            ax.bar(aLeft, aHeight, width=width, align="edge", color=style.bar_color)
            ax.set_xlim(style.x_min, style.x_max)
            ax.set_ylim(style.y_min, style.y_max)
            ax.grid(True, linestyle="-", linewidth=0.5, alpha=0.3)
            ax.set_axisbelow(True)
            ax.set_title(style.title, fontsize=style.title_fontsize)
            fig.tight_layout()
            fig.savefig(output, dpi=style.dpi, facecolor=style.background_color)
        except (OSError, ValueError) as e:
            raise RenderError(f"Cannot write chart to {output}: {e}") from e
        finally:
            plt.close(fig)

        logger.info(f"Wrote chart with {len(histogram)} bars to {output}")
        return output


def render(histogram: Sequence[Tuple[int, int]], output_path: Pathish, style: Optional[ChartStyle] = None) -> Path:
    """Render the histogram as a bar chart at output_path."""
    return ChartRenderer(style).render(histogram, output_path)
