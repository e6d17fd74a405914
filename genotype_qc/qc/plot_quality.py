"""
Quality control plotting functions for genotype datasets.

Each report draws the same figure: a horizontal boxplot of the statistic
stacked above its histogram. The figure is described by a ChartSpec so it
can be pickled, compared and re-rendered later.
"""

import math
import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np
import matplotlib.pyplot as plt
import seaborn as sns
from matplotlib.figure import Figure

from genotype_qc.core.config import (
    DEFAULT_HEIGHT_RATIOS,
    DEFAULT_PLOT_COLORS,
    DEFAULT_PLOT_THEME,
    PLOT_THEMES,
)


@dataclass(frozen=True)
class ChartSpec:
    """Boxplot-over-histogram chart of a single statistic."""
    values: Tuple[float, ...]
    title: str
    xlabel: str
    colors: Tuple[str, str] = DEFAULT_PLOT_COLORS
    bins: int = 50
    xlim: Tuple[float, float] = (0.0, 1.0)
    theme: str = DEFAULT_PLOT_THEME
    height_ratios: Tuple[int, int] = DEFAULT_HEIGHT_RATIOS
    figsize: Tuple[float, float] = (8, 6)

    def render(self) -> Figure:
        """
        Draw the chart with matplotlib.

        Returns:
            Figure with the boxplot axis on top and the histogram below
        """
        border, fill = self.colors
        values = np.asarray(self.values, dtype=float)
        values = values[~np.isnan(values)]

        with sns.axes_style(self.theme):
            fig, (ax_box, ax_hist) = plt.subplots(
                nrows=2,
                ncols=1,
                figsize=self.figsize,
                gridspec_kw={"height_ratios": list(self.height_ratios)}
            )

            ax_box.boxplot(
                values,
                orientation="horizontal",
                widths=0.6,
                patch_artist=True,
                boxprops={"facecolor": fill, "edgecolor": border},
                whiskerprops={"color": border},
                capprops={"color": border},
                medianprops={"color": border},
                flierprops={"markeredgecolor": border},
            )
            ax_box.set_xlim(self.xlim)
            ax_box.set_yticks([])
            ax_box.set_xlabel(" ")
            ax_box.set_title(self.title)

            sns.histplot(x=values, bins=self.bins, color=fill, edgecolor=border, alpha=1, ax=ax_hist)
            ax_hist.set_xlim(self.xlim)
            ax_hist.set_xlabel(self.xlabel)
            ax_hist.set_ylabel("Count")

            fig.tight_layout()

        return fig


def callrate_plot_range(values: Sequence[float]) -> Tuple[float, float]:
    """X range for call rate plots: minimum truncated to two decimals up to 1."""
    minimum = float(np.nanmin(np.asarray(values, dtype=float)))
    return math.trunc(minimum * 100) / 100, 1.0


def resolve_theme(theme: Optional[str], verbose: int = 2) -> str:
    """Return a valid seaborn axes style name."""
    if theme is None:
        return DEFAULT_PLOT_THEME
    if theme not in PLOT_THEMES:
        if verbose >= 2:
            logging.warning(f"  Unknown plot theme '{theme}', should be one of {PLOT_THEMES}. Using '{DEFAULT_PLOT_THEME}'")
        return DEFAULT_PLOT_THEME
    return theme


def build_distribution_chart(
    values: Sequence[float],
    title: str,
    xlabel: str,
    colors: Tuple[str, str] = DEFAULT_PLOT_COLORS,
    bins: int = 50,
    xlim: Tuple[float, float] = (0.0, 1.0),
    theme: str = DEFAULT_PLOT_THEME
) -> ChartSpec:
    """
    Describe a boxplot and histogram of a statistic vector.

    Args:
        values: Statistic vector
        title: Title shown above the boxplot
        xlabel: Label of the histogram x axis
        colors: Border and fill colors
        bins: Number of histogram bins
        xlim: Shared x range of both panels
        theme: Seaborn axes style

    Returns:
        ChartSpec for the combined figure
    """
    if bins < 1:
        raise ValueError(f"Number of bins must be positive, got {bins}")

    return ChartSpec(
        values=tuple(float(v) for v in values),
        title=title,
        xlabel=xlabel,
        colors=(colors[0], colors[1]),
        bins=int(bins),
        xlim=(float(xlim[0]), float(xlim[1])),
        theme=theme,
    )


def display_chart(chart: ChartSpec) -> Figure:
    """Render the chart and show it in the graphics window."""
    fig = chart.render()
    plt.show()
    return fig
