"""Render frequency-distribution figures.

Plotting functions receive raw observations, delegate all counting to
``tallykit.stats.frequency`` and only draw.
"""

from __future__ import annotations

import logging
import os
from typing import Hashable, Sequence

import matplotlib.pyplot as plt
import numpy as np

from .stats.frequency import absolute_frequency, cumulative_frequency, relative_frequency

logger = logging.getLogger(__name__)

BAR_COLOR = "0.55"
LINE_COLOR = "black"
FIGURE_SIZE = (8.0, 4.5)
DPI = 150
MAX_TICK_LABELS = 30


def setup_plot_style() -> None:
    """Apply the grayscale serif style used for every tallykit figure."""
    plt.rcParams.update(
        {
            "font.family": "serif",
            "axes.spines.top": False,
            "axes.titlesize": 12,
            "axes.labelsize": 11,
            "xtick.labelsize": 9,
            "ytick.labelsize": 9,
            "savefig.dpi": DPI,
        }
    )


def plot_frequency_distribution(
    items: Sequence[Hashable],
    output_dir: str = "output",
    filename: str = "frequency_distribution.png",
    title: str = "Frequency distribution",
) -> str:
    """Draw relative frequency bars with the cumulative share on a twin axis.

    Args:
        items (Sequence): Observations of any hashable type. Numeric values are
            plotted in ascending order, anything else in first-occurrence
            order.
        output_dir (str, optional): Directory for the PNG. Defaults to
            ``"output"``.
        filename (str, optional): PNG file name.
        title (str, optional): Axes title.

    Returns:
        str: Path to the saved PNG file.

    Raises:
        ValueError: If ``items`` is empty.
    """
    if len(items) == 0:
        raise ValueError("Cannot plot the frequency distribution of an empty sample.")

    table = absolute_frequency(items)
    try:
        table = dict(sorted(table.items()))
    except TypeError:
        pass  # mixed or unorderable keys keep first-occurrence order
    relative = relative_frequency(items, table)
    cumulative = cumulative_frequency(items, table)
    total = sum(table.values())

    labels = [str(k) for k in table]
    positions = np.arange(len(labels))
    rel = np.array([relative[k] for k in table], dtype=float)
    cum_share = np.array([cumulative[k] / total for k in table], dtype=float)

    setup_plot_style()
    fig, ax = plt.subplots(figsize=FIGURE_SIZE)
    ax.bar(positions, rel, color=BAR_COLOR, edgecolor="black", linewidth=0.6)
    ax.set_ylabel("Relative frequency")
    ax.set_title(title)

    if len(labels) <= MAX_TICK_LABELS:
        ax.set_xticks(positions)
        ax.set_xticklabels(labels, rotation=45 if len(labels) > 10 else 0)
    ax.set_xlabel("Value")

    ax2 = ax.twinx()
    ax2.plot(positions, cum_share, color=LINE_COLOR, marker="o", markersize=3, linewidth=1.2)
    ax2.set_ylim(0.0, 1.05)
    ax2.set_ylabel("Cumulative share")

    fig.tight_layout()
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, filename)
    fig.savefig(path)
    plt.close(fig)
    logger.info("Saved frequency distribution figure to %s", path)
    return path
