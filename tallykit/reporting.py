"""Tabulate frequency distributions and sample summaries for export.

This module is the boundary between the pure statistics functions and
CSV artifacts; it is the only place where results become
``pandas.DataFrame`` objects.
"""

from __future__ import annotations

import logging
import os
from typing import Hashable, Mapping, Sequence, Tuple

import numpy as np
import pandas as pd

from .stats.descriptive import summarize
from .stats.frequency import absolute_frequency, cumulative_frequency, relative_frequency

logger = logging.getLogger(__name__)

FREQUENCY_COLUMNS = [
    "Value",
    "Absolute Frequency",
    "Cumulative Frequency",
    "Relative Frequency",
]

SUMMARY_COLUMNS = [
    "Sample",
    "n",
    "Sum",
    "Min",
    "Max",
    "Mean",
    "Median",
    "Mode",
    "Variance",
    "Standard Deviation",
    "Mean Absolute Deviation",
    "Median Absolute Deviation",
]


def frequency_table_dataframe(items: Sequence[Hashable]) -> pd.DataFrame:
    """Build the frequency distribution table of ``items``.

    Args:
        items (Sequence): Observations of any hashable type.

    Returns:
        pandas.DataFrame: One row per distinct value in first-occurrence order
        with columns ``Value``, ``Absolute Frequency``, ``Cumulative
        Frequency`` and ``Relative Frequency``.

    Note:
        The absolute table is computed once and shared by the cumulative and
        relative columns.
    """
    absolute = absolute_frequency(items)
    if not absolute:
        return pd.DataFrame(columns=FREQUENCY_COLUMNS)

    cumulative = cumulative_frequency(items, absolute)
    relative = relative_frequency(items, absolute)
    rows = [
        {
            "Value": value,
            "Absolute Frequency": count,
            "Cumulative Frequency": cumulative[value],
            "Relative Frequency": relative[value],
        }
        for value, count in absolute.items()
    ]
    return pd.DataFrame(rows, columns=FREQUENCY_COLUMNS)


def summary_dataframe(samples: Mapping[str, Sequence[float]]) -> pd.DataFrame:
    """Summarize several named numeric samples side by side.

    Args:
        samples (Mapping[str, Sequence[float]]): Sample name to values.

    Returns:
        pandas.DataFrame: One row per sample in mapping order. ``Mode`` holds
        the modes joined by ``"; "`` or is empty when the sample has no mode.
    """
    if not samples:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)

    rows = []
    for name, values in samples.items():
        stats = summarize(values)
        modes = stats["mode"]
        rows.append(
            {
                "Sample": name,
                "n": stats["n"],
                "Sum": stats["sum"],
                "Min": stats["min"],
                "Max": stats["max"],
                "Mean": stats["mean"],
                "Median": stats["median"],
                "Mode": "; ".join(str(m) for m in modes) if modes else "",
                "Variance": stats["variance"],
                "Standard Deviation": stats["std"],
                "Mean Absolute Deviation": stats["mean_abs_dev"],
                "Median Absolute Deviation": stats["median_abs_dev"],
            }
        )
    return pd.DataFrame.from_records(rows, columns=SUMMARY_COLUMNS)


def format_summary(summary_df: pd.DataFrame, precision: int = 4) -> str:
    """Render a summary table as fixed-width text for console output."""
    if summary_df.empty:
        return "(no samples)"
    numeric = summary_df.select_dtypes(include=[np.number]).columns
    rounded = summary_df.copy()
    rounded[numeric] = rounded[numeric].round(precision)
    return rounded.to_string(index=False)


def save_tables_to_csv(
    frequency_df: pd.DataFrame,
    summary_df: pd.DataFrame,
    output_dir: str = "output",
) -> Tuple[str, str]:
    """Write the frequency table and summary table to CSV files.

    Args:
        frequency_df (pandas.DataFrame): Output of ``frequency_table_dataframe``.
        summary_df (pandas.DataFrame): Output of ``summary_dataframe``.
        output_dir (str): Directory for the CSV files; created if missing.

    Returns:
        tuple[str, str]: Paths to ``frequency_table.csv`` and
        ``summary_statistics.csv``.
    """
    os.makedirs(output_dir, exist_ok=True)

    frequency_path = os.path.join(output_dir, "frequency_table.csv")
    summary_path = os.path.join(output_dir, "summary_statistics.csv")

    frequency_df.to_csv(frequency_path, index=False)
    summary_df.to_csv(summary_path, index=False)

    logger.info("Saved frequency table to %s", frequency_path)
    logger.info("Saved summary statistics to %s", summary_path)
    return frequency_path, summary_path
