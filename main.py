#!/usr/bin/env python3
"""
Generate a synthetic sample and report its frequency distribution and
descriptive statistics.
"""

# Pipeline overview:
# 1) Seed the default uniform source when --seed is given.
# 2) Draw --length integers (or floats) on [--min, --max].
# 3) Tabulate absolute, cumulative and relative frequencies.
# 4) Summarize the sample (mean, median, mode, deviations).
# 5) Export both tables as CSV and, unless --no-plot, a frequency figure.

from __future__ import annotations

import argparse
import logging
import sys
import time

from tallykit.generators import random_float_array, random_integer_array, reseed
from tallykit.plotting import plot_frequency_distribution
from tallykit.reporting import (
    format_summary,
    frequency_table_dataframe,
    save_tables_to_csv,
    summary_dataframe,
)

DEFAULT_SAMPLE_SIZE = 200
DEFAULT_MIN = 1
DEFAULT_MAX = 6
DEFAULT_OUTPUT_DIR = "output"

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def _build_arg_parser() -> argparse.ArgumentParser:
    """Build command-line parser for the sample report."""
    parser = argparse.ArgumentParser(
        description="Generate a random sample and report its frequency distribution."
    )
    parser.add_argument(
        "--length",
        type=int,
        default=DEFAULT_SAMPLE_SIZE,
        help="Number of values to draw.",
    )
    parser.add_argument(
        "--min", dest="min_value", type=float, default=DEFAULT_MIN, help="Lower bound."
    )
    parser.add_argument(
        "--max", dest="max_value", type=float, default=DEFAULT_MAX, help="Upper bound."
    )
    parser.add_argument(
        "--kind",
        choices=("int", "float"),
        default="int",
        help="Draw integers on [min, max] or floats on [min, max).",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for reproducible samples."
    )
    parser.add_argument(
        "--outdir", default=DEFAULT_OUTPUT_DIR, help="Directory for CSV and PNG outputs."
    )
    parser.add_argument(
        "--no-plot", action="store_true", help="Skip the frequency distribution figure."
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint for the sample report."""
    parser = _build_arg_parser()
    args = parser.parse_args(argv)
    _configure_logging()

    start_time = time.time()
    logger.info("Initializing sample report pipeline")

    if args.seed is not None:
        reseed(args.seed)
        logger.info("Seeded uniform source with %d", args.seed)

    if args.kind == "int":
        sample = random_integer_array(args.length, args.min_value, args.max_value)
    else:
        sample = random_float_array(args.length, args.min_value, args.max_value)
    logger.info(
        "Drew %d %s values on [%g, %g]",
        len(sample),
        args.kind,
        args.min_value,
        args.max_value,
    )

    if not sample:
        logger.error("Sample is empty. Terminating execution.")
        return 1

    frequency_df = frequency_table_dataframe(sample)
    summary_df = summary_dataframe({"sample": sample})
    logger.info("Frequency table has %d distinct values", len(frequency_df))
    print(format_summary(summary_df))

    frequency_csv, summary_csv = save_tables_to_csv(frequency_df, summary_df, args.outdir)

    figure_path = None
    if not args.no_plot:
        figure_path = plot_frequency_distribution(sample, args.outdir)

    logger.info("Total execution time: %.2f seconds", time.time() - start_time)
    logger.info("Generated output files:")
    logger.info("  - Frequency table CSV: %s", frequency_csv)
    logger.info("  - Summary statistics CSV: %s", summary_csv)
    if figure_path:
        logger.info("  - Frequency distribution figure: %s", figure_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
