"""Helper functions for group_news CLI."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from common.cli_helpers import parse_positive_int, parse_unit_interval

DEFAULT_INPUT_PATH = Path("assets/json/news.json")
DEFAULT_OUTPUT_PATH = Path("assets/json/news_grouped.json")


def parse_group_news_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for group_news."""

    parser = argparse.ArgumentParser(description="Group similar news articles into stories.")

    # Input / output options
    parser.add_argument(
        "--input",
        type=Path,
        default=DEFAULT_INPUT_PATH,
        help=f"JSON array of articles (default: {DEFAULT_INPUT_PATH})",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=DEFAULT_OUTPUT_PATH,
        help=f"Where to write grouped stories (default: {DEFAULT_OUTPUT_PATH})",
    )

    # Grouping options
    parser.add_argument(
        "--config",
        default=None,
        help="Config name (test/prod) or path to YAML file (default: $GROUP_NEWS_CONFIG or prod)",
    )
    parser.add_argument(
        "--threshold",
        type=lambda v: parse_unit_interval(v, "threshold"),
        default=None,
        help="Minimum title overlap to link two articles, overrides the config (0-1)",
    )
    parser.add_argument(
        "--workers",
        type=lambda v: parse_positive_int(v, "workers"),
        default=1,
        help="Processes used for pairwise scoring (default: 1)",
    )

    return parser.parse_args(argv)
