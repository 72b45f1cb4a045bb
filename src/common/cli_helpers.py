"""Common CLI helper utilities."""

from __future__ import annotations

import argparse
import logging
import math


def setup_logging(level: int = logging.INFO) -> None:
    """Configure standard logging format for CLI tools."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


def parse_unit_interval(value: str, field_name: str = "value") -> float:
    """Parse a float in [0, 1] for argparse arguments.

    Args:
        value: Raw command-line string.
        field_name: Name of the field for error messages.

    Returns:
        Parsed float.

    Raises:
        argparse.ArgumentTypeError: If the value is not a number in [0, 1].
    """
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"{field_name} must be a number") from exc
    if math.isnan(parsed) or not 0.0 <= parsed <= 1.0:
        raise argparse.ArgumentTypeError(f"{field_name} must be between 0 and 1, got {value}")
    return parsed


def parse_positive_int(value: str, field_name: str = "value") -> int:
    """Parse a strictly positive integer for argparse arguments."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"{field_name} must be an integer") from exc
    if parsed < 1:
        raise argparse.ArgumentTypeError(f"{field_name} must be >= 1, got {value}")
    return parsed
