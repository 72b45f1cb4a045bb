"""CLI for grouping similar articles into stories."""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Sequence

from common.cli_helpers import setup_logging
from common.local_io import read_json, write_json
from group_news.config import load_config
from group_news.errors import GroupNewsError
from group_news.group_news import group_news
from group_news.helpers import parse_group_news_args

logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_group_news_args(argv)
    setup_logging()

    try:
        config = load_config(args.config)
        threshold = args.threshold if args.threshold is not None else config.threshold

        records = read_json(args.input)
        groups = group_news(records, threshold=threshold, workers=args.workers)
    except (GroupNewsError, FileNotFoundError, json.JSONDecodeError, UnicodeDecodeError) as exc:
        # Previous output stays in place
        logger.error("Grouping failed: %s", exc)
        return 1

    write_json([group.to_record() for group in groups], args.output)
    logger.info(
        "%d articles grouped into %d stories (threshold: %s)",
        len(records),
        len(groups),
        threshold,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
