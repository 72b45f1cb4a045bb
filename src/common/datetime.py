"""Datetime utilities."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from dateutil.parser import parse as parse_date

logger = logging.getLogger(__name__)

# Missing date parts are filled from this instead of today's date
PARSE_DEFAULT = datetime(1970, 1, 1)


def parse_pub_date(value) -> datetime | None:
    """Parse an RSS or ISO publish date into an aware datetime.

    Naive values are assumed to be UTC. Returns None for missing or
    unparsable values instead of raising, including strings carrying an
    offset outside +/-24h.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        if not value.strip():
            return None
        try:
            parsed = parse_date(value, default=PARSE_DEFAULT)
        except (ValueError, OverflowError) as exc:
            logger.debug("Unparsable publish date %r: %s", value, exc)
            return None
    else:
        return None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    try:
        parsed.utcoffset()
    except (ValueError, OverflowError) as exc:
        logger.debug("Publish date %r has an invalid offset: %s", value, exc)
        return None
    return parsed
