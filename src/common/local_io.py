"""Local file I/O utilities."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def read_json(path: str | Path) -> Any:
    """Read a UTF-8 JSON document from a local file."""
    path = Path(path)
    with path.open(encoding="utf-8") as f:
        data = json.load(f)
    logger.info("Read %s", path)
    return data


def write_json(data: Any, path: str | Path, indent: int = 2) -> Path:
    """
    Write a JSON document to a local file.

    The file is written to a temporary sibling first and then moved into
    place, so readers never see a half-written file.

    Args:
        data: JSON-serializable object
        path: Destination file
        indent: Indentation for pretty printing

    Returns:
        Path to the written file.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_name(f".{path.name}.tmp")
    with tmp_path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent, ensure_ascii=False, default=str)
        f.write("\n")
    tmp_path.replace(path)
    logger.info("Wrote %s", path)
    return path
