"""
Reader for post seed files.

A seed file holds a JSON array of posts in API wire format, such as
a dump of ``GET /api/posts``.
"""

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def read_seed_file(path: Path) -> list[dict]:
    """Read seed records from a JSON file.

    Args:
        path: Location of the JSON array.

    Returns:
        The decoded records.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not valid JSON or not a JSON array.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError(f"Seed file must contain a JSON array: {path}")

    logger.info("Read %d records from %s", len(data), path)
    return data
