"""Bundled display-name table.

Maps canonical identifier text (or a chat key fingerprint, the `0x` prefixed
compressed key) to a human-readable name. The table is loaded once and
exposed read-only.
"""

import functools
import json
import logging
from importlib import resources
from types import MappingProxyType
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

BUNDLED_TABLE = "display_names.json"


def parse_display_names(data: str) -> Mapping[str, str]:
    """Parse a JSON object of names into a read-only mapping.

    Raises:
        ValueError: If the document is not an object of strings
    """
    table = json.loads(data)
    if not isinstance(table, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in table.items()
    ):
        raise ValueError("display name table must be a JSON object of strings")
    return MappingProxyType(table)


@functools.cache
def load_display_names(path: Optional[str] = None) -> Mapping[str, str]:
    """Load a display-name table.

    Args:
        path: JSON file to load, the bundled table when None

    Returns:
        Read-only mapping, cached per path for the life of the process
    """
    if path is None:
        data = (
            resources.files(__package__)
            .joinpath(BUNDLED_TABLE)
            .read_text(encoding="utf-8")
        )
    else:
        with open(path, encoding="utf-8") as fd:
            data = fd.read()
    table = parse_display_names(data)
    logger.info("Loaded %d display names from %s", len(table), path or BUNDLED_TABLE)
    return table
