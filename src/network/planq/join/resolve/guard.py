"""Markup detection for untrusted path and query values."""

import logging
from typing import Iterable

from network.planq.join.resolve.errors import InvalidInputException

logger = logging.getLogger(__name__)

MARKUP_DELIMITERS = frozenset("<>")


def contains_markup(value: str) -> bool:
    """Check if value contains an angle-bracket markup delimiter.

    Args:
        value: Percent-decoded input value

    Returns:
        True if any character of value is `<` or `>`
    """
    return not MARKUP_DELIMITERS.isdisjoint(value)


def guard(value: str) -> str:
    """Reject a value that contains markup.

    Args:
        value: Percent-decoded input value

    Returns:
        The value, unchanged

    Raises:
        InvalidInputException: ContainsMarkup, carrying the value verbatim
    """
    if contains_markup(value):
        logger.warning("Rejected input containing markup: %r", value)
        raise InvalidInputException.contains_markup(value)
    return value


def guard_all(values: Iterable[str]) -> None:
    """Guard each value in order, failing on the first one with markup."""
    for value in values:
        guard(value)
