"""Character-set and length checks shared by the identifier validators."""

import string
from typing import Sized

from pydantic import BaseModel, ConfigDict, model_validator

from network.planq.join.resolve.errors import InvalidInputException

HEX_DIGITS = frozenset(string.hexdigits)

BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"

DEFAULT_CHANNEL_CHARS = string.ascii_lowercase + string.digits + "-"


class ChannelRules(BaseModel):
    """Public channel naming rules.

    Names must be made only of `allowed_chars` and be between `min_length`
    and `max_length` characters long, inclusive.
    """

    model_config = ConfigDict(frozen=True)

    min_length: int = 1
    max_length: int = 64
    allowed_chars: str = DEFAULT_CHANNEL_CHARS

    @model_validator(mode="after")
    def check_bounds(self) -> "ChannelRules":
        if self.min_length < 1 or self.max_length < self.min_length:
            raise ValueError("channel length bounds must satisfy 1 <= min <= max")
        if len(self.allowed_chars) == 0:
            raise ValueError("allowed_chars must not be empty")
        return self

    def matches_charset(self, name: str) -> bool:
        """Check a name against the charset, ignoring case."""
        allowed = set(self.allowed_chars)
        return len(name) > 0 and all(c in allowed for c in name.lower())


def check_charset(value: str, allowed, what: str, text: str = "") -> str:
    """Raise InvalidCharset unless every character of value is allowed.

    The error reports text when given, otherwise value.
    """
    if not all(c in allowed for c in value):
        raise InvalidInputException.invalid_charset(text or value, what)
    return value


def check_bounded_length(value: str, min_length: int, max_length: int) -> str:
    """Raise IncorrectNameLength unless min_length <= len(value) <= max_length."""
    if not min_length <= len(value) <= max_length:
        raise InvalidInputException.incorrect_name_length(value, min_length, max_length)
    return value


def exact_length(value: Sized, *expected: int, text: str = "") -> None:
    """Raise IncorrectKeyLength unless len(value) is one of the expected lengths.

    Args:
        value: String or bytes to measure
        expected: Accepted lengths
        text: Original input reported with the error
    """
    if len(value) not in expected:
        raise InvalidInputException.incorrect_key_length(
            text or (value if isinstance(value, str) else "")
        )
