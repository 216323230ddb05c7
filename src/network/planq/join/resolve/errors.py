"""Typed validation failures raised while resolving a deep-link path.

Every stage of the resolution pipeline raises InvalidInputException on the
first problem it finds. The engine converts it into a ValidationError outcome,
so none of these escape to the HTTP layer.
"""

from enum import StrEnum


class ErrorKind(StrEnum):
    """Validation error categories surfaced to callers."""

    contains_markup = "ContainsMarkup"
    unrecognized_user_identifier = "UnrecognizedUserIdentifier"
    unrecognized_path = "UnrecognizedPath"
    incorrect_key_length = "IncorrectKeyLength"
    incorrect_name_length = "IncorrectNameLength"
    invalid_charset = "InvalidCharset"
    invalid_format_tag = "InvalidFormatTag"
    missing_arguments = "MissingArguments"
    invalid_admin_key = "InvalidAdminKey"
    invalid_group_key = "InvalidGroupKey"


class InvalidInputException(Exception):
    """
    Exception raised when a path or query value fails validation.

    This exception class provides static methods for creating specific
    validation failure instances with the messages shown to end users. The
    `value` attribute holds the offending input verbatim and is never escaped
    here; presentation layers must escape it before embedding it in markup.
    """

    def __init__(self, kind: ErrorKind, detail: str, value: str = "") -> None:
        super().__init__(detail)
        self.kind = kind
        self.detail = detail
        self.value = value

    @staticmethod
    def contains_markup(value: str) -> "InvalidInputException":
        """Input contains angle-bracket markup delimiters."""
        return InvalidInputException(
            ErrorKind.contains_markup, f"Input contains HTML: {value}", value
        )

    @staticmethod
    def unrecognized_user_identifier(value: str) -> "InvalidInputException":
        """User path is neither an ENS name nor a known chat key encoding."""
        return InvalidInputException(
            ErrorKind.unrecognized_user_identifier,
            f"Unrecognized user identifier: {value}",
            value,
        )

    @staticmethod
    def unrecognized_path(value: str) -> "InvalidInputException":
        """Path does not match any identifier kind."""
        return InvalidInputException(
            ErrorKind.unrecognized_path, f"Unrecognized path: {value}", value
        )

    @staticmethod
    def incorrect_key_length(value: str) -> "InvalidInputException":
        """Chat key is shorter or longer than its encoding allows."""
        return InvalidInputException(
            ErrorKind.incorrect_key_length, "Incorrect length of chat key", value
        )

    @staticmethod
    def incorrect_name_length(
        value: str, min_length: int, max_length: int
    ) -> "InvalidInputException":
        """Name is outside the configured length bounds."""
        return InvalidInputException(
            ErrorKind.incorrect_name_length,
            f"Incorrect length of name, must be between {min_length} and {max_length} characters",
            value,
        )

    @staticmethod
    def invalid_charset(value: str, what: str) -> "InvalidInputException":
        """Value contains characters outside the allowed alphabet."""
        return InvalidInputException(
            ErrorKind.invalid_charset, f"Invalid characters in {what}", value
        )

    @staticmethod
    def invalid_format_tag(value: str) -> "InvalidInputException":
        """Decoded key does not carry the expected key-format tag."""
        return InvalidInputException(
            ErrorKind.invalid_format_tag, "Unsupported chat key format", value
        )

    @staticmethod
    def missing_arguments(value: str = "") -> "InvalidInputException":
        """Group chat link lacks one of its required query arguments."""
        return InvalidInputException(
            ErrorKind.missing_arguments,
            "Invalid group chat URL: Missing arguments!",
            value,
        )

    @staticmethod
    def invalid_admin_key(value: str) -> "InvalidInputException":
        """Group chat admin key failed validation."""
        return InvalidInputException(
            ErrorKind.invalid_admin_key,
            "Invalid group chat URL: Admin public key invalid!",
            value,
        )

    @staticmethod
    def invalid_group_key(value: str) -> "InvalidInputException":
        """Group chat key failed validation."""
        return InvalidInputException(
            ErrorKind.invalid_group_key,
            "Invalid group chat URL: Group public key invalid!",
            value,
        )
