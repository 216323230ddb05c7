"""Deep-link path splitting and classification.

Splits a raw path and query into its marker, value and arguments, then
decides which identifier kind the value denotes from its shape alone. Values
are not validated here, a ChatKey candidate may still have the wrong length.
"""

from enum import StrEnum
from typing import List, Optional, Tuple
from urllib.parse import parse_qsl, unquote

from pydantic import BaseModel, ConfigDict

from network.planq.join.resolve.charset import ChannelRules
from network.planq.join.resolve.encoding import (
    HEX_KEY_PREFIX,
    MULTIBASE_BASE16_PREFIXES,
    MULTIBASE_BASE58BTC_PREFIX,
    KeyEncoding,
)
from network.planq.join.resolve.errors import InvalidInputException
from network.planq.join.resolve.identifiers import IdentifierKind

ENS_SUFFIX = ".eth"


class PathMarker(StrEnum):
    """Leading path segment naming the identifier family."""

    browser = "b"
    user = "u"
    group = "g"


class RawRequest(BaseModel):
    """Raw path and query of a deep-link request.

    `path` and `query` are kept exactly as received, without the leading
    slash and `?`. `value` and `arguments` are percent-decoded.
    """

    model_config = ConfigDict(frozen=True)

    path: str
    query: str = ""
    marker: Optional[PathMarker] = None
    value: str
    arguments: List[Tuple[str, str]] = []

    @property
    def native_path(self) -> str:
        """Path and query as they should appear after the native scheme."""
        if self.query:
            return f"{self.path}?{self.query}"
        return self.path

    def argument(self, name: str) -> Optional[str]:
        """First decoded value of a query argument, if present."""
        return next((v for k, v in self.arguments if k == name), None)

    def decoded_values(self) -> List[str]:
        """Every decoded string a caller could get echoed back, path value first."""
        values = [self.value]
        for key, value in self.arguments:
            values.append(key)
            values.append(value)
        return values


class ParsedPath(BaseModel):
    """Classified request value awaiting validation."""

    model_config = ConfigDict(frozen=True)

    kind: IdentifierKind
    value: str
    encoding: Optional[KeyEncoding] = None


def split_request(raw: str) -> RawRequest:
    """Split a raw path and query string into a RawRequest.

    A leading slash is optional. The first segment is treated as a marker only
    when another segment follows it, or, for the group marker, when a query
    string follows it. Percent-escapes must decode to valid UTF-8.

    Args:
        raw: Undecoded path, optionally followed by `?` and a query string

    Returns:
        RawRequest with decoded value and arguments

    Raises:
        InvalidInputException: InvalidCharset if a value is not valid UTF-8
    """
    path, _, query = raw.partition("?")
    path = path.removeprefix("/")

    marker: Optional[PathMarker] = None
    value = path
    head, sep, rest = path.partition("/")
    if sep and head.lower() in {m.value for m in PathMarker}:
        marker = PathMarker(head.lower())
        value = rest
    elif query and path.lower() == PathMarker.group:
        marker = PathMarker.group
        value = ""

    try:
        decoded = unquote(value, errors="strict")
    except UnicodeDecodeError as e:
        raise InvalidInputException.invalid_charset(value, "path") from e
    try:
        arguments = parse_qsl(query, keep_blank_values=True, errors="strict")
    except UnicodeDecodeError as e:
        raise InvalidInputException.invalid_charset(query, "query") from e

    return RawRequest(
        path=path,
        query=query,
        marker=marker,
        value=decoded,
        arguments=arguments,
    )


def classify_user(value: str) -> ParsedPath:
    """Classify the value of a `/u/` path as an ENS name or a chat key.

    Raises:
        InvalidInputException: UnrecognizedUserIdentifier if nothing matches
    """
    if value.lower().endswith(ENS_SUFFIX):
        return ParsedPath(kind=IdentifierKind.ens_name, value=value)
    if value[: len(HEX_KEY_PREFIX)].lower() == HEX_KEY_PREFIX:
        return ParsedPath(
            kind=IdentifierKind.chat_key, value=value, encoding=KeyEncoding.hex
        )
    if value[:1] and value[0] in MULTIBASE_BASE16_PREFIXES:
        return ParsedPath(
            kind=IdentifierKind.chat_key, value=value, encoding=KeyEncoding.multibase
        )
    if value.startswith(MULTIBASE_BASE58BTC_PREFIX):
        return ParsedPath(
            kind=IdentifierKind.chat_key, value=value, encoding=KeyEncoding.compressed
        )
    raise InvalidInputException.unrecognized_user_identifier(value)


def classify(request: RawRequest, channel_rules: ChannelRules) -> ParsedPath:
    """Determine the identifier kind of a request.

    Args:
        request: Split request, already guarded against markup
        channel_rules: Rules deciding what an unmarked public channel looks like

    Returns:
        ParsedPath with the kind and, for chat keys, the encoding

    Raises:
        InvalidInputException: UnrecognizedUserIdentifier or UnrecognizedPath
    """
    if request.marker == PathMarker.browser:
        if len(request.value) == 0:
            raise InvalidInputException.unrecognized_path(request.path)
        return ParsedPath(kind=IdentifierKind.browser_link, value=request.value)
    elif request.marker == PathMarker.user:
        return classify_user(request.value)
    elif request.marker == PathMarker.group:
        return ParsedPath(kind=IdentifierKind.group_chat, value=request.value)

    if channel_rules.matches_charset(request.value):
        return ParsedPath(kind=IdentifierKind.public_channel, value=request.value)

    raise InvalidInputException.unrecognized_path(request.value)
