"""Deep-link target description.

Maps a validated identifier to the native-app target it opens, or to a
redirect towards its canonical path when the request spelled a case-folded
identifier in another case.
"""

import logging
from typing import Literal, Mapping, Optional
from urllib.parse import unquote

from pydantic import BaseModel, ConfigDict

from network.planq.join.resolve.classify import RawRequest
from network.planq.join.resolve.identifiers import (
    BrowserLink,
    ChatKey,
    ENSName,
    GroupChat,
    Identifier,
    IdentifierKind,
    PublicChannel,
)

logger = logging.getLogger(__name__)

INDEXABLE_KINDS = frozenset({IdentifierKind.browser_link, IdentifierKind.public_channel})


class Target(BaseModel):
    """Deep-link target metadata handed to the presentation layer.

    Attributes:
        kind: Identifier kind
        canonical: Canonical identifier text
        native_uri: Native-scheme URI with the request path and query verbatim
        label: Human-readable name of the target
        display: Target text as shown in prompts, `#channel` or `@name.eth`
        indexable: Whether search engines may index the target page
    """

    model_config = ConfigDict(frozen=True)

    kind: IdentifierKind
    canonical: str
    native_uri: str
    label: str
    display: str
    indexable: bool


class Success(BaseModel):
    model_config = ConfigDict(frozen=True)

    outcome: Literal["success"] = "success"
    target: Target


class RedirectToCanonical(BaseModel):
    """Identifier is valid but was not written in its canonical case.

    Mixed-case variants of known identifiers are a phishing vector, so they
    get a warning page linking to `path` instead of the target itself.
    """

    model_config = ConfigDict(frozen=True)

    outcome: Literal["redirect"] = "redirect"
    path: str
    canonical: str


def canonical_text(identifier: Identifier) -> str:
    if isinstance(identifier, BrowserLink):
        return identifier.target
    elif isinstance(identifier, (ENSName, PublicChannel)):
        return identifier.name
    elif isinstance(identifier, ChatKey):
        return identifier.text
    return identifier.chat_id


def canonical_path(identifier: Identifier) -> Optional[str]:
    """Canonical request path for identifiers that redirect on case changes."""
    if isinstance(identifier, PublicChannel):
        return f"/{identifier.name}"
    elif isinstance(identifier, ENSName):
        return f"/u/{identifier.name}"
    elif isinstance(identifier, ChatKey):
        return f"/u/{identifier.text}"
    return None


def display_label(identifier: Identifier, display_names: Mapping[str, str]) -> str:
    """Look up the display name of an identifier, falling back to its canonical text."""
    if isinstance(identifier, GroupChat):
        return identifier.group_label
    text = canonical_text(identifier)
    label = display_names.get(text)
    if label is None and isinstance(identifier, ChatKey):
        fingerprint = identifier.fingerprint
        if fingerprint is not None:
            label = display_names.get(fingerprint)
    return label if label is not None else text


def display_text(identifier: Identifier) -> str:
    if isinstance(identifier, PublicChannel):
        return f"#{identifier.name}"
    elif isinstance(identifier, ENSName):
        return f"@{identifier.name}"
    elif isinstance(identifier, GroupChat):
        return identifier.group_label
    return canonical_text(identifier)


def resolve_identifier(
    request: RawRequest,
    identifier: Identifier,
    native_scheme: str,
    display_names: Mapping[str, str],
) -> Success | RedirectToCanonical:
    """Describe the target of a validated identifier.

    Args:
        request: Request the identifier was parsed from
        identifier: Validated, canonical identifier
        native_scheme: URI scheme of the native app, e.g. `status-im`
        display_names: Display-name table

    Returns:
        RedirectToCanonical if the request path differs from the canonical
        path only by case, Success otherwise
    """
    path = canonical_path(identifier)
    if path is not None:
        requested = "/" + unquote(request.path)
        if requested != path and requested.lower() == path.lower():
            logger.info("Redirecting %s to canonical %s", requested, path)
            return RedirectToCanonical(path=path, canonical=canonical_text(identifier))

    return Success(
        target=Target(
            kind=identifier.kind,
            canonical=canonical_text(identifier),
            native_uri=f"{native_scheme}://{request.native_path}",
            label=display_label(identifier, display_names),
            display=display_text(identifier),
            indexable=identifier.kind in INDEXABLE_KINDS,
        )
    )
