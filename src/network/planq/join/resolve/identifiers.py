"""Validated deep-link identifiers.

Identifier is a closed union of immutable pydantic models discriminated by
their `kind` field. Instances are only built by the validators in
network.planq.join.resolve.validate, from untrusted input, once per request.
"""

from enum import StrEnum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from network.planq.join.resolve.encoding import (
    SECP256K1_PUB_CODEC,
    KeyEncoding,
    compress_public_key,
)


class IdentifierKind(StrEnum):
    """Deep-link identifier kind enumeration."""

    browser_link = "browser_link"
    ens_name = "ens_name"
    public_channel = "public_channel"
    chat_key = "chat_key"
    group_chat = "group_chat"


class BrowserLink(BaseModel):
    """Domain or URL to open in the in-app browser, case preserved."""

    model_config = ConfigDict(frozen=True)

    kind: Literal[IdentifierKind.browser_link] = IdentifierKind.browser_link
    target: str


class ENSName(BaseModel):
    """Lowercase `.eth` name."""

    model_config = ConfigDict(frozen=True)

    kind: Literal[IdentifierKind.ens_name] = IdentifierKind.ens_name
    name: str


class PublicChannel(BaseModel):
    """Lowercase public channel name."""

    model_config = ConfigDict(frozen=True)

    kind: Literal[IdentifierKind.public_channel] = IdentifierKind.public_channel
    name: str


class ChatKey(BaseModel):
    """Chat public key in one of the supported encodings.

    `raw` holds the decoded bytes: the 65 key bytes for hex keys, the
    multicodec tag plus key for multibase and compressed keys. `text` is the
    canonical textual form.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal[IdentifierKind.chat_key] = IdentifierKind.chat_key
    encoding: KeyEncoding
    raw: bytes = Field(exclude=True, repr=False)
    text: str

    @property
    def public_key(self) -> bytes:
        """Key bytes without any multicodec tag."""
        if self.encoding == KeyEncoding.hex:
            return self.raw
        return self.raw[len(SECP256K1_PUB_CODEC) :]

    @property
    def fingerprint(self) -> Optional[str]:
        """Compressed key as `0x` prefixed hex, shared by every encoding of one key."""
        compressed = compress_public_key(self.public_key)
        if compressed is None:
            return None
        return "0x" + compressed.hex()


class GroupChat(BaseModel):
    """Group chat invitation.

    `chat_id` is the full chat identifier argument, `<group uuid>-0x<key>`.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal[IdentifierKind.group_chat] = IdentifierKind.group_chat
    admin_key: ChatKey
    group_label: str
    group_key: ChatKey
    chat_id: str


Identifier = Annotated[
    Union[BrowserLink, ENSName, PublicChannel, ChatKey, GroupChat],
    Field(discriminator="kind"),
]
