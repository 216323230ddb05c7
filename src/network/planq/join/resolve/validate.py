"""Per-kind identifier validators.

Each validator takes a classified path and its request, and returns the
canonical Identifier or raises InvalidInputException. Validators are looked up
by identifier kind in VALIDATORS.
"""

import string
from typing import Callable, Dict

from network.planq.join.resolve.charset import (
    ChannelRules,
    check_bounded_length,
    check_charset,
)
from network.planq.join.resolve.classify import ENS_SUFFIX, ParsedPath, RawRequest
from network.planq.join.resolve.encoding import DECODERS, KeyEncoding
from network.planq.join.resolve.errors import InvalidInputException
from network.planq.join.resolve.guard import guard
from network.planq.join.resolve.identifiers import (
    BrowserLink,
    ChatKey,
    ENSName,
    GroupChat,
    Identifier,
    IdentifierKind,
    PublicChannel,
)

GROUP_ADMIN_KEY_ARGUMENT = "a"
GROUP_LABEL_ARGUMENT = "a1"
GROUP_CHAT_ID_ARGUMENT = "a2"

ENS_FORBIDDEN_CHARS = frozenset("/\\?#" + string.whitespace)

Validator = Callable[[ParsedPath, RawRequest, ChannelRules], Identifier]


def build_chat_key(text: str, encoding: KeyEncoding) -> ChatKey:
    """Decode and canonicalize a chat key.

    Hex and multibase base16 keys are lowercased. Compressed keys are kept as
    they are, their base58 alphabet is case-sensitive.
    """
    raw = DECODERS[encoding](text)
    canonical = text if encoding == KeyEncoding.compressed else text.lower()
    return ChatKey(encoding=encoding, raw=raw, text=canonical)


def validate_browser_link(
    parsed: ParsedPath, request: RawRequest, rules: ChannelRules
) -> BrowserLink:
    return BrowserLink(target=parsed.value)


def validate_ens_name(
    parsed: ParsedPath, request: RawRequest, rules: ChannelRules
) -> ENSName:
    """Lowercase an ENS name and check that all of its labels are non-empty."""
    name = parsed.value.lower()
    if not name.endswith(ENS_SUFFIX):
        raise InvalidInputException.unrecognized_user_identifier(parsed.value)
    labels = name.removesuffix(ENS_SUFFIX).split(".")
    if any(len(label) == 0 for label in labels):
        raise InvalidInputException.unrecognized_user_identifier(parsed.value)
    if not ENS_FORBIDDEN_CHARS.isdisjoint(name):
        raise InvalidInputException.invalid_charset(parsed.value, "ENS name")
    return ENSName(name=name)


def validate_public_channel(
    parsed: ParsedPath, request: RawRequest, rules: ChannelRules
) -> PublicChannel:
    """Lowercase a channel name and check it against the channel rules."""
    name = parsed.value.lower()
    check_charset(name, rules.allowed_chars, "channel name")
    check_bounded_length(name, rules.min_length, rules.max_length)
    return PublicChannel(name=name)


def validate_chat_key(
    parsed: ParsedPath, request: RawRequest, rules: ChannelRules
) -> ChatKey:
    if parsed.encoding is None:
        raise InvalidInputException.unrecognized_user_identifier(parsed.value)
    return build_chat_key(parsed.value, parsed.encoding)


def validate_group_chat(
    parsed: ParsedPath, request: RawRequest, rules: ChannelRules
) -> GroupChat:
    """Validate a group chat invitation.

    Requires the admin key (`a`), group label (`a1`) and chat id (`a2`)
    arguments. The chat id ends with `-0x<key>`, the part after its last dash
    is the group key. Checks run in order and the first failure is raised:
    missing arguments, then the admin key, then the group key.
    """
    admin_text = request.argument(GROUP_ADMIN_KEY_ARGUMENT)
    label = request.argument(GROUP_LABEL_ARGUMENT)
    chat_id = request.argument(GROUP_CHAT_ID_ARGUMENT)
    if not admin_text or not label or not chat_id:
        raise InvalidInputException.missing_arguments(request.query)

    try:
        admin_key = build_chat_key(admin_text, KeyEncoding.hex)
    except InvalidInputException as e:
        raise InvalidInputException.invalid_admin_key(admin_text) from e

    group_key_text = chat_id.rsplit("-", 1)[-1]
    try:
        group_key = build_chat_key(group_key_text, KeyEncoding.hex)
    except InvalidInputException as e:
        raise InvalidInputException.invalid_group_key(chat_id) from e

    return GroupChat(
        admin_key=admin_key,
        group_label=guard(label),
        group_key=group_key,
        chat_id=chat_id,
    )


VALIDATORS: Dict[IdentifierKind, Validator] = {
    IdentifierKind.browser_link: validate_browser_link,
    IdentifierKind.ens_name: validate_ens_name,
    IdentifierKind.public_channel: validate_public_channel,
    IdentifierKind.chat_key: validate_chat_key,
    IdentifierKind.group_chat: validate_group_chat,
}


def validate(
    parsed: ParsedPath, request: RawRequest, rules: ChannelRules
) -> Identifier:
    """Run the validator registered for the parsed kind."""
    return VALIDATORS[parsed.kind](parsed, request, rules)
