"""Chat public key decoders.

Chat keys are secp256k1 public keys, written in one of three encodings:

1. Hex: `0x` followed by the 65-byte uncompressed key as 130 hex digits.
2. Multibase base16: `f` followed by hex digits of the multicodec
   `secp256k1-pub` tag (`e7 01`) and the compressed (33 byte) or
   uncompressed (65 byte) key.
3. Compressed: `z` followed by base58btc of the multicodec tag and the
   33-byte compressed key. The base58 alphabet is case-sensitive.

Every decoder checks the exact text length before decoding anything, then the
alphabet, then the format tag, raising InvalidInputException on the first
failure.
"""

from enum import StrEnum
from typing import Optional

import based58

from network.planq.join.resolve.charset import (
    BASE58_ALPHABET,
    HEX_DIGITS,
    check_charset,
    exact_length,
)
from network.planq.join.resolve.errors import InvalidInputException


class KeyEncoding(StrEnum):
    """Textual encodings accepted for chat public keys."""

    hex = "hex"
    multibase = "multibase"
    compressed = "compressed"


HEX_KEY_PREFIX = "0x"
MULTIBASE_BASE16_PREFIXES = "fF"
MULTIBASE_BASE58BTC_PREFIX = "z"

SECP256K1_PUB_CODEC = b"\xe7\x01"
"""Unsigned varint multicodec code 0xe7 (secp256k1-pub)."""

UNCOMPRESSED_KEY_LENGTH = 65
COMPRESSED_KEY_LENGTH = 33

UNCOMPRESSED_KEY_TAG = 0x04
COMPRESSED_KEY_TAGS = (0x02, 0x03)

HEX_KEY_TEXT_LENGTH = len(HEX_KEY_PREFIX) + 2 * UNCOMPRESSED_KEY_LENGTH

MULTIBASE_COMPRESSED_TEXT_LENGTH = 1 + 2 * (
    len(SECP256K1_PUB_CODEC) + COMPRESSED_KEY_LENGTH
)
MULTIBASE_UNCOMPRESSED_TEXT_LENGTH = 1 + 2 * (
    len(SECP256K1_PUB_CODEC) + UNCOMPRESSED_KEY_LENGTH
)

COMPRESSED_PAYLOAD_LENGTH = len(SECP256K1_PUB_CODEC) + COMPRESSED_KEY_LENGTH

# base58 of a payload starting with 0xe7 always takes 48 digits.
COMPRESSED_TEXT_LENGTH = 1 + 48


def b58decode(digits: str, text: str = "") -> bytes:
    """Decode a base58btc string.

    Leading `1` digits stand for leading zero bytes. The alphabet is checked
    first so that bad characters are reported as InvalidCharset.

    Args:
        digits: base58btc digits, without a multibase prefix
        text: Original input reported with the error

    Raises:
        InvalidInputException: InvalidCharset for characters outside the alphabet
    """
    check_charset(digits, BASE58_ALPHABET, "chat key", text=text)
    return based58.b58decode(digits.encode("ascii"))


def is_public_key(key: bytes) -> bool:
    """Check the length and leading tag byte of a SEC1 encoded public key."""
    if len(key) == UNCOMPRESSED_KEY_LENGTH:
        return key[0] == UNCOMPRESSED_KEY_TAG
    if len(key) == COMPRESSED_KEY_LENGTH:
        return key[0] in COMPRESSED_KEY_TAGS
    return False


def compress_public_key(key: bytes) -> Optional[bytes]:
    """Convert a SEC1 public key to its 33-byte compressed form.

    Returns:
        The compressed key, or None if key is not a SEC1 public key
    """
    if not is_public_key(key):
        return None
    if len(key) == COMPRESSED_KEY_LENGTH:
        return key
    parity = key[-1] & 1
    return bytes([COMPRESSED_KEY_TAGS[parity]]) + key[1 : 1 + 32]


def strip_codec(payload: bytes, text: str) -> bytes:
    """Check the multicodec tag on a decoded payload and return the key after it."""
    if not payload.startswith(SECP256K1_PUB_CODEC):
        raise InvalidInputException.invalid_format_tag(text)
    key = payload[len(SECP256K1_PUB_CODEC) :]
    if not is_public_key(key):
        raise InvalidInputException.invalid_format_tag(text)
    return key


def decode_hex_key(text: str) -> bytes:
    """Decode a `0x` prefixed 65-byte hex key.

    The leading key byte is not checked, group chat keys are opaque 65 byte
    values.

    Returns:
        The 65 raw key bytes
    """
    exact_length(text, HEX_KEY_TEXT_LENGTH, text=text)
    if text[: len(HEX_KEY_PREFIX)].lower() != HEX_KEY_PREFIX:
        raise InvalidInputException.invalid_format_tag(text)
    digits = text[len(HEX_KEY_PREFIX) :]
    check_charset(digits, HEX_DIGITS, "chat key", text=text)
    return bytes.fromhex(digits)


def decode_multibase_key(text: str) -> bytes:
    """Decode a base16 multibase key.

    Returns:
        The decoded payload, multicodec tag included
    """
    exact_length(
        text,
        MULTIBASE_COMPRESSED_TEXT_LENGTH,
        MULTIBASE_UNCOMPRESSED_TEXT_LENGTH,
        text=text,
    )
    if text[0] not in MULTIBASE_BASE16_PREFIXES:
        raise InvalidInputException.invalid_format_tag(text)
    digits = text[1:]
    check_charset(digits, HEX_DIGITS, "chat key", text=text)
    payload = bytes.fromhex(digits)
    strip_codec(payload, text)
    return payload


def decode_compressed_key(text: str) -> bytes:
    """Decode a base58btc multibase compressed key.

    Returns:
        The decoded payload, multicodec tag included
    """
    exact_length(text, COMPRESSED_TEXT_LENGTH, text=text)
    if text[0] != MULTIBASE_BASE58BTC_PREFIX:
        raise InvalidInputException.invalid_format_tag(text)
    payload = b58decode(text[1:], text=text)
    exact_length(payload, COMPRESSED_PAYLOAD_LENGTH, text=text)
    key = strip_codec(payload, text)
    if len(key) != COMPRESSED_KEY_LENGTH:
        raise InvalidInputException.invalid_format_tag(text)
    return payload


DECODERS = {
    KeyEncoding.hex: decode_hex_key,
    KeyEncoding.multibase: decode_multibase_key,
    KeyEncoding.compressed: decode_compressed_key,
}
