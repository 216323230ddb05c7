"""
Unit tests for network.planq.join.resolve.encoding

Tests cover the hex, multibase and compressed chat key decoders, base58
decoding and key compression.
"""

import pytest

from network.planq.join.resolve.encoding import (
    SECP256K1_PUB_CODEC,
    b58decode,
    compress_public_key,
    decode_compressed_key,
    decode_hex_key,
    decode_multibase_key,
    is_public_key,
)
from network.planq.join.resolve.errors import ErrorKind, InvalidInputException
from tests.test_helpers import (
    CHAT_KEY,
    COMPRESSED_KEY,
    FINGERPRINT,
    HEX_KEY,
    MULTIBASE_KEY,
    MULTIBASE_UNCOMPRESSED_KEY,
    WRONG_CODEC_COMPRESSED_KEY,
    WRONG_PARITY_COMPRESSED_KEY,
)


def error_kind(decoder, text) -> ErrorKind:
    with pytest.raises(InvalidInputException) as exc_info:
        decoder(text)
    return exc_info.value.kind


def error_value(decoder, text) -> str:
    with pytest.raises(InvalidInputException) as exc_info:
        decoder(text)
    return exc_info.value.value


class TestBase58:
    """Test suite for b58decode function."""

    def test_decode(self):
        """Test decoding the compressed fixture payload."""
        assert b58decode(COMPRESSED_KEY[1:]) == bytes.fromhex(
            "e70103e139115a1acc72510388fcf7e1cf492784c9a839888b25271465f4f1baa38c2d"
        )

    def test_leading_zeros(self):
        """Test leading `1` digits decode to zero bytes."""
        assert b58decode("11") == b"\x00\x00"
        assert b58decode("12") == b"\x00\x01"

    @pytest.mark.parametrize("text", ["0abc", "Oabc", "Iabc", "labc"])
    def test_invalid_characters(self, text):
        """Test characters outside the base58 alphabet."""
        assert error_kind(b58decode, text) == ErrorKind.invalid_charset


class TestPublicKeyHelpers:
    """Test suite for is_public_key and compress_public_key functions."""

    def test_is_public_key(self):
        """Test SEC1 tag bytes and lengths."""
        assert is_public_key(bytes.fromhex("04" + CHAT_KEY)) is True
        assert is_public_key(bytes.fromhex(FINGERPRINT[2:])) is True
        assert is_public_key(bytes.fromhex("05" + CHAT_KEY)) is False
        assert is_public_key(b"\x02" * 32) is False

    def test_compress_odd(self):
        """Test compressing a key with an odd y coordinate."""
        compressed = compress_public_key(bytes.fromhex("04" + CHAT_KEY))
        assert compressed is not None
        assert "0x" + compressed.hex() == FINGERPRINT

    def test_compress_even(self):
        """Test compressing a key with an even y coordinate."""
        key = bytes.fromhex("04" + CHAT_KEY[:-2] + "34")
        compressed = compress_public_key(key)
        assert compressed is not None
        assert compressed[0] == 0x02
        assert compressed[1:] == key[1:33]

    def test_compress_passthrough_and_invalid(self):
        """Test compressed keys pass through and other bytes give None."""
        key = bytes.fromhex(FINGERPRINT[2:])
        assert compress_public_key(key) == key
        assert compress_public_key(b"\xab" * 65) is None


class TestDecodeHexKey:
    """Test suite for decode_hex_key function."""

    def test_valid(self):
        """Test decoding the hex fixture."""
        assert decode_hex_key(HEX_KEY) == bytes.fromhex("04" + CHAT_KEY)

    def test_uppercase_digits(self):
        """Test uppercase hex digits decode to the same bytes."""
        assert decode_hex_key("0x" + HEX_KEY[2:].upper()) == decode_hex_key(HEX_KEY)

    @pytest.mark.parametrize("text", [HEX_KEY[:-1], HEX_KEY + "a", HEX_KEY + "abc", HEX_KEY[:127]])
    def test_incorrect_length(self, text):
        """Test too short and too long keys."""
        assert error_kind(decode_hex_key, text) == ErrorKind.incorrect_key_length

    def test_invalid_digits(self):
        """Test non-hex digits of the right length."""
        assert error_kind(decode_hex_key, HEX_KEY[:-1] + "g") == ErrorKind.invalid_charset

    def test_invalid_digits_report_whole_key(self):
        """Test the error value is the key as written, prefix included."""
        text = HEX_KEY[:-1] + "G"
        assert error_value(decode_hex_key, text) == text

    def test_missing_prefix(self):
        """Test a key of the right length without the 0x prefix."""
        assert error_kind(decode_hex_key, "04" + CHAT_KEY + "ab") == ErrorKind.invalid_format_tag


class TestDecodeMultibaseKey:
    """Test suite for decode_multibase_key function."""

    def test_valid_compressed(self):
        """Test decoding the multibase fixture."""
        payload = decode_multibase_key(MULTIBASE_KEY)
        assert payload.startswith(SECP256K1_PUB_CODEC)
        assert len(payload) == 35

    def test_valid_uncompressed(self):
        """Test decoding a multibase uncompressed key."""
        payload = decode_multibase_key(MULTIBASE_UNCOMPRESSED_KEY)
        assert payload == SECP256K1_PUB_CODEC + bytes.fromhex("04" + CHAT_KEY)

    def test_too_short(self):
        """Test a truncated key."""
        assert error_kind(decode_multibase_key, MULTIBASE_KEY[:46]) == ErrorKind.incorrect_key_length

    def test_too_long(self):
        """Test a key with one extra digit."""
        assert error_kind(decode_multibase_key, MULTIBASE_KEY + "0") == ErrorKind.incorrect_key_length

    def test_invalid_digits(self):
        """Test non-hex digits."""
        assert error_kind(decode_multibase_key, MULTIBASE_KEY[:-1] + "x") == ErrorKind.invalid_charset
        assert error_value(decode_multibase_key, MULTIBASE_KEY[:-1] + "x") == MULTIBASE_KEY[:-1] + "x"

    def test_wrong_codec(self):
        """Test a payload tagged with another multicodec."""
        text = "fe80103" + MULTIBASE_KEY[7:]
        assert error_kind(decode_multibase_key, text) == ErrorKind.invalid_format_tag

    def test_wrong_key_tag(self):
        """Test a 33 byte key without a compressed key marker."""
        text = "fe70104" + MULTIBASE_KEY[7:]
        assert error_kind(decode_multibase_key, text) == ErrorKind.invalid_format_tag


class TestDecodeCompressedKey:
    """Test suite for decode_compressed_key function."""

    def test_valid(self):
        """Test decoding the compressed fixture."""
        payload = decode_compressed_key(COMPRESSED_KEY)
        assert payload == SECP256K1_PUB_CODEC + bytes.fromhex(FINGERPRINT[2:])

    def test_too_short(self):
        """Test a truncated key."""
        assert error_kind(decode_compressed_key, COMPRESSED_KEY[:46]) == ErrorKind.incorrect_key_length

    def test_too_long(self):
        """Test a key with one extra digit."""
        assert error_kind(decode_compressed_key, COMPRESSED_KEY + "a") == ErrorKind.incorrect_key_length

    def test_invalid_characters(self):
        """Test a character outside the base58 alphabet."""
        text = COMPRESSED_KEY[:-1] + "0"
        assert error_kind(decode_compressed_key, text) == ErrorKind.invalid_charset
        assert error_value(decode_compressed_key, text) == text

    def test_case_is_significant(self):
        """Test a lowercased key is not folded back to the original."""
        with pytest.raises(InvalidInputException):
            decode_compressed_key(COMPRESSED_KEY.lower())

    def test_wrong_codec(self):
        """Test a payload tagged with another multicodec."""
        assert error_kind(decode_compressed_key, WRONG_CODEC_COMPRESSED_KEY) == ErrorKind.invalid_format_tag

    def test_wrong_key_tag(self):
        """Test a payload whose key marker is not 02 or 03."""
        assert error_kind(decode_compressed_key, WRONG_PARITY_COMPRESSED_KEY) == ErrorKind.invalid_format_tag
