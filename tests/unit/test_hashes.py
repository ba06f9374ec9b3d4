"""
Unit tests for fixed-width content hashes (chiplabel.hashes).
"""

import hashlib
import zlib

import pytest

from chiplabel.exceptions import InvalidFieldError
from chiplabel.hashes import Crc32, Digest, Md5, Sha1, Sha256

SHA1_EMPTY = "da39a3ee5e6b4b0d3255bfef95601890afd80709"


class TestParse:
    """Tests for hex parsing and formatting."""

    def test_crc32_parse_and_format(self):
        crc = Crc32.parse("DEADBEEF")
        assert crc.digest == bytes.fromhex("deadbeef")
        assert crc.format() == "deadbeef"
        assert str(crc) == "deadbeef"

    def test_format_inverts_parse_case_insensitively(self):
        assert Sha1.parse(SHA1_EMPTY.upper()).format() == SHA1_EMPTY

    @pytest.mark.parametrize("text", ["deadbee", "deadbeef0", "deadbeeg", ""])
    def test_crc32_rejects_bad_input(self, text):
        with pytest.raises(InvalidFieldError, match="invalid CRC-32"):
            Crc32.parse(text)

    def test_md5_length(self):
        with pytest.raises(InvalidFieldError, match="invalid MD5"):
            Md5.parse("00" * 15)

    def test_raw_bytes_length_checked(self):
        with pytest.raises(InvalidFieldError, match="SHA-256 must be 32 bytes"):
            Sha256(b"\x00" * 31)


class TestOf:
    """Tests for computing digests from data."""

    def test_crc32_is_big_endian(self):
        data = b"123456789"
        assert Crc32.of(data).format() == "cbf43926"
        assert Crc32.of(data).digest == zlib.crc32(data).to_bytes(4, "big")

    def test_sha1_of_empty(self):
        assert Sha1.of(b"").format() == SHA1_EMPTY

    def test_md5_and_sha256_match_hashlib(self):
        assert Md5.of(b"rom").digest == hashlib.md5(b"rom").digest()
        assert Sha256.of(b"rom").digest == hashlib.sha256(b"rom").digest()

    def test_base_class_is_abstract(self):
        with pytest.raises(TypeError):
            Digest(b"")


class TestEquality:
    """Tests for value-based equality and hashing."""

    def test_equal_values(self):
        assert Crc32.parse("00112233") == Crc32.parse("00112233")
        assert len({Crc32.parse("00112233"), Crc32.parse("00112233")}) == 1

    def test_different_types_not_equal(self):
        assert Crc32.parse("00112233") != Md5.parse("00112233" * 4)
