"""
Fixed-width content hashes used to identify cartridge ROM dumps.

Each type wraps exactly SIZE bytes. ``parse`` accepts exactly 2*SIZE hex
digits in either case; ``format`` returns lowercase hex, so
``Sha1.parse(s).format() == s.lower()`` for any valid ``s``.
"""

from __future__ import annotations

import hashlib
import zlib
from abc import ABC, abstractmethod
from typing import ClassVar

from chiplabel.exceptions import InvalidFieldError

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class Digest(ABC):
    """Base class for the fixed-width hash types."""

    SIZE: ClassVar[int] = 0
    LABEL: ClassVar[str] = ""

    __slots__ = ("_data",)

    def __init__(self, data: bytes) -> None:
        if len(data) != self.SIZE:
            raise InvalidFieldError(
                f"{self.LABEL} must be {self.SIZE} bytes, got {len(data)}",
                self.LABEL,
                data,
            )
        self._data = bytes(data)

    @classmethod
    def parse(cls, text: str) -> Digest:
        """Decode a hex string into a hash value.

        Raises:
            InvalidFieldError: If the length is not 2*SIZE or a character is not hex.
        """
        if len(text) != cls.SIZE * 2 or not _HEX_DIGITS.issuperset(text):
            raise InvalidFieldError(f"invalid {cls.LABEL}", cls.LABEL, text)
        return cls(bytes(int(text[i:i + 2], 16) for i in range(0, len(text), 2)))

    @classmethod
    @abstractmethod
    def of(cls, data: bytes) -> Digest:
        """Compute the hash of *data*."""

    @property
    def digest(self) -> bytes:
        return self._data

    def format(self) -> str:
        return self._data.hex()

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.format()!r})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._data))


class Crc32(Digest):
    SIZE = 4
    LABEL = "CRC-32"

    @classmethod
    def of(cls, data: bytes) -> Crc32:
        return cls(zlib.crc32(data).to_bytes(4, "big"))


class Md5(Digest):
    SIZE = 16
    LABEL = "MD5"

    @classmethod
    def of(cls, data: bytes) -> Md5:
        return cls(hashlib.md5(data).digest())


class Sha1(Digest):
    SIZE = 20
    LABEL = "SHA-1"

    @classmethod
    def of(cls, data: bytes) -> Sha1:
        return cls(hashlib.sha1(data).digest())


class Sha256(Digest):
    SIZE = 32
    LABEL = "SHA-256"

    @classmethod
    def of(cls, data: bytes) -> Sha256:
        return cls(hashlib.sha256(data).digest())
