"""Cursor over a raw account buffer.

Wraps the primitive decoders so schema parsers read fields strictly in
declaration order without threading offsets by hand.
"""

from collections.abc import Callable
from typing import TypeVar

from solders.pubkey import Pubkey

from src.idl_codec import primitives

T = TypeVar("T")


class AccountReader:
    def __init__(self, data: bytes, offset: int = 0) -> None:
        self._data = bytes(data)
        self._offset = offset

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def remaining(self) -> int:
        return max(len(self._data) - self._offset, 0)

    def _read(self, decoder: Callable[[bytes, int], tuple[T, int]]) -> T:
        value, self._offset = decoder(self._data, self._offset)
        return value

    def skip(self, size: int) -> bytes:
        """Consume `size` raw bytes (e.g. a discriminator) and return them."""
        primitives.require_bytes(self._data, self._offset, size, "raw bytes")
        chunk = self._data[self._offset : self._offset + size]
        self._offset += size
        return chunk

    def u8(self) -> int:
        return self._read(primitives.decode_u8)

    def u32(self) -> int:
        return self._read(primitives.decode_u32)

    def u64(self) -> int:
        return self._read(primitives.decode_u64)

    def i64(self) -> int:
        return self._read(primitives.decode_i64)

    def boolean(self) -> bool:
        return self._read(primitives.decode_bool)

    def pubkey(self) -> Pubkey:
        return self._read(primitives.decode_pubkey)

    def string(self) -> str:
        return self._read(primitives.decode_string)

    def option(self, decoder: Callable[[bytes, int], tuple[T, int]]) -> T | None:
        return self._read(lambda data, offset: primitives.decode_option(data, offset, decoder))
