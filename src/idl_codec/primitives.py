"""Borsh primitive encoders/decoders.

Every decoder takes (data, offset) and returns (value, new_offset). A buffer
shorter than the field raises InvalidAccountDataError; nothing is ever read
past the end. Encoders reject values outside the field's range with
ValueOutOfRangeError rather than truncating them.

Layout:
  u8    1 byte
  u32   4 bytes little-endian
  u64   8 bytes little-endian
  i64   8 bytes little-endian, two's complement
  bool  1 byte, 0 or 1
  pubkey 32 raw bytes
  string u32 byte length + UTF-8 bytes
  option 1 presence byte (0/1) + value only when present
"""

import struct
from collections.abc import Callable
from typing import TypeVar

from solders.pubkey import Pubkey

from src.idl_common.checked_math import I64_MAX, I64_MIN, U8_MAX, U32_MAX, U64_MAX
from src.idl_common.errors import InvalidAccountDataError, ValueOutOfRangeError

T = TypeVar("T")

PUBKEY_LEN = 32

_U32 = struct.Struct("<I")
_U64 = struct.Struct("<Q")
_I64 = struct.Struct("<q")


def require_bytes(data: bytes, offset: int, size: int, kind: str) -> None:
    if offset < 0 or len(data) - offset < size:
        raise InvalidAccountDataError(
            f"{kind} needs {size} bytes at offset {offset}, buffer has {max(len(data) - offset, 0)}"
        )


def _check_int(value: int, low: int, high: int, kind: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or not (low <= value <= high):
        raise ValueOutOfRangeError(kind, value)


# ---------------------------------------------------------------------------
# Integers
# ---------------------------------------------------------------------------


def encode_u8(value: int) -> bytes:
    _check_int(value, 0, U8_MAX, "u8")
    return bytes([value])


def decode_u8(data: bytes, offset: int = 0) -> tuple[int, int]:
    require_bytes(data, offset, 1, "u8")
    return data[offset], offset + 1


def encode_u32(value: int) -> bytes:
    _check_int(value, 0, U32_MAX, "u32")
    return _U32.pack(value)


def decode_u32(data: bytes, offset: int = 0) -> tuple[int, int]:
    require_bytes(data, offset, 4, "u32")
    return _U32.unpack_from(data, offset)[0], offset + 4


def encode_u64(value: int) -> bytes:
    _check_int(value, 0, U64_MAX, "u64")
    return _U64.pack(value)


def decode_u64(data: bytes, offset: int = 0) -> tuple[int, int]:
    require_bytes(data, offset, 8, "u64")
    return _U64.unpack_from(data, offset)[0], offset + 8


def encode_i64(value: int) -> bytes:
    _check_int(value, I64_MIN, I64_MAX, "i64")
    return _I64.pack(value)


def decode_i64(data: bytes, offset: int = 0) -> tuple[int, int]:
    require_bytes(data, offset, 8, "i64")
    return _I64.unpack_from(data, offset)[0], offset + 8


# ---------------------------------------------------------------------------
# Bool / Pubkey / String
# ---------------------------------------------------------------------------


def encode_bool(value: bool) -> bytes:
    if not isinstance(value, bool):
        raise ValueOutOfRangeError("bool", value)
    return b"\x01" if value else b"\x00"


def decode_bool(data: bytes, offset: int = 0) -> tuple[bool, int]:
    require_bytes(data, offset, 1, "bool")
    raw = data[offset]
    if raw > 1:
        raise InvalidAccountDataError(f"bool byte must be 0 or 1, got {raw} at offset {offset}")
    return raw == 1, offset + 1


def encode_pubkey(value: Pubkey) -> bytes:
    if not isinstance(value, Pubkey):
        raise ValueOutOfRangeError("pubkey", value)
    return bytes(value)


def decode_pubkey(data: bytes, offset: int = 0) -> tuple[Pubkey, int]:
    require_bytes(data, offset, PUBKEY_LEN, "pubkey")
    return Pubkey.from_bytes(bytes(data[offset : offset + PUBKEY_LEN])), offset + PUBKEY_LEN


def encode_string(value: str) -> bytes:
    raw = value.encode("utf-8")
    return encode_u32(len(raw)) + raw


def decode_string(data: bytes, offset: int = 0) -> tuple[str, int]:
    length, offset = decode_u32(data, offset)
    require_bytes(data, offset, length, "string body")
    try:
        text = bytes(data[offset : offset + length]).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidAccountDataError(f"string at offset {offset} is not UTF-8: {exc}") from exc
    return text, offset + length


# ---------------------------------------------------------------------------
# Option<T>
# ---------------------------------------------------------------------------


def encode_option(value: T | None, encoder: Callable[[T], bytes]) -> bytes:
    if value is None:
        return b"\x00"
    return b"\x01" + encoder(value)


def decode_option(
    data: bytes,
    offset: int,
    decoder: Callable[[bytes, int], tuple[T, int]],
) -> tuple[T | None, int]:
    require_bytes(data, offset, 1, "option flag")
    flag = data[offset]
    if flag == 0:
        return None, offset + 1
    if flag != 1:
        raise InvalidAccountDataError(f"option flag must be 0 or 1, got {flag} at offset {offset}")
    return decoder(data, offset + 1)
