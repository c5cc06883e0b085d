"""Instruction argument layouts: discriminator followed by args in handler order.

The table is the single source of truth for both encoding (builders) and
decoding (inspecting captured transactions).
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from src.idl_codec import primitives
from src.idl_codec.discriminator import (
    DISCRIMINATOR_LEN,
    get_instruction_discriminator,
    identify_instruction,
)
from src.idl_common.enums import BadgeTier, MetricType
from src.idl_common.errors import InvalidAccountDataError, ValueOutOfRangeError

ARG_LAYOUTS: dict[str, tuple[tuple[str, str], ...]] = {
    "initialize": (),
    "stake": (("amount", "u64"),),
    "unstake": (("amount", "u64"),),
    "lock_for_ve": (("lock_duration", "i64"),),
    "unlock_ve": (),
    "create_market": (
        ("protocol_id", "string"),
        ("metric_type", "metric_type"),
        ("target_value", "u64"),
        ("resolution_timestamp", "i64"),
        ("description", "string"),
    ),
    "place_bet": (("amount", "u64"), ("bet_yes", "bool"), ("nonce", "u64")),
    "resolve_market": (("actual_value", "u64"),),
    "claim_winnings": (),
    "issue_badge": (("tier", "badge_tier"), ("volume_usd", "u64")),
    "revoke_badge": (),
    "set_paused": (("paused", "bool"),),
    "transfer_authority": (("new_authority", "pubkey"),),
}


def _encode_metric_type(value: int) -> bytes:
    try:
        return primitives.encode_u8(int(MetricType(value)))
    except ValueError:
        raise ValueOutOfRangeError("MetricType", value) from None


def _encode_badge_tier(value: int) -> bytes:
    try:
        return primitives.encode_u8(int(BadgeTier(value)))
    except ValueError:
        raise ValueOutOfRangeError("BadgeTier", value) from None


def _decode_metric_type(data: bytes, offset: int) -> tuple[MetricType, int]:
    raw, offset = primitives.decode_u8(data, offset)
    return MetricType.from_byte(raw), offset


def _decode_badge_tier(data: bytes, offset: int) -> tuple[BadgeTier, int]:
    raw, offset = primitives.decode_u8(data, offset)
    return BadgeTier.from_byte(raw), offset


_ENCODERS: dict[str, Callable[[Any], bytes]] = {
    "u64": primitives.encode_u64,
    "i64": primitives.encode_i64,
    "bool": primitives.encode_bool,
    "pubkey": primitives.encode_pubkey,
    "string": primitives.encode_string,
    "metric_type": _encode_metric_type,
    "badge_tier": _encode_badge_tier,
}

_DECODERS: dict[str, Callable[[bytes, int], tuple[Any, int]]] = {
    "u64": primitives.decode_u64,
    "i64": primitives.decode_i64,
    "bool": primitives.decode_bool,
    "pubkey": primitives.decode_pubkey,
    "string": primitives.decode_string,
    "metric_type": _decode_metric_type,
    "badge_tier": _decode_badge_tier,
}


@dataclass(frozen=True)
class DecodedInstruction:
    name: str
    args: dict[str, Any]


def encode_instruction_data(name: str, args: Mapping[str, Any] | None = None) -> bytes:
    """discriminator(name) + args encoded in layout order.

    Raises UnsupportedOperationError for unknown names and
    ValueOutOfRangeError when an argument is missing or does not fit.
    """
    discriminator = get_instruction_discriminator(name)
    args = args or {}
    parts = [discriminator]
    for field, kind in ARG_LAYOUTS[name]:
        if field not in args:
            raise ValueOutOfRangeError(f"{name}.{field}", "<missing>")
        parts.append(_ENCODERS[kind](args[field]))
    return b"".join(parts)


def decode_instruction_data(data: bytes) -> DecodedInstruction:
    """Inverse of encode_instruction_data; trailing bytes are rejected."""
    if len(data) < DISCRIMINATOR_LEN:
        raise InvalidAccountDataError(
            f"instruction data needs at least {DISCRIMINATOR_LEN} bytes, got {len(data)}"
        )
    name = identify_instruction(data)
    offset = DISCRIMINATOR_LEN
    args: dict[str, Any] = {}
    for field, kind in ARG_LAYOUTS[name]:
        args[field], offset = _DECODERS[kind](data, offset)
    if offset != len(data):
        raise InvalidAccountDataError(
            f"{name} has {len(data) - offset} unexpected trailing bytes"
        )
    return DecodedInstruction(name=name, args=args)
