"""Domain models for on-chain accounts. Field order is wire order.

Every instance is a point-in-time snapshot parsed from fetched bytes; the
program owns the authoritative state.

SPACE is the allocated account size including the 8-byte discriminator
(strings counted at their max length), matching `8 + INIT_SPACE` on-chain.
"""

from dataclasses import dataclass
from typing import ClassVar

from solders.pubkey import Pubkey

from src.idl_common.constants import PROTOCOL_CONSTANTS_V1
from src.idl_common.enums import BadgeTier, MetricType

_MAX_PROTOCOL_ID = PROTOCOL_CONSTANTS_V1.max_protocol_id_len
_MAX_DESCRIPTION = PROTOCOL_CONSTANTS_V1.max_description_len


@dataclass(frozen=True)
class ProtocolState:
    authority: Pubkey
    treasury: Pubkey
    total_staked: int  # u64
    total_ve_supply: int  # u64
    reward_pool: int  # u64
    total_fees_collected: int  # u64
    total_burned: int  # u64
    bump: int  # u8
    paused: bool

    ACCOUNT_NAME: ClassVar[str] = "ProtocolState"
    SPACE: ClassVar[int] = 8 + 32 + 32 + 8 * 5 + 1 + 1  # 114


@dataclass(frozen=True)
class StakerAccount:
    owner: Pubkey
    staked_amount: int  # u64
    last_stake_timestamp: int  # i64
    bump: int  # u8

    ACCOUNT_NAME: ClassVar[str] = "StakerAccount"
    SPACE: ClassVar[int] = 8 + 32 + 8 + 8 + 1  # 57


@dataclass(frozen=True)
class VePosition:
    owner: Pubkey
    locked_stake: int  # u64
    ve_amount: int  # u64, <= locked_stake
    lock_start: int  # i64
    lock_end: int  # i64, >= lock_start
    bump: int  # u8

    ACCOUNT_NAME: ClassVar[str] = "VePosition"
    SPACE: ClassVar[int] = 8 + 32 + 8 + 8 + 8 + 8 + 1  # 73


@dataclass(frozen=True)
class PredictionMarket:
    creator: Pubkey
    protocol_id: str  # max 32 bytes
    metric_type: MetricType
    target_value: int  # u64
    resolution_timestamp: int  # i64
    description: str  # max 200 bytes
    total_yes_amount: int  # u64
    total_no_amount: int  # u64
    resolved: bool
    outcome: bool | None  # set once at resolution
    actual_value: int | None  # u64, set once at resolution
    oracle: Pubkey
    created_at: int  # i64
    bump: int  # u8

    ACCOUNT_NAME: ClassVar[str] = "PredictionMarket"
    SPACE: ClassVar[int] = (
        8 + 32 + (4 + _MAX_PROTOCOL_ID) + 1 + 8 + 8 + (4 + _MAX_DESCRIPTION)
        + 8 + 8 + 1 + (1 + 1) + (1 + 8) + 32 + 8 + 1
    )  # 366
    # Both strings empty, both options absent
    MIN_SIZE: ClassVar[int] = 8 + 32 + 4 + 1 + 8 + 8 + 4 + 8 + 8 + 1 + 1 + 1 + 32 + 8 + 1  # 125


@dataclass(frozen=True)
class Bet:
    owner: Pubkey
    market: Pubkey
    amount: int  # u64
    effective_amount: int  # u64, amount plus staker bonus
    bet_yes: bool
    timestamp: int  # i64
    claimed: bool
    bump: int  # u8

    ACCOUNT_NAME: ClassVar[str] = "Bet"
    SPACE: ClassVar[int] = 8 + 32 + 32 + 8 + 8 + 1 + 8 + 1 + 1  # 99


@dataclass(frozen=True)
class VolumeBadge:
    owner: Pubkey
    tier: BadgeTier
    volume_usd: int  # u64
    ve_amount: int  # u64
    issued_at: int  # i64
    bump: int  # u8

    ACCOUNT_NAME: ClassVar[str] = "VolumeBadge"
    SPACE: ClassVar[int] = 8 + 32 + 1 + 8 + 8 + 8 + 1  # 66


AccountModel = ProtocolState | StakerAccount | VePosition | PredictionMarket | Bet | VolumeBadge
