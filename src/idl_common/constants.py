"""Versioned protocol constants: must match the deployed program byte for byte.

Every fee, bonus, lock and badge constant lives in one frozen model so call
sites never carry their own literals. A new program release that changes any
value registers a new version instead of editing version 1.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from config.settings import settings
from src.idl_common.enums import BadgeTier
from src.idl_common.errors import UnsupportedOperationError

_EARNED_TIERS = (
    BadgeTier.BRONZE,
    BadgeTier.SILVER,
    BadgeTier.GOLD,
    BadgeTier.PLATINUM,
    BadgeTier.DIAMOND,
)


class ProtocolConstants(BaseModel):
    model_config = ConfigDict(frozen=True)

    version: int = 1

    # veIDL locking (seconds)
    max_lock_duration: int = Field(126_144_000, gt=0)  # 4 years
    min_lock_duration: int = Field(604_800, gt=0)  # 1 week

    # Winning-bet fee and how it is split
    bet_fee_bps: int = Field(300, ge=0, le=10_000)  # 3%
    staker_fee_share_bps: int = 5000
    creator_fee_share_bps: int = 2500
    treasury_fee_share_bps: int = 1500
    burn_fee_share_bps: int = 1000

    # Staker betting bonus: 1% per whole million staked, max 50%
    stake_bonus_unit: int = Field(1_000_000, gt=0)
    stake_bonus_per_unit_bps: int = 100
    max_stake_bonus_bps: int = 5000

    # Market timing (seconds)
    betting_close_buffer: int = 300
    min_market_lead_time: int = 3600

    # Allocated string capacity (bytes)
    max_protocol_id_len: int = 32
    max_description_len: int = 200

    badge_volume_thresholds: dict[BadgeTier, int] = {
        BadgeTier.BRONZE: 1_000,
        BadgeTier.SILVER: 10_000,
        BadgeTier.GOLD: 100_000,
        BadgeTier.PLATINUM: 500_000,
        BadgeTier.DIAMOND: 1_000_000,
    }
    badge_ve_grants: dict[BadgeTier, int] = {
        BadgeTier.BRONZE: 50_000,
        BadgeTier.SILVER: 250_000,
        BadgeTier.GOLD: 1_000_000,
        BadgeTier.PLATINUM: 5_000_000,
        BadgeTier.DIAMOND: 20_000_000,
    }

    @model_validator(mode="after")
    def check_consistency(self) -> "ProtocolConstants":
        shares = (
            self.staker_fee_share_bps
            + self.creator_fee_share_bps
            + self.treasury_fee_share_bps
            + self.burn_fee_share_bps
        )
        if shares != 10_000:
            raise ValueError(f"Fee shares must sum to 10000 bps, got {shares}")
        if self.min_lock_duration > self.max_lock_duration:
            raise ValueError("min_lock_duration must not exceed max_lock_duration")
        for table_name in ("badge_volume_thresholds", "badge_ve_grants"):
            table = getattr(self, table_name)
            if set(table) != set(_EARNED_TIERS):
                raise ValueError(f"{table_name} must cover exactly Bronze..Diamond")
            values = [table[t] for t in _EARNED_TIERS]
            if any(a >= b for a, b in zip(values, values[1:])):
                raise ValueError(f"{table_name} must increase strictly by tier")
        return self


PROTOCOL_CONSTANTS_V1 = ProtocolConstants()

_REGISTRY: dict[int, ProtocolConstants] = {
    PROTOCOL_CONSTANTS_V1.version: PROTOCOL_CONSTANTS_V1,
}


def get_protocol_constants(version: int | None = None) -> ProtocolConstants:
    """Return the constants for `version` (default: settings.PROTOCOL_CONSTANTS_VERSION)."""
    if version is None:
        version = settings.PROTOCOL_CONSTANTS_VERSION
    try:
        return _REGISTRY[version]
    except KeyError:
        raise UnsupportedOperationError(f"protocol constants version {version}") from None
