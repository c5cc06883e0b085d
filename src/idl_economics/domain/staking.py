"""Staking and veIDL arithmetic, client-side estimates of the program's math.

veIDL = staked * lock_duration / MAX_LOCK_DURATION (u128 intermediate, floor)
bonus = min(staked // 1_000_000 * 100, 5000) bps
effective = amount * (10000 + bonus) / 10000 (u128 intermediate, floor)
"""

from src.idl_common.checked_math import (
    BPS_DENOMINATOR,
    mul_div_floor,
    require_i64,
    require_u64,
)
from src.idl_common.constants import ProtocolConstants, get_protocol_constants
from src.idl_common.errors import ValueOutOfRangeError


def calculate_ve_amount(
    staked_amount: int,
    lock_duration: int,
    constants: ProtocolConstants | None = None,
) -> int:
    """veIDL for locking `staked_amount` for `lock_duration` seconds.

    Never exceeds staked_amount for 0 <= lock_duration <= MAX_LOCK_DURATION.
    """
    c = constants or get_protocol_constants()
    require_u64(staked_amount, "staked_amount")
    require_i64(lock_duration, "lock_duration")
    if lock_duration < 0:
        raise ValueOutOfRangeError("lock_duration", lock_duration)
    return mul_div_floor(staked_amount, lock_duration, c.max_lock_duration)


def is_valid_lock_duration(
    lock_duration: int,
    constants: ProtocolConstants | None = None,
) -> bool:
    """MIN_LOCK_DURATION <= lock_duration <= MAX_LOCK_DURATION, as lock_for_ve requires."""
    c = constants or get_protocol_constants()
    return c.min_lock_duration <= lock_duration <= c.max_lock_duration


def calculate_staker_bonus_bps(
    staked_amount: int,
    constants: ProtocolConstants | None = None,
) -> int:
    """1% (100 bps) per whole 1,000,000 staked, capped at 5000 bps."""
    c = constants or get_protocol_constants()
    require_u64(staked_amount, "staked_amount")
    units = staked_amount // c.stake_bonus_unit
    # The program multiplies with saturating_mul, so the cap always wins
    return min(units * c.stake_bonus_per_unit_bps, c.max_stake_bonus_bps)


def calculate_effective_amount(
    amount: int,
    staked_amount: int,
    constants: ProtocolConstants | None = None,
) -> int:
    """Bet amount credited to the pool after the staker bonus."""
    c = constants or get_protocol_constants()
    require_u64(amount, "amount")
    multiplier = BPS_DENOMINATOR + calculate_staker_bonus_bps(staked_amount, c)
    return mul_div_floor(amount, multiplier, BPS_DENOMINATOR)


def unlocked_stake(
    staked_amount: int,
    locked_stake: int,
    lock_end: int,
    now: int,
) -> int:
    """Amount unstake will accept right now.

    While the lock is active only the excess over the locked stake is free
    (saturating at zero); once lock_end has passed everything is.
    """
    require_u64(staked_amount, "staked_amount")
    require_u64(locked_stake, "locked_stake")
    if now >= lock_end:
        return staked_amount
    return max(staked_amount - locked_stake, 0)
