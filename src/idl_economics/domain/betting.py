"""Parimutuel payout and fee arithmetic for prediction markets.

Mirrors claim_winnings:
  winning_pool = pool on the bet's side, losing_pool = the other
  share        = effective_amount * losing_pool // winning_pool (0 if winning_pool == 0)
  gross        = amount + share
  fee          = gross * BET_FEE_BPS // 10000
  net          = gross - fee

All divisions floor (operands are non-negative, so this equals the
program's truncation). Estimates only: the program is authoritative.
"""

from dataclasses import dataclass

from src.idl_accounts.domain.models import PredictionMarket
from src.idl_common.checked_math import (
    bps_of,
    checked_add,
    mul_div_floor,
    require_i64,
    require_u64,
)
from src.idl_common.constants import ProtocolConstants, get_protocol_constants
from src.idl_common.errors import ValueOutOfRangeError


@dataclass(frozen=True)
class PayoutEstimate:
    share: int
    gross_winnings: int
    fee: int
    net_winnings: int


@dataclass(frozen=True)
class FeeSplit:
    """Per-destination cut of a winning-bet fee, each floored independently.

    The program credits only `stakers` (reward_pool) and `burned`
    (total_burned) to ProtocolState; creator/treasury shares are reported
    for completeness. Rounding dust means the parts may sum to less than fee.
    """

    stakers: int
    creator: int
    treasury: int
    burned: int


def estimate_winnings(
    amount: int,
    effective_amount: int,
    bet_yes: bool,
    total_yes_amount: int,
    total_no_amount: int,
    fee_bps: int | None = None,
    constants: ProtocolConstants | None = None,
) -> PayoutEstimate:
    """Payout for a winning bet given the market's final pool totals."""
    c = constants or get_protocol_constants()
    if fee_bps is None:
        fee_bps = c.bet_fee_bps
    for name, value in (
        ("amount", amount),
        ("effective_amount", effective_amount),
        ("total_yes_amount", total_yes_amount),
        ("total_no_amount", total_no_amount),
        ("fee_bps", fee_bps),
    ):
        require_u64(value, name)
    if fee_bps > 10_000:
        raise ValueOutOfRangeError("fee_bps", fee_bps)

    if bet_yes:
        winning_pool, losing_pool = total_yes_amount, total_no_amount
    else:
        winning_pool, losing_pool = total_no_amount, total_yes_amount

    share = mul_div_floor(effective_amount, losing_pool, winning_pool) if winning_pool > 0 else 0
    gross = checked_add(amount, share)
    fee = bps_of(gross, fee_bps)
    return PayoutEstimate(share=share, gross_winnings=gross, fee=fee, net_winnings=gross - fee)


def split_fee(fee: int, constants: ProtocolConstants | None = None) -> FeeSplit:
    c = constants or get_protocol_constants()
    require_u64(fee, "fee")
    return FeeSplit(
        stakers=bps_of(fee, c.staker_fee_share_bps),
        creator=bps_of(fee, c.creator_fee_share_bps),
        treasury=bps_of(fee, c.treasury_fee_share_bps),
        burned=bps_of(fee, c.burn_fee_share_bps),
    )


def resolve_outcome(target_value: int, actual_value: int) -> bool:
    """YES wins when the observed metric reaches the target."""
    require_u64(target_value, "target_value")
    require_u64(actual_value, "actual_value")
    return actual_value >= target_value


def is_winning_bet(bet_yes: bool, outcome: bool) -> bool:
    return bet_yes == outcome


def estimate_claim(
    market: PredictionMarket,
    amount: int,
    effective_amount: int,
    bet_yes: bool,
    constants: ProtocolConstants | None = None,
) -> PayoutEstimate | None:
    """Payout for a bet on a resolved market; None for a losing bet.

    Raises ValueOutOfRangeError if the market has no outcome yet.
    """
    if not market.resolved or market.outcome is None:
        raise ValueOutOfRangeError("market.outcome", market.outcome)
    if not is_winning_bet(bet_yes, market.outcome):
        return None
    return estimate_winnings(
        amount,
        effective_amount,
        bet_yes,
        market.total_yes_amount,
        market.total_no_amount,
        constants=constants,
    )


def is_betting_open(
    market: PredictionMarket,
    now: int,
    constants: ProtocolConstants | None = None,
) -> bool:
    """place_bet is accepted until BETTING_CLOSE_BUFFER seconds before resolution."""
    c = constants or get_protocol_constants()
    require_i64(now, "now")
    return not market.resolved and now < market.resolution_timestamp - c.betting_close_buffer


def is_resolvable(market: PredictionMarket, now: int) -> bool:
    """resolve_market is accepted once resolution_timestamp is reached, exactly once."""
    require_i64(now, "now")
    return not market.resolved and now >= market.resolution_timestamp


def is_valid_resolution_timestamp(
    resolution_timestamp: int,
    now: int,
    constants: ProtocolConstants | None = None,
) -> bool:
    """create_market requires resolution strictly more than MIN_MARKET_LEAD_TIME ahead."""
    c = constants or get_protocol_constants()
    require_i64(resolution_timestamp, "resolution_timestamp")
    require_i64(now, "now")
    return resolution_timestamp > now + c.min_market_lead_time
