"""Parse raw account bytes into domain models.

Each parser:
  1. rejects buffers shorter than the account's minimum size (InvalidAccountDataError),
  2. checks the 8-byte Anchor account discriminator (TypeMismatchError),
  3. reads fields strictly in declaration order.

Any short read is fatal; a partially-filled model is never returned. Trailing
bytes are ignored: accounts are allocated for max-length strings, so a
market with short strings carries zero padding after `bump`.
"""

import logging
from collections.abc import Callable

from src.idl_accounts.domain.models import (
    AccountModel,
    Bet,
    PredictionMarket,
    ProtocolState,
    StakerAccount,
    VePosition,
    VolumeBadge,
)
from src.idl_codec.discriminator import (
    DISCRIMINATOR_LEN,
    check_account_discriminator,
    identify_account,
)
from src.idl_codec.primitives import decode_bool, decode_u64
from src.idl_codec.reader import AccountReader
from src.idl_common.enums import BadgeTier, MetricType
from src.idl_common.errors import InvalidAccountDataError

logger = logging.getLogger(__name__)


def _open(data: bytes, name: str, min_size: int) -> AccountReader:
    if len(data) < min_size:
        raise InvalidAccountDataError(
            f"{name} needs at least {min_size} bytes, got {len(data)}"
        )
    check_account_discriminator(data, name)
    reader = AccountReader(data)
    reader.skip(DISCRIMINATOR_LEN)
    return reader


def parse_protocol_state(data: bytes) -> ProtocolState:
    r = _open(data, ProtocolState.ACCOUNT_NAME, ProtocolState.SPACE)
    return ProtocolState(
        authority=r.pubkey(),
        treasury=r.pubkey(),
        total_staked=r.u64(),
        total_ve_supply=r.u64(),
        reward_pool=r.u64(),
        total_fees_collected=r.u64(),
        total_burned=r.u64(),
        bump=r.u8(),
        paused=r.boolean(),
    )


def parse_staker_account(data: bytes) -> StakerAccount:
    r = _open(data, StakerAccount.ACCOUNT_NAME, StakerAccount.SPACE)
    return StakerAccount(
        owner=r.pubkey(),
        staked_amount=r.u64(),
        last_stake_timestamp=r.i64(),
        bump=r.u8(),
    )


def parse_ve_position(data: bytes) -> VePosition:
    r = _open(data, VePosition.ACCOUNT_NAME, VePosition.SPACE)
    return VePosition(
        owner=r.pubkey(),
        locked_stake=r.u64(),
        ve_amount=r.u64(),
        lock_start=r.i64(),
        lock_end=r.i64(),
        bump=r.u8(),
    )


def parse_prediction_market(data: bytes) -> PredictionMarket:
    """Strings are length-prefixed, so every later offset depends on them."""
    r = _open(data, PredictionMarket.ACCOUNT_NAME, PredictionMarket.MIN_SIZE)
    market = PredictionMarket(
        creator=r.pubkey(),
        protocol_id=r.string(),
        metric_type=MetricType.from_byte(r.u8()),
        target_value=r.u64(),
        resolution_timestamp=r.i64(),
        description=r.string(),
        total_yes_amount=r.u64(),
        total_no_amount=r.u64(),
        resolved=r.boolean(),
        outcome=r.option(decode_bool),
        actual_value=r.option(decode_u64),
        oracle=r.pubkey(),
        created_at=r.i64(),
        bump=r.u8(),
    )
    logger.debug(
        "Parsed market: protocol_id=%s, resolved=%s, consumed=%d/%d",
        market.protocol_id, market.resolved, r.offset, len(data),
    )
    return market


def parse_bet(data: bytes) -> Bet:
    r = _open(data, Bet.ACCOUNT_NAME, Bet.SPACE)
    return Bet(
        owner=r.pubkey(),
        market=r.pubkey(),
        amount=r.u64(),
        effective_amount=r.u64(),
        bet_yes=r.boolean(),
        timestamp=r.i64(),
        claimed=r.boolean(),
        bump=r.u8(),
    )


def parse_volume_badge(data: bytes) -> VolumeBadge:
    r = _open(data, VolumeBadge.ACCOUNT_NAME, VolumeBadge.SPACE)
    return VolumeBadge(
        owner=r.pubkey(),
        tier=BadgeTier.from_byte(r.u8()),
        volume_usd=r.u64(),
        ve_amount=r.u64(),
        issued_at=r.i64(),
        bump=r.u8(),
    )


_PARSERS: dict[str, Callable[[bytes], AccountModel]] = {
    ProtocolState.ACCOUNT_NAME: parse_protocol_state,
    StakerAccount.ACCOUNT_NAME: parse_staker_account,
    VePosition.ACCOUNT_NAME: parse_ve_position,
    PredictionMarket.ACCOUNT_NAME: parse_prediction_market,
    Bet.ACCOUNT_NAME: parse_bet,
    VolumeBadge.ACCOUNT_NAME: parse_volume_badge,
}


def parse_account(data: bytes) -> AccountModel:
    """Parse any IDL Protocol account by its discriminator."""
    if len(data) < DISCRIMINATOR_LEN:
        raise InvalidAccountDataError(
            f"account needs at least {DISCRIMINATOR_LEN} bytes, got {len(data)}"
        )
    return _PARSERS[identify_account(data)](data)
