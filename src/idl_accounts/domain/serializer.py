"""Serialize domain models back to account bytes. Exact inverse of parser.py.

Used to build fixtures and to verify round-trips; output carries no padding
beyond the encoded fields.
"""

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
from src.idl_codec.discriminator import account_discriminator
from src.idl_codec.primitives import (
    encode_bool,
    encode_i64,
    encode_option,
    encode_pubkey,
    encode_string,
    encode_u8,
    encode_u64,
)


def serialize_protocol_state(state: ProtocolState) -> bytes:
    return b"".join([
        account_discriminator(ProtocolState.ACCOUNT_NAME),
        encode_pubkey(state.authority),
        encode_pubkey(state.treasury),
        encode_u64(state.total_staked),
        encode_u64(state.total_ve_supply),
        encode_u64(state.reward_pool),
        encode_u64(state.total_fees_collected),
        encode_u64(state.total_burned),
        encode_u8(state.bump),
        encode_bool(state.paused),
    ])


def serialize_staker_account(staker: StakerAccount) -> bytes:
    return b"".join([
        account_discriminator(StakerAccount.ACCOUNT_NAME),
        encode_pubkey(staker.owner),
        encode_u64(staker.staked_amount),
        encode_i64(staker.last_stake_timestamp),
        encode_u8(staker.bump),
    ])


def serialize_ve_position(position: VePosition) -> bytes:
    return b"".join([
        account_discriminator(VePosition.ACCOUNT_NAME),
        encode_pubkey(position.owner),
        encode_u64(position.locked_stake),
        encode_u64(position.ve_amount),
        encode_i64(position.lock_start),
        encode_i64(position.lock_end),
        encode_u8(position.bump),
    ])


def serialize_prediction_market(market: PredictionMarket) -> bytes:
    return b"".join([
        account_discriminator(PredictionMarket.ACCOUNT_NAME),
        encode_pubkey(market.creator),
        encode_string(market.protocol_id),
        encode_u8(int(market.metric_type)),
        encode_u64(market.target_value),
        encode_i64(market.resolution_timestamp),
        encode_string(market.description),
        encode_u64(market.total_yes_amount),
        encode_u64(market.total_no_amount),
        encode_bool(market.resolved),
        encode_option(market.outcome, encode_bool),
        encode_option(market.actual_value, encode_u64),
        encode_pubkey(market.oracle),
        encode_i64(market.created_at),
        encode_u8(market.bump),
    ])


def serialize_bet(bet: Bet) -> bytes:
    return b"".join([
        account_discriminator(Bet.ACCOUNT_NAME),
        encode_pubkey(bet.owner),
        encode_pubkey(bet.market),
        encode_u64(bet.amount),
        encode_u64(bet.effective_amount),
        encode_bool(bet.bet_yes),
        encode_i64(bet.timestamp),
        encode_bool(bet.claimed),
        encode_u8(bet.bump),
    ])


def serialize_volume_badge(badge: VolumeBadge) -> bytes:
    return b"".join([
        account_discriminator(VolumeBadge.ACCOUNT_NAME),
        encode_pubkey(badge.owner),
        encode_u8(int(badge.tier)),
        encode_u64(badge.volume_usd),
        encode_u64(badge.ve_amount),
        encode_i64(badge.issued_at),
        encode_u8(badge.bump),
    ])


_SERIALIZERS: dict[type, Callable] = {
    ProtocolState: serialize_protocol_state,
    StakerAccount: serialize_staker_account,
    VePosition: serialize_ve_position,
    PredictionMarket: serialize_prediction_market,
    Bet: serialize_bet,
    VolumeBadge: serialize_volume_badge,
}


def serialize_account(account: AccountModel) -> bytes:
    return _SERIALIZERS[type(account)](account)
