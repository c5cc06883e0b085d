"""Build Solana instructions for the 13 IDL Protocol handlers.

Each builder produces a `solders.instruction.Instruction` with:
  - Anchor discriminator: SHA256("global:<name>")[:8]
  - Serialized args (little-endian Borsh, see layouts.py)
  - Account metas in the order of the program's #[derive(Accounts)] structs

Account order and signer/writable flags are part of the wire contract: the
program rejects a mismatch, the client cannot detect it.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from solders.instruction import AccountMeta, Instruction
from solders.pubkey import Pubkey
from solders.system_program import ID as SYSTEM_PROGRAM_ID

from config.settings import settings
from src.idl_common.constants import get_protocol_constants
from src.idl_common.enums import BadgeTier, MetricType
from src.idl_common.errors import UnsupportedOperationError, ValueOutOfRangeError
from src.idl_instructions.domain.layouts import encode_instruction_data
from src.idl_instructions.domain.nonce import generate_bet_nonce
from src.idl_pda.derive import (
    derive_badge_address,
    derive_bet_address,
    derive_market_address,
    derive_staker_address,
    derive_state_address,
    derive_ve_position_address,
)

logger = logging.getLogger(__name__)


def _program_id(program_id: Pubkey | None) -> Pubkey:
    return program_id if program_id is not None else Pubkey.from_string(settings.PROGRAM_ID)


def _writable(pubkey: Pubkey, signer: bool = False) -> AccountMeta:
    return AccountMeta(pubkey, is_signer=signer, is_writable=True)


def _readonly(pubkey: Pubkey, signer: bool = False) -> AccountMeta:
    return AccountMeta(pubkey, is_signer=signer, is_writable=False)


@dataclass(frozen=True)
class PlacedBet:
    instruction: Instruction
    bet_address: Pubkey
    nonce: int


# --- 1. initialize ---
def build_initialize_ix(
    authority: Pubkey,
    treasury: Pubkey,
    program_id: Pubkey | None = None,
) -> Instruction:
    program = _program_id(program_id)
    state, _ = derive_state_address(program)
    accounts = [
        _writable(state),
        _readonly(treasury),
        _writable(authority, signer=True),
        _readonly(SYSTEM_PROGRAM_ID),
    ]
    return Instruction(program, encode_instruction_data("initialize"), accounts)


# --- 2. stake ---
def build_stake_ix(user: Pubkey, amount: int, program_id: Pubkey | None = None) -> Instruction:
    program = _program_id(program_id)
    state, _ = derive_state_address(program)
    staker, _ = derive_staker_address(user, program)
    accounts = [
        _writable(state),
        _writable(staker),
        _writable(user, signer=True),
        _readonly(SYSTEM_PROGRAM_ID),
    ]
    return Instruction(program, encode_instruction_data("stake", {"amount": amount}), accounts)


# --- 3. unstake ---
def build_unstake_ix(user: Pubkey, amount: int, program_id: Pubkey | None = None) -> Instruction:
    program = _program_id(program_id)
    state, _ = derive_state_address(program)
    staker, _ = derive_staker_address(user, program)
    ve_position, _ = derive_ve_position_address(user, program)
    accounts = [
        _writable(state),
        _writable(staker),
        _readonly(ve_position),
        _writable(user, signer=True),
    ]
    return Instruction(program, encode_instruction_data("unstake", {"amount": amount}), accounts)


# --- 4. lock_for_ve ---
def build_lock_for_ve_ix(
    user: Pubkey,
    lock_duration: int,
    program_id: Pubkey | None = None,
) -> Instruction:
    program = _program_id(program_id)
    state, _ = derive_state_address(program)
    staker, _ = derive_staker_address(user, program)
    ve_position, _ = derive_ve_position_address(user, program)
    accounts = [
        _writable(state),
        _readonly(staker),
        _writable(ve_position),
        _writable(user, signer=True),
        _readonly(SYSTEM_PROGRAM_ID),
    ]
    data = encode_instruction_data("lock_for_ve", {"lock_duration": lock_duration})
    return Instruction(program, data, accounts)


# --- 5. unlock_ve ---
def build_unlock_ve_ix(user: Pubkey, program_id: Pubkey | None = None) -> Instruction:
    program = _program_id(program_id)
    state, _ = derive_state_address(program)
    ve_position, _ = derive_ve_position_address(user, program)
    accounts = [
        _writable(state),
        _writable(ve_position),
        _writable(user, signer=True),
    ]
    return Instruction(program, encode_instruction_data("unlock_ve"), accounts)


# --- 6. create_market ---
def build_create_market_ix(
    creator: Pubkey,
    protocol_id: str,
    metric_type: MetricType,
    target_value: int,
    resolution_timestamp: int,
    description: str,
    oracle: Pubkey | None = None,
    program_id: Pubkey | None = None,
) -> Instruction:
    """The oracle defaults to the creator when none is given.

    String limits are checked here in UTF-8 bytes; the program would reject
    them with InvalidInput.
    """
    constants = get_protocol_constants()
    if len(protocol_id.encode("utf-8")) > constants.max_protocol_id_len:
        raise ValueOutOfRangeError("create_market.protocol_id", protocol_id)
    if len(description.encode("utf-8")) > constants.max_description_len:
        raise ValueOutOfRangeError("create_market.description", description)
    program = _program_id(program_id)
    state, _ = derive_state_address(program)
    market, _ = derive_market_address(protocol_id, resolution_timestamp, program)
    data = encode_instruction_data(
        "create_market",
        {
            "protocol_id": protocol_id,
            "metric_type": metric_type,
            "target_value": target_value,
            "resolution_timestamp": resolution_timestamp,
            "description": description,
        },
    )
    accounts = [
        _readonly(state),
        _writable(market),
        _writable(creator, signer=True),
        _readonly(oracle if oracle is not None else creator),
        _readonly(SYSTEM_PROGRAM_ID),
    ]
    return Instruction(program, data, accounts)


# --- 7. place_bet ---
def build_place_bet_ix(
    user: Pubkey,
    market: Pubkey,
    amount: int,
    bet_yes: bool,
    nonce: int | None = None,
    program_id: Pubkey | None = None,
) -> PlacedBet:
    """Returns the derived bet address and the nonce actually used.

    Callers must keep nonces unique per (market, user); when omitted, the
    process-wide generator picks one for the pair.
    """
    program = _program_id(program_id)
    if nonce is None:
        nonce = generate_bet_nonce(market, user)
    state, _ = derive_state_address(program)
    staker, _ = derive_staker_address(user, program)
    bet, _ = derive_bet_address(market, user, nonce, program)
    data = encode_instruction_data(
        "place_bet", {"amount": amount, "bet_yes": bet_yes, "nonce": nonce}
    )
    accounts = [
        _readonly(state),
        _writable(market),
        _writable(bet),
        _readonly(staker),
        _writable(user, signer=True),
        _readonly(SYSTEM_PROGRAM_ID),
    ]
    logger.debug("place_bet built: market=%s bet=%s nonce=%d", market, bet, nonce)
    return PlacedBet(instruction=Instruction(program, data, accounts), bet_address=bet, nonce=nonce)


# --- 8. resolve_market ---
def build_resolve_market_ix(
    oracle: Pubkey,
    market: Pubkey,
    actual_value: int,
    program_id: Pubkey | None = None,
) -> Instruction:
    program = _program_id(program_id)
    accounts = [
        _writable(market),
        _readonly(oracle, signer=True),
    ]
    data = encode_instruction_data("resolve_market", {"actual_value": actual_value})
    return Instruction(program, data, accounts)


# --- 9. claim_winnings ---
def build_claim_winnings_ix(
    user: Pubkey,
    market: Pubkey,
    bet: Pubkey,
    program_id: Pubkey | None = None,
) -> Instruction:
    program = _program_id(program_id)
    state, _ = derive_state_address(program)
    accounts = [
        _writable(state),
        _readonly(market),
        _writable(bet),
        _readonly(user, signer=True),
    ]
    return Instruction(program, encode_instruction_data("claim_winnings"), accounts)


# --- 10. issue_badge ---
def build_issue_badge_ix(
    authority: Pubkey,
    recipient: Pubkey,
    tier: BadgeTier,
    volume_usd: int,
    program_id: Pubkey | None = None,
) -> Instruction:
    program = _program_id(program_id)
    state, _ = derive_state_address(program)
    badge, _ = derive_badge_address(recipient, program)
    accounts = [
        _writable(state),
        _writable(badge),
        _readonly(recipient),
        _writable(authority, signer=True),
        _readonly(SYSTEM_PROGRAM_ID),
    ]
    data = encode_instruction_data("issue_badge", {"tier": tier, "volume_usd": volume_usd})
    return Instruction(program, data, accounts)


# --- 11. revoke_badge ---
def build_revoke_badge_ix(
    authority: Pubkey,
    badge_owner: Pubkey,
    program_id: Pubkey | None = None,
) -> Instruction:
    program = _program_id(program_id)
    state, _ = derive_state_address(program)
    badge, _ = derive_badge_address(badge_owner, program)
    accounts = [
        _writable(state),
        _writable(badge),
        _writable(authority, signer=True),
    ]
    return Instruction(program, encode_instruction_data("revoke_badge"), accounts)


# --- 12. set_paused ---
def build_set_paused_ix(
    authority: Pubkey,
    paused: bool,
    program_id: Pubkey | None = None,
) -> Instruction:
    program = _program_id(program_id)
    state, _ = derive_state_address(program)
    accounts = [
        _writable(state),
        _readonly(authority, signer=True),
    ]
    return Instruction(program, encode_instruction_data("set_paused", {"paused": paused}), accounts)


# --- 13. transfer_authority ---
def build_transfer_authority_ix(
    authority: Pubkey,
    new_authority: Pubkey,
    program_id: Pubkey | None = None,
) -> Instruction:
    program = _program_id(program_id)
    state, _ = derive_state_address(program)
    accounts = [
        _writable(state),
        _readonly(authority, signer=True),
    ]
    data = encode_instruction_data("transfer_authority", {"new_authority": new_authority})
    return Instruction(program, data, accounts)


_BUILDERS: dict[str, Callable[..., Any]] = {
    "initialize": build_initialize_ix,
    "stake": build_stake_ix,
    "unstake": build_unstake_ix,
    "lock_for_ve": build_lock_for_ve_ix,
    "unlock_ve": build_unlock_ve_ix,
    "create_market": build_create_market_ix,
    "place_bet": build_place_bet_ix,
    "resolve_market": build_resolve_market_ix,
    "claim_winnings": build_claim_winnings_ix,
    "issue_badge": build_issue_badge_ix,
    "revoke_badge": build_revoke_badge_ix,
    "set_paused": build_set_paused_ix,
    "transfer_authority": build_transfer_authority_ix,
}


def build_instruction(name: str, **kwargs: Any) -> Instruction | PlacedBet:
    """Dispatch by snake_case handler name. place_bet returns a PlacedBet."""
    try:
        builder = _BUILDERS[name]
    except KeyError:
        raise UnsupportedOperationError(name) from None
    return builder(**kwargs)
