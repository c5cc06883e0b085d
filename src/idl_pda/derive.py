"""Program-derived addresses for the IDL Protocol.

A PDA is sha256(seed_0 || ... || seed_n || [bump] || program_id ||
"ProgramDerivedAddress") for the highest bump in 255..0 whose digest is NOT a
valid ed25519 point, so no private key can exist for it.

Seed sets:
  state        ["state"]
  staker       ["staker", user]
  ve_position  ["ve_position", user]
  market       ["market", protocol_id (utf-8), resolution_timestamp (i64 LE)]
  bet          ["bet", market, user, nonce (u64 LE)]
  badge        ["badge", user]
"""

import hashlib
import logging
from collections.abc import Sequence

from solders.pubkey import Pubkey

from config.settings import settings
from src.idl_codec.primitives import encode_i64, encode_u64
from src.idl_common.errors import AddressDerivationExhaustedError, InvalidSeedError

logger = logging.getLogger(__name__)

MAX_SEEDS = 16  # including the bump seed
MAX_SEED_LEN = 32
PDA_MARKER = b"ProgramDerivedAddress"


def _program_id(program_id: Pubkey | None) -> Pubkey:
    return program_id if program_id is not None else Pubkey.from_string(settings.PROGRAM_ID)


def _is_on_curve(candidate: Pubkey) -> bool:
    return candidate.is_on_curve()


def _validate_seeds(seeds: Sequence[bytes]) -> None:
    if len(seeds) + 1 > MAX_SEEDS:
        raise InvalidSeedError(
            f"{len(seeds)} seeds leave no room for the bump (max {MAX_SEEDS - 1})"
        )
    for index, seed in enumerate(seeds):
        if len(seed) > MAX_SEED_LEN:
            raise InvalidSeedError(f"seed {index} is {len(seed)} bytes (max {MAX_SEED_LEN})")


def _hash_candidate(seeds: Sequence[bytes], bump: int, program_id: Pubkey) -> Pubkey:
    hasher = hashlib.sha256()
    for seed in seeds:
        hasher.update(seed)
    hasher.update(bytes([bump]))
    hasher.update(bytes(program_id))
    hasher.update(PDA_MARKER)
    return Pubkey.from_bytes(hasher.digest())


def find_program_address(
    seeds: Sequence[bytes],
    program_id: Pubkey | None = None,
) -> tuple[Pubkey, int]:
    """Return (address, bump) for the first off-curve bump counting down from 255."""
    program = _program_id(program_id)
    seeds = tuple(bytes(seed) for seed in seeds)
    _validate_seeds(seeds)
    for bump in range(255, -1, -1):
        candidate = _hash_candidate(seeds, bump, program)
        if not _is_on_curve(candidate):
            logger.debug("PDA derived: address=%s bump=%d", candidate, bump)
            return candidate, bump
    logger.error(
        "PDA search exhausted all bumps: program=%s seeds=%s",
        program,
        [s.hex() for s in seeds],
    )
    raise AddressDerivationExhaustedError(str(program))


# ---------------------------------------------------------------------------
# Protocol seed sets
# ---------------------------------------------------------------------------


def derive_state_address(program_id: Pubkey | None = None) -> tuple[Pubkey, int]:
    return find_program_address([b"state"], program_id)


def derive_staker_address(user: Pubkey, program_id: Pubkey | None = None) -> tuple[Pubkey, int]:
    return find_program_address([b"staker", bytes(user)], program_id)


def derive_ve_position_address(
    user: Pubkey, program_id: Pubkey | None = None
) -> tuple[Pubkey, int]:
    return find_program_address([b"ve_position", bytes(user)], program_id)


def derive_market_address(
    protocol_id: str,
    resolution_timestamp: int,
    program_id: Pubkey | None = None,
) -> tuple[Pubkey, int]:
    return find_program_address(
        [b"market", protocol_id.encode("utf-8"), encode_i64(resolution_timestamp)],
        program_id,
    )


def derive_bet_address(
    market: Pubkey,
    user: Pubkey,
    nonce: int,
    program_id: Pubkey | None = None,
) -> tuple[Pubkey, int]:
    return find_program_address(
        [b"bet", bytes(market), bytes(user), encode_u64(nonce)],
        program_id,
    )


def derive_badge_address(user: Pubkey, program_id: Pubkey | None = None) -> tuple[Pubkey, int]:
    return find_program_address([b"badge", bytes(user)], program_id)
