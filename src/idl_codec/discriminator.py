"""Anchor discriminators: SHA256("<namespace>:<name>")[:8].

Instructions use the "global" namespace with the snake_case handler name;
accounts use the "account" namespace with the struct name.
"""

import hashlib
from functools import lru_cache

from src.idl_common.errors import TypeMismatchError, UnsupportedOperationError

DISCRIMINATOR_LEN = 8

INSTRUCTION_NAMES: tuple[str, ...] = (
    "initialize",
    "stake",
    "unstake",
    "lock_for_ve",
    "unlock_ve",
    "create_market",
    "place_bet",
    "resolve_market",
    "claim_winnings",
    "issue_badge",
    "revoke_badge",
    "set_paused",
    "transfer_authority",
)

ACCOUNT_NAMES: tuple[str, ...] = (
    "ProtocolState",
    "StakerAccount",
    "VePosition",
    "PredictionMarket",
    "Bet",
    "VolumeBadge",
)


@lru_cache(maxsize=None)
def sighash(namespace: str, name: str) -> bytes:
    return hashlib.sha256(f"{namespace}:{name}".encode("utf-8")).digest()[:DISCRIMINATOR_LEN]


def instruction_discriminator(name: str) -> bytes:
    """Tag for any instruction name; pure function of the name."""
    return sighash("global", name)


def account_discriminator(name: str) -> bytes:
    return sighash("account", name)


INSTRUCTION_DISCRIMINATORS: dict[str, bytes] = {
    name: instruction_discriminator(name) for name in INSTRUCTION_NAMES
}
ACCOUNT_DISCRIMINATORS: dict[str, bytes] = {
    name: account_discriminator(name) for name in ACCOUNT_NAMES
}

_INSTRUCTION_BY_TAG = {tag: name for name, tag in INSTRUCTION_DISCRIMINATORS.items()}
_ACCOUNT_BY_TAG = {tag: name for name, tag in ACCOUNT_DISCRIMINATORS.items()}


def get_instruction_discriminator(name: str) -> bytes:
    """Registered tag for a supported instruction; unknown names are rejected."""
    try:
        return INSTRUCTION_DISCRIMINATORS[name]
    except KeyError:
        raise UnsupportedOperationError(name) from None


def identify_instruction(data: bytes) -> str:
    """Reverse lookup: which supported instruction does this payload start with."""
    tag = bytes(data[:DISCRIMINATOR_LEN])
    try:
        return _INSTRUCTION_BY_TAG[tag]
    except KeyError:
        raise UnsupportedOperationError(f"<discriminator {tag.hex() or 'empty'}>") from None


def identify_account(data: bytes) -> str:
    """Reverse lookup: which account type does this buffer hold."""
    tag = bytes(data[:DISCRIMINATOR_LEN])
    try:
        return _ACCOUNT_BY_TAG[tag]
    except KeyError:
        raise TypeMismatchError("a known IDL Protocol account", tag) from None


def check_account_discriminator(data: bytes, name: str) -> None:
    """Raise TypeMismatchError unless data starts with `name`'s account tag."""
    tag = bytes(data[:DISCRIMINATOR_LEN])
    if tag != ACCOUNT_DISCRIMINATORS[name]:
        raise TypeMismatchError(name, tag)
