"""Custom error codes returned by the on-chain program.

Anchor numbers #[error_code] variants from 6000 in declaration order, so the
values below are pinned explicitly. Used to turn a failed transaction's
`Custom(n)` instruction error into something readable.
"""

from dataclasses import dataclass
from enum import IntEnum

ANCHOR_ERROR_OFFSET = 6000


class ProgramErrorCode(IntEnum):
    INVALID_AMOUNT = 6000
    INVALID_LOCK_DURATION = 6001
    LOCK_NOT_EXPIRED = 6002
    INSUFFICIENT_STAKE = 6003
    INVALID_INPUT = 6004
    INVALID_TIMESTAMP = 6005
    MARKET_RESOLVED = 6006
    MARKET_NOT_RESOLVED = 6007
    BETTING_CLOSED = 6008
    RESOLUTION_TOO_EARLY = 6009
    ALREADY_CLAIMED = 6010
    UNAUTHORIZED = 6011
    PROTOCOL_PAUSED = 6012
    INSUFFICIENT_VOLUME = 6013
    TOKENS_LOCKED = 6014


_MESSAGES = {
    ProgramErrorCode.INVALID_AMOUNT: "Invalid amount",
    ProgramErrorCode.INVALID_LOCK_DURATION: "Invalid lock duration (min 1 week, max 4 years)",
    ProgramErrorCode.LOCK_NOT_EXPIRED: "Lock not expired",
    ProgramErrorCode.INSUFFICIENT_STAKE: "Insufficient stake",
    ProgramErrorCode.INVALID_INPUT: "Invalid input",
    ProgramErrorCode.INVALID_TIMESTAMP: "Invalid timestamp",
    ProgramErrorCode.MARKET_RESOLVED: "Market already resolved",
    ProgramErrorCode.MARKET_NOT_RESOLVED: "Market not resolved",
    ProgramErrorCode.BETTING_CLOSED: "Betting closed",
    ProgramErrorCode.RESOLUTION_TOO_EARLY: "Resolution too early",
    ProgramErrorCode.ALREADY_CLAIMED: "Already claimed",
    ProgramErrorCode.UNAUTHORIZED: "Unauthorized",
    ProgramErrorCode.PROTOCOL_PAUSED: "Protocol is paused",
    ProgramErrorCode.INSUFFICIENT_VOLUME: "Insufficient trading volume for this badge tier",
    ProgramErrorCode.TOKENS_LOCKED: "Tokens are locked for veIDL",
}


@dataclass(frozen=True)
class ProgramError:
    code: ProgramErrorCode
    message: str

    @property
    def name(self) -> str:
        return self.code.name


def lookup_program_error(code: int) -> ProgramError | None:
    """Map a custom error code to its program error, or None if it is not ours.

    Codes below 6000 belong to Anchor itself or the runtime.
    """
    if code < ANCHOR_ERROR_OFFSET:
        return None
    try:
        error_code = ProgramErrorCode(code)
    except ValueError:
        return None
    return ProgramError(code=error_code, message=_MESSAGES[error_code])
