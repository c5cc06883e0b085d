"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Codec (byte layouts)
  2xxx: Address derivation
  3xxx: Instructions
  4xxx: Economics (integer arithmetic)

On-chain program errors (6xxx) live in program_errors.py.
"""


class CodecError(Exception):
    """Base codec error."""

    def __init__(self, code: int, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(message)


# --- 1xxx: Codec ---

class InvalidAccountDataError(CodecError):
    def __init__(self, detail: str) -> None:
        super().__init__(1001, f"Invalid account data: {detail}")


class ValueOutOfRangeError(CodecError):
    def __init__(self, kind: str, value: object) -> None:
        super().__init__(1002, f"Value out of range for {kind}: {value!r}")


class TypeMismatchError(InvalidAccountDataError):
    """Bytes belong to a different account type; still invalid data for the caller."""

    def __init__(self, expected: str, actual: bytes) -> None:
        CodecError.__init__(
            self,
            1003,
            f"Account discriminator mismatch: expected {expected}, got {actual.hex() or '<empty>'}",
        )


# --- 2xxx: Address derivation ---

class AddressDerivationExhaustedError(CodecError):
    def __init__(self, program_id: str) -> None:
        super().__init__(2001, f"No off-curve bump found for program {program_id}")


class InvalidSeedError(CodecError):
    def __init__(self, detail: str) -> None:
        super().__init__(2002, f"Invalid seeds: {detail}")


# --- 3xxx: Instructions ---

class UnsupportedOperationError(CodecError):
    def __init__(self, name: str) -> None:
        super().__init__(3001, f"Unsupported operation: {name}")


# --- 4xxx: Economics ---

class ArithmeticOverflowError(CodecError):
    def __init__(self, detail: str) -> None:
        super().__init__(4001, f"Arithmetic overflow: {detail}")
