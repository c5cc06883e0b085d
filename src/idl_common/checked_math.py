"""Integer arithmetic utilities mirroring the program's checked u64/u128 math.

All amounts and timestamps are int. No float, no Decimal.
Python ints never wrap, so every bound is enforced explicitly: a value that
would overflow the program's integer width raises instead of wrapping.
"""

from src.idl_common.errors import ArithmeticOverflowError, ValueOutOfRangeError

U8_MAX = (1 << 8) - 1
U32_MAX = (1 << 32) - 1
U64_MAX = (1 << 64) - 1
U128_MAX = (1 << 128) - 1
I64_MIN = -(1 << 63)
I64_MAX = (1 << 63) - 1

BPS_DENOMINATOR = 10_000


def require_u64(value: int, name: str = "u64") -> int:
    """Validate that value is a u64 input (0 <= value <= 2**64-1)."""
    if isinstance(value, bool) or not isinstance(value, int) or not (0 <= value <= U64_MAX):
        raise ValueOutOfRangeError(name, value)
    return value


def require_i64(value: int, name: str = "i64") -> int:
    """Validate that value is an i64 input."""
    if isinstance(value, bool) or not isinstance(value, int) or not (I64_MIN <= value <= I64_MAX):
        raise ValueOutOfRangeError(name, value)
    return value


def checked_add(a: int, b: int) -> int:
    """u64 addition; raises instead of wrapping."""
    total = a + b
    if total > U64_MAX:
        raise ArithmeticOverflowError(f"{a} + {b} exceeds u64")
    return total


def checked_mul_u128(a: int, b: int) -> int:
    """u128 product, as the program widens before multiplying."""
    product = a * b
    if product > U128_MAX:
        raise ArithmeticOverflowError(f"{a} * {b} exceeds u128")
    return product


def narrow_u64(value: int) -> int:
    """Narrow a u128 intermediate back to u64; raises if it does not fit."""
    if value > U64_MAX:
        raise ArithmeticOverflowError(f"{value} does not fit in u64")
    return value


def mul_div_floor(a: int, b: int, denominator: int) -> int:
    """floor(a * b / denominator) with a u128 intermediate and u64 result.

    Operands are non-negative, so floor division equals the program's
    truncation toward zero.
    """
    if denominator <= 0:
        raise ValueOutOfRangeError("denominator", denominator)
    return narrow_u64(checked_mul_u128(a, b) // denominator)


def bps_of(amount: int, bps: int) -> int:
    """floor(amount * bps / 10000)."""
    return mul_div_floor(amount, bps, BPS_DENOMINATOR)
