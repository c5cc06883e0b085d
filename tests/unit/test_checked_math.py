"""Tests for idl_common.checked_math - integer arithmetic utilities."""

import pytest

from src.idl_common.checked_math import (
    I64_MAX,
    I64_MIN,
    U64_MAX,
    U128_MAX,
    bps_of,
    checked_add,
    checked_mul_u128,
    mul_div_floor,
    narrow_u64,
    require_i64,
    require_u64,
)
from src.idl_common.errors import ArithmeticOverflowError, ValueOutOfRangeError


class TestRequire:
    def test_u64_bounds(self) -> None:
        assert require_u64(0) == 0
        assert require_u64(U64_MAX) == U64_MAX

    def test_u64_negative_raises(self) -> None:
        with pytest.raises(ValueOutOfRangeError, match="amount"):
            require_u64(-1, "amount")

    def test_u64_too_large_raises(self) -> None:
        with pytest.raises(ValueOutOfRangeError):
            require_u64(U64_MAX + 1)

    def test_u64_rejects_bool_and_float(self) -> None:
        with pytest.raises(ValueOutOfRangeError):
            require_u64(True)
        with pytest.raises(ValueOutOfRangeError):
            require_u64(1.0)  # type: ignore[arg-type]

    def test_i64_bounds(self) -> None:
        assert require_i64(I64_MIN) == I64_MIN
        assert require_i64(I64_MAX) == I64_MAX
        with pytest.raises(ValueOutOfRangeError):
            require_i64(I64_MAX + 1)


class TestCheckedArithmetic:
    def test_add(self) -> None:
        assert checked_add(1, 2) == 3
        assert checked_add(U64_MAX - 1, 1) == U64_MAX

    def test_add_overflow_raises_not_wraps(self) -> None:
        with pytest.raises(ArithmeticOverflowError):
            checked_add(U64_MAX, 1)

    def test_mul_u128(self) -> None:
        assert checked_mul_u128(U64_MAX, U64_MAX) <= U128_MAX

    def test_mul_u128_overflow(self) -> None:
        with pytest.raises(ArithmeticOverflowError):
            checked_mul_u128(U128_MAX, 2)

    def test_narrow(self) -> None:
        assert narrow_u64(U64_MAX) == U64_MAX
        with pytest.raises(ArithmeticOverflowError):
            narrow_u64(U64_MAX + 1)


class TestMulDivFloor:
    def test_truncates(self) -> None:
        # 7 * 3 / 2 = 10.5 -> 10
        assert mul_div_floor(7, 3, 2) == 10

    def test_wide_intermediate_fits(self) -> None:
        # Intermediate exceeds u64 but the result does not
        assert mul_div_floor(U64_MAX, 10, 10) == U64_MAX

    def test_result_overflow(self) -> None:
        with pytest.raises(ArithmeticOverflowError):
            mul_div_floor(U64_MAX, 2, 1)

    def test_zero_denominator(self) -> None:
        with pytest.raises(ValueOutOfRangeError):
            mul_div_floor(1, 1, 0)


class TestBpsOf:
    def test_floor(self) -> None:
        # 1750 * 300 / 10000 = 52.5 -> 52
        assert bps_of(1750, 300) == 52

    def test_zero(self) -> None:
        assert bps_of(0, 300) == 0
        assert bps_of(1000, 0) == 0

    def test_full(self) -> None:
        assert bps_of(1234, 10_000) == 1234
