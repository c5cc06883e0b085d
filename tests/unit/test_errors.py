"""Tests for idl_common.errors and idl_common.program_errors."""

from src.idl_common.errors import (
    AddressDerivationExhaustedError,
    ArithmeticOverflowError,
    CodecError,
    InvalidAccountDataError,
    InvalidSeedError,
    TypeMismatchError,
    UnsupportedOperationError,
    ValueOutOfRangeError,
)
from src.idl_common.program_errors import ProgramErrorCode, lookup_program_error


class TestCodecError:
    def test_base_error(self) -> None:
        err = CodecError(code=9999, message="boom")
        assert err.code == 9999
        assert err.message == "boom"
        assert str(err) == "boom"

    def test_is_exception(self) -> None:
        assert isinstance(CodecError(1, "x"), Exception)


class TestErrorCodes:
    def test_invalid_account_data(self) -> None:
        err = InvalidAccountDataError("u64 needs 8 bytes")
        assert err.code == 1001
        assert "u64 needs 8 bytes" in err.message

    def test_value_out_of_range(self) -> None:
        err = ValueOutOfRangeError("u64", -1)
        assert err.code == 1002
        assert "-1" in err.message

    def test_type_mismatch_is_invalid_account_data(self) -> None:
        err = TypeMismatchError("Bet", b"\x00" * 8)
        assert err.code == 1003
        assert isinstance(err, InvalidAccountDataError)
        assert "Bet" in err.message
        assert "0000000000000000" in err.message

    def test_type_mismatch_empty_tag(self) -> None:
        err = TypeMismatchError("Bet", b"")
        assert "<empty>" in err.message

    def test_derivation_exhausted(self) -> None:
        err = AddressDerivationExhaustedError("Prog111")
        assert err.code == 2001
        assert "Prog111" in err.message

    def test_invalid_seed(self) -> None:
        assert InvalidSeedError("too long").code == 2002

    def test_unsupported_operation(self) -> None:
        err = UnsupportedOperationError("swap")
        assert err.code == 3001
        assert "swap" in err.message

    def test_arithmetic_overflow(self) -> None:
        assert ArithmeticOverflowError("a * b").code == 4001


class TestProgramErrors:
    def test_first_code(self) -> None:
        err = lookup_program_error(6000)
        assert err is not None
        assert err.code == ProgramErrorCode.INVALID_AMOUNT
        assert err.name == "INVALID_AMOUNT"
        assert err.message == "Invalid amount"

    def test_last_code(self) -> None:
        err = lookup_program_error(6014)
        assert err is not None
        assert err.message == "Tokens are locked for veIDL"

    def test_codes_are_contiguous(self) -> None:
        values = [c.value for c in ProgramErrorCode]
        assert values == list(range(6000, 6015))

    def test_every_code_has_message(self) -> None:
        for code in ProgramErrorCode:
            err = lookup_program_error(code.value)
            assert err is not None and err.message

    def test_anchor_framework_code_is_not_ours(self) -> None:
        assert lookup_program_error(2003) is None

    def test_out_of_range_code(self) -> None:
        assert lookup_program_error(6015) is None
