"""Tests for idl_instructions.domain.layouts."""

import pytest
from solders.pubkey import Pubkey

from src.idl_codec.discriminator import INSTRUCTION_NAMES, instruction_discriminator
from src.idl_codec.primitives import encode_i64, encode_string, encode_u64
from src.idl_common.enums import BadgeTier, MetricType
from src.idl_common.errors import (
    InvalidAccountDataError,
    UnsupportedOperationError,
    ValueOutOfRangeError,
)
from src.idl_instructions.domain.layouts import (
    ARG_LAYOUTS,
    decode_instruction_data,
    encode_instruction_data,
)


class TestEncode:
    def test_layout_covers_every_handler(self) -> None:
        assert set(ARG_LAYOUTS) == set(INSTRUCTION_NAMES)

    def test_no_args(self) -> None:
        assert encode_instruction_data("initialize") == instruction_discriminator("initialize")

    def test_stake_amount(self) -> None:
        data = encode_instruction_data("stake", {"amount": 1_000_000})
        assert data == instruction_discriminator("stake") + encode_u64(1_000_000)
        assert len(data) == 16

    def test_place_bet_arg_order(self) -> None:
        data = encode_instruction_data(
            "place_bet", {"amount": 500, "bet_yes": True, "nonce": 42}
        )
        assert data[8:] == encode_u64(500) + b"\x01" + encode_u64(42)

    def test_create_market(self) -> None:
        data = encode_instruction_data(
            "create_market",
            {
                "protocol_id": "jupiter",
                "metric_type": MetricType.VOLUME_24H,
                "target_value": 10,
                "resolution_timestamp": 1_700_000_000,
                "description": "",
            },
        )
        expected = (
            encode_string("jupiter")
            + b"\x01"
            + encode_u64(10)
            + encode_i64(1_700_000_000)
            + encode_string("")
        )
        assert data[8:] == expected

    def test_issue_badge(self) -> None:
        data = encode_instruction_data("issue_badge", {"tier": BadgeTier.GOLD, "volume_usd": 1})
        assert data[8:] == b"\x03" + encode_u64(1)

    def test_transfer_authority(self) -> None:
        new_authority = Pubkey.from_bytes(b"\x05" * 32)
        data = encode_instruction_data("transfer_authority", {"new_authority": new_authority})
        assert data[8:] == bytes(new_authority)

    def test_unknown_name(self) -> None:
        with pytest.raises(UnsupportedOperationError):
            encode_instruction_data("withdraw_all")

    def test_missing_arg(self) -> None:
        with pytest.raises(ValueOutOfRangeError, match="stake.amount"):
            encode_instruction_data("stake", {})

    def test_negative_amount(self) -> None:
        with pytest.raises(ValueOutOfRangeError):
            encode_instruction_data("unstake", {"amount": -1})

    def test_unknown_metric_type(self) -> None:
        with pytest.raises(ValueOutOfRangeError, match="MetricType"):
            encode_instruction_data(
                "create_market",
                {
                    "protocol_id": "x",
                    "metric_type": 7,
                    "target_value": 1,
                    "resolution_timestamp": 1,
                    "description": "",
                },
            )


class TestDecode:
    def test_decode_place_bet(self) -> None:
        data = encode_instruction_data(
            "place_bet", {"amount": 500, "bet_yes": False, "nonce": 42}
        )
        decoded = decode_instruction_data(data)
        assert decoded.name == "place_bet"
        assert decoded.args == {"amount": 500, "bet_yes": False, "nonce": 42}

    def test_decode_enum_args(self) -> None:
        data = encode_instruction_data("issue_badge", {"tier": 5, "volume_usd": 2_000_000})
        decoded = decode_instruction_data(data)
        assert decoded.args["tier"] is BadgeTier.DIAMOND

    def test_decode_rejects_trailing_bytes(self) -> None:
        data = encode_instruction_data("set_paused", {"paused": True}) + b"\x00"
        with pytest.raises(InvalidAccountDataError, match="trailing"):
            decode_instruction_data(data)

    def test_decode_truncated_args(self) -> None:
        data = encode_instruction_data("stake", {"amount": 1})[:-1]
        with pytest.raises(InvalidAccountDataError):
            decode_instruction_data(data)

    def test_decode_short_data(self) -> None:
        with pytest.raises(InvalidAccountDataError):
            decode_instruction_data(b"\x01\x02")

    def test_decode_unknown_discriminator(self) -> None:
        with pytest.raises(UnsupportedOperationError):
            decode_instruction_data(b"\x00" * 16)
