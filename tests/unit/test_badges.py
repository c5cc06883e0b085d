"""Tests for idl_economics.domain.badges."""

import pytest

from src.idl_common.enums import BadgeTier
from src.idl_common.errors import ValueOutOfRangeError
from src.idl_economics.domain.badges import (
    badge_ve_grant,
    qualifying_tier,
    required_volume,
    tier_name,
)


class TestThresholds:
    def test_required_volume(self) -> None:
        assert required_volume(BadgeTier.BRONZE) == 1_000
        assert required_volume(BadgeTier.DIAMOND) == 1_000_000
        assert required_volume(BadgeTier.NONE) == 0

    def test_ve_grant(self) -> None:
        assert badge_ve_grant(BadgeTier.SILVER) == 250_000
        assert badge_ve_grant(BadgeTier.NONE) == 0


class TestQualifyingTier:
    def test_below_bronze(self) -> None:
        assert qualifying_tier(999) is BadgeTier.NONE

    def test_exact_threshold(self) -> None:
        assert qualifying_tier(1_000) is BadgeTier.BRONZE
        assert qualifying_tier(500_000) is BadgeTier.PLATINUM

    def test_between_thresholds(self) -> None:
        assert qualifying_tier(150_000) is BadgeTier.GOLD

    def test_above_diamond(self) -> None:
        assert qualifying_tier(10**12) is BadgeTier.DIAMOND

    def test_negative_volume(self) -> None:
        with pytest.raises(ValueOutOfRangeError):
            qualifying_tier(-1)


class TestTierName:
    def test_known(self) -> None:
        assert tier_name(3) == "Gold"
        assert tier_name(BadgeTier.NONE) == "None"

    def test_unknown(self) -> None:
        assert tier_name(6) == "Unknown"
