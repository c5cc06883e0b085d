"""Shared test fixtures."""

import pytest
from solders.pubkey import Pubkey


def make_pubkey(fill: int) -> Pubkey:
    """Deterministic 32-byte key filled with one byte value."""
    return Pubkey.from_bytes(bytes([fill]) * 32)


@pytest.fixture
def program_id() -> Pubkey:
    return Pubkey.from_string("BSn7neicVV2kEzgaZmd6tZEBm4tdgzBRyELov65Lq7dt")


@pytest.fixture
def user() -> Pubkey:
    return make_pubkey(7)


@pytest.fixture
def authority() -> Pubkey:
    return make_pubkey(1)
