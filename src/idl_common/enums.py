"""Global enums. Byte values must match the on-chain Borsh enum ordinals exactly.

Values are spelled out rather than relying on declaration order, so
reordering members can never shift the wire mapping.
"""

from enum import IntEnum

from src.idl_common.errors import InvalidAccountDataError


class MetricType(IntEnum):
    """Protocol metric a prediction market is resolved against."""
    TVL = 0
    VOLUME_24H = 1
    USERS = 2
    TRANSACTIONS = 3
    PRICE = 4
    MARKET_CAP = 5
    CUSTOM = 6

    @classmethod
    def from_byte(cls, value: int) -> "MetricType":
        try:
            return cls(value)
        except ValueError:
            raise InvalidAccountDataError(f"unknown MetricType byte {value}") from None

    @property
    def display_name(self) -> str:
        return _METRIC_NAMES[self]


class BadgeTier(IntEnum):
    """Volume badge tier. NONE is the default for a freshly allocated badge."""
    NONE = 0
    BRONZE = 1
    SILVER = 2
    GOLD = 3
    PLATINUM = 4
    DIAMOND = 5

    @classmethod
    def from_byte(cls, value: int) -> "BadgeTier":
        try:
            return cls(value)
        except ValueError:
            raise InvalidAccountDataError(f"unknown BadgeTier byte {value}") from None

    @property
    def display_name(self) -> str:
        return self.name.capitalize()


_METRIC_NAMES = {
    MetricType.TVL: "TVL",
    MetricType.VOLUME_24H: "Volume 24h",
    MetricType.USERS: "Users",
    MetricType.TRANSACTIONS: "Transactions",
    MetricType.PRICE: "Price",
    MetricType.MARKET_CAP: "Market Cap",
    MetricType.CUSTOM: "Custom",
}
