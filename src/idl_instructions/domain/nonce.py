"""Default nonces for place_bet.

A bet lives at ["bet", market, user, nonce], so a nonce only has to be unique
per (market, user). The default is the current unix second, bumped past the
last nonce handed out for the same pair: repeated bets inside one second, or
after the clock steps back, get last + 1 instead of colliding.

Uniqueness holds within one process only. Callers placing bets for the same
pair from several processes must pass explicit nonces.
"""

import threading
from collections.abc import Callable

from solders.pubkey import Pubkey

from src.idl_common.datetime_utils import unix_timestamp


class BetNonceGenerator:
    # Pairs whose last nonce is already behind the clock can be forgotten
    _PRUNE_AT = 4096

    def __init__(self, clock: Callable[[], int] = unix_timestamp) -> None:
        self._clock = clock
        self._last: dict[tuple[Pubkey, Pubkey], int] = {}
        self._lock = threading.Lock()

    def next_nonce(self, market: Pubkey, user: Pubkey) -> int:
        now = self._clock()
        with self._lock:
            last = self._last.get((market, user))
            nonce = now if last is None else max(now, last + 1)
            self._last[(market, user)] = nonce
            if len(self._last) > self._PRUNE_AT:
                self._last = {pair: n for pair, n in self._last.items() if n >= now}
            return nonce


_default_generator = BetNonceGenerator()


def generate_bet_nonce(market: Pubkey, user: Pubkey) -> int:
    return _default_generator.next_nonce(market, user)
