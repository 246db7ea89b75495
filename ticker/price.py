"""Mock stock price source."""

from __future__ import annotations

import random


class PriceFeed:
    """Returns random quotes in ``[low, low + spread)``."""

    def __init__(self, low: int = 60, spread: int = 80, seed: int | None = None) -> None:
        if spread < 1:
            raise ValueError("spread must be at least 1.")
        self.low = low
        self.spread = spread
        self._rng = random.Random(seed)

    def fetch(self, symbol: str) -> int:
        """Fetch the current price for ``symbol``."""
        _ = symbol
        return self.low + self._rng.randrange(self.spread)
