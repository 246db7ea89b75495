"""Stock ticker subject that notifies observers of price changes."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

from core.observable import ObservableState, Observer
from ticker.price import PriceFeed

logger = logging.getLogger("eventful.ticker")


class Ticker:
    """Periodically fetches a price and broadcasts ``(time, price)`` when it moves."""

    def __init__(
        self,
        symbol: str,
        feed: PriceFeed,
        clock: Callable[[], datetime] | None = None,
        sleep: Callable[[float], None] | None = None,
        output: Callable[[str], None] | None = None,
    ) -> None:
        self.symbol = symbol
        self.feed = feed
        self.clock = clock or (lambda: datetime.now(UTC))
        self.sleep = sleep or time.sleep
        self.output = output or print
        self.observable = ObservableState()

    def add_observer(self, observer: Observer) -> None:
        self.observable.add(observer)

    def delete_observer(self, observer: Observer) -> None:
        self.observable.remove(observer)

    def delete_observers(self) -> None:
        self.observable.clear()

    def count_observers(self) -> int:
        return self.observable.count()

    def mark_changed(self, state: bool = True) -> None:
        self.observable.mark_changed(state)

    def is_changed(self) -> bool:
        return self.observable.is_changed()

    def notify_observers(self, *args: Any) -> None:
        self.observable.notify(*args)

    def run(self, ticks: int, interval: float = 1.0) -> list[int]:
        """Poll the feed ``ticks`` times and return the prices seen."""
        if ticks < 0:
            raise ValueError("ticks must be non-negative.")
        prices: list[int] = []
        last_price: int | None = None
        for tick in range(ticks):
            if tick:
                self.sleep(interval)
            price = self.feed.fetch(self.symbol)
            prices.append(price)
            self.output(f"Current price: {price}")
            if price != last_price:
                self.mark_changed()
                last_price = price
                self.notify_observers(self.clock(), price)
        logger.info("Ticker %s finished after %d tick(s)", self.symbol, ticks)
        return prices
