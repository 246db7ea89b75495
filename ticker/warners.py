"""Price warners observing a :class:`~ticker.ticker.Ticker`."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from datetime import datetime

from ticker.ticker import Ticker


class Warner(ABC):
    """Observer that registers itself on a ticker and records its alerts."""

    def __init__(
        self,
        ticker: Ticker,
        limit: int,
        output: Callable[[str], None] | None = None,
    ) -> None:
        self.limit = limit
        self.output = output
        self.alerts: list[str] = []
        ticker.add_observer(self)

    def _warn(self, message: str) -> None:
        self.alerts.append(message)
        if self.output is not None:
            self.output(message)

    @abstractmethod
    def observable_changed(self, time: datetime, price: int) -> None:
        """Warn when ``price`` crosses the limit."""


class WarnLow(Warner):
    def observable_changed(self, time: datetime, price: int) -> None:
        if price < self.limit:
            self._warn(f"--- {time}: Price below {self.limit}: {price}")


class WarnHigh(Warner):
    def observable_changed(self, time: datetime, price: int) -> None:
        if price > self.limit:
            self._warn(f"+++ {time}: Price above {self.limit}: {price}")
