"""Ticker, price feed and warner tests."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from ticker.price import PriceFeed
from ticker.ticker import Ticker
from ticker.warners import Warner, WarnHigh, WarnLow

FIXED_TIME = datetime(2002, 6, 9, 0, 10, 25, tzinfo=UTC)


class ScriptedFeed:
    def __init__(self, prices: list[int]) -> None:
        self.prices = list(prices)
        self.symbols: list[str] = []

    def fetch(self, symbol: str) -> int:
        self.symbols.append(symbol)
        return self.prices.pop(0)


def build_ticker(prices: list[int]) -> tuple[Ticker, list[str], list[float]]:
    lines: list[str] = []
    sleeps: list[float] = []
    ticker = Ticker(
        "MSFT",
        ScriptedFeed(prices),
        clock=lambda: FIXED_TIME,
        sleep=sleeps.append,
        output=lines.append,
    )
    return ticker, lines, sleeps


def test_warner_scenario_below_and_above_limits() -> None:
    ticker, _, _ = build_ticker([])
    assert ticker.count_observers() == 0
    assert ticker.is_changed() is False

    low = WarnLow(ticker, 80)
    high = WarnHigh(ticker, 120)
    assert ticker.count_observers() == 2

    ticker.mark_changed()
    ticker.notify_observers("t1", 75)
    assert low.alerts == ["--- t1: Price below 80: 75"]
    assert high.alerts == []
    assert ticker.is_changed() is False

    ticker.mark_changed()
    ticker.notify_observers("t2", 134)
    assert high.alerts == ["+++ t2: Price above 120: 134"]
    assert low.alerts == ["--- t1: Price below 80: 75"]

    ticker.notify_observers("t3", 999)
    assert high.alerts == ["+++ t2: Price above 120: 134"]
    assert low.alerts == ["--- t1: Price below 80: 75"]


def test_run_notifies_only_when_price_moves() -> None:
    ticker, lines, sleeps = build_ticker([83, 75, 90, 134, 134, 112, 79])
    low_out: list[str] = []
    WarnLow(ticker, 80, output=low_out.append)
    high = WarnHigh(ticker, 120)

    prices = ticker.run(7, interval=0.5)

    assert prices == [83, 75, 90, 134, 134, 112, 79]
    assert lines == [f"Current price: {p}" for p in prices]
    assert low_out == [
        f"--- {FIXED_TIME}: Price below 80: 75",
        f"--- {FIXED_TIME}: Price below 80: 79",
    ]
    assert high.alerts == [f"+++ {FIXED_TIME}: Price above 120: 134"]
    assert sleeps == [0.5] * 6
    assert ticker.is_changed() is False


def test_repeated_price_is_not_rebroadcast() -> None:
    ticker, _, _ = build_ticker([70, 70, 70])
    low = WarnLow(ticker, 80)

    ticker.run(3, interval=0)

    assert len(low.alerts) == 1


def test_run_with_zero_ticks_does_nothing() -> None:
    ticker, lines, sleeps = build_ticker([])
    assert ticker.run(0) == []
    assert lines == []
    assert sleeps == []


def test_run_rejects_negative_ticks() -> None:
    ticker, _, _ = build_ticker([])
    with pytest.raises(ValueError):
        ticker.run(-1)


def test_delete_observer_and_observers() -> None:
    ticker, _, _ = build_ticker([])
    low = WarnLow(ticker, 80)
    WarnHigh(ticker, 120)

    ticker.delete_observer(low)
    assert ticker.count_observers() == 1
    ticker.delete_observers()
    assert ticker.count_observers() == 0


def test_base_warner_cannot_be_registered() -> None:
    ticker, _, _ = build_ticker([])
    with pytest.raises(TypeError):
        Warner(ticker, 100)  # type: ignore[abstract]
    assert ticker.count_observers() == 0


def test_ticker_fetches_its_own_symbol() -> None:
    feed = ScriptedFeed([100])
    ticker = Ticker("AAPL", feed, output=lambda _: None, sleep=lambda _: None)
    ticker.run(1)
    assert feed.symbols == ["AAPL"]


def test_price_feed_range_and_seed() -> None:
    feed = PriceFeed(low=60, spread=80, seed=7)
    prices = [feed.fetch("MSFT") for _ in range(200)]
    assert all(60 <= price < 140 for price in prices)

    again = PriceFeed(low=60, spread=80, seed=7)
    assert [again.fetch("MSFT") for _ in range(200)] == prices


def test_price_feed_rejects_empty_spread() -> None:
    with pytest.raises(ValueError):
        PriceFeed(spread=0)
