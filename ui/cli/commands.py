"""Typer command handlers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import typer

from core.config import AppConfig, load_app_config
from core.logging_config import configure_logging
from ticker.journal import PriceJournal
from ticker.price import PriceFeed
from ticker.ticker import Ticker
from ticker.warners import WarnHigh, WarnLow

DEFAULT_ROOT = Path(__file__).resolve().parents[2]


def _config(root: Path | None = None, overrides: dict[str, Any] | None = None) -> AppConfig:
    try:
        return load_app_config((root or DEFAULT_ROOT).resolve(), overrides)
    except ValueError as exc:
        typer.echo(f"Invalid configuration: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def run_ticker(
    *,
    symbol: str | None = None,
    ticks: int | None = None,
    interval: float | None = None,
    low: int | None = None,
    high: int | None = None,
    seed: int | None = None,
    journal: bool | None = None,
    root: Path | None = None,
) -> None:
    """Run the ticker with a low and a high warner attached."""
    ticker_overrides = {
        key: value
        for key, value in {
            "symbol": symbol,
            "ticks": ticks,
            "interval": interval,
            "low_limit": low,
            "high_limit": high,
            "seed": seed,
        }.items()
        if value is not None
    }
    overrides: dict[str, Any] = {"ticker": ticker_overrides}
    if journal is not None:
        overrides["journal"] = {"enabled": journal}
    config = _config(root, overrides)
    configure_logging(config.logging.level)

    settings = config.ticker
    feed = PriceFeed(low=settings.price_floor, spread=settings.price_spread, seed=settings.seed)
    ticker = Ticker(settings.symbol, feed, output=typer.echo)
    WarnLow(ticker, settings.low_limit, output=typer.echo)
    WarnHigh(ticker, settings.high_limit, output=typer.echo)
    if config.journal.enabled:
        journal_path = Path(config.journal.path)
        if not journal_path.is_absolute():
            journal_path = (root or DEFAULT_ROOT).resolve() / journal_path
        ticker.add_observer(PriceJournal(journal_path, settings.symbol))

    ticker.run(settings.ticks, interval=settings.interval)


def config_show(root: Path | None = None) -> None:
    """Show effective runtime config."""
    config = _config(root)
    typer.echo(json.dumps(config.model_dump(mode="json"), indent=2))
