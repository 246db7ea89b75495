"""CLI entrypoint for eventful."""

from __future__ import annotations

from pathlib import Path

import typer

from ui.cli import commands

app = typer.Typer(help="Observer pattern demo: stock ticker and price warners")
ticker_app = typer.Typer(help="Ticker commands")
config_app = typer.Typer(help="Configuration commands")


@ticker_app.command("run")
def ticker_run_cmd(
    symbol: str | None = typer.Option(None, help="Ticker symbol"),
    ticks: int | None = typer.Option(None, min=0, help="Number of price polls"),
    interval: float | None = typer.Option(None, min=0.0, help="Seconds between polls"),
    low: int | None = typer.Option(None, help="Warn when price drops below this"),
    high: int | None = typer.Option(None, help="Warn when price rises above this"),
    seed: int | None = typer.Option(None, help="Seed for the mock price feed"),
    journal: bool | None = typer.Option(None, "--journal/--no-journal", help="Write a JSONL price journal"),
    root: Path | None = typer.Option(None, help="Project root holding config/"),
) -> None:
    """Run the ticker with low and high price warners."""
    commands.run_ticker(
        symbol=symbol,
        ticks=ticks,
        interval=interval,
        low=low,
        high=high,
        seed=seed,
        journal=journal,
        root=root,
    )


@config_app.command("show")
def config_show_cmd(
    root: Path | None = typer.Option(None, help="Project root holding config/"),
) -> None:
    """Show effective configuration."""
    commands.config_show(root=root)


app.add_typer(ticker_app, name="ticker")
app.add_typer(config_app, name="config")


def main() -> None:
    """Console script entrypoint."""
    app()


if __name__ == "__main__":
    main()
