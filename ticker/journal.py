"""JSONL journal of broadcast prices."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any


class PriceJournal:
    """Observer that appends every price notification as a JSON line."""

    def __init__(self, log_path: Path, symbol: str) -> None:
        self.log_path = log_path
        self.symbol = symbol
        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        self.logger = logging.getLogger("eventful.journal")

    def observable_changed(self, time: datetime, price: int) -> None:
        """Append one JSONL price event."""
        event = {
            "timestamp": time.isoformat(),
            "symbol": self.symbol,
            "price": price,
        }
        with self.log_path.open("a", encoding="utf-8") as fh:
            fh.write(json.dumps(event, ensure_ascii=True) + "\n")
        self.logger.info(json.dumps(event, ensure_ascii=True))

    def read(self) -> list[dict[str, Any]]:
        """Return recorded events, oldest first."""
        if not self.log_path.exists():
            return []
        with self.log_path.open("r", encoding="utf-8") as fh:
            return [json.loads(line) for line in fh if line.strip()]
