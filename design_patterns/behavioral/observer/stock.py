"""Stock ticker subject with display and portfolio observers."""

import random
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List

import click

from .notifier import SyncNotifier


@dataclass(frozen=True)
class StockData:
    """Price update published by a ``Stock``."""

    symbol: str
    price: float
    change: float
    change_percent: float
    volume: int
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class Stock(SyncNotifier[StockData]):
    """Subject that notifies observers whenever its price changes."""

    def __init__(self, symbol: str, initial_price: float):
        super().__init__()
        self._symbol = symbol
        self._price = initial_price
        self._previous_price = initial_price

    def set_price(self, new_price: float) -> StockData:
        self._previous_price = self._price
        self._price = new_price

        change = self._price - self._previous_price
        stock_data = StockData(
            symbol=self._symbol,
            price=self._price,
            change=change,
            change_percent=(change / self._previous_price) * 100 if self._previous_price else 0.0,
            volume=random.randrange(100_000, 1_100_000),
        )
        self.notify(stock_data)
        return stock_data

    def get_price(self) -> float:
        return self._price

    def get_symbol(self) -> str:
        return self._symbol


class StockDisplay:
    def __init__(self, display_id: str):
        self._id = display_id
        self.rendered: List[str] = []

    def update(self, stock: StockData) -> None:
        arrow = "↗" if stock.change >= 0 else "↘"
        marker = "🟢" if stock.change >= 0 else "🔴"
        line = (
            f"[{self._id}] {marker} {stock.symbol}: ${stock.price:.2f} "
            f"{arrow} {stock.change_percent:.2f}%"
        )
        self.rendered.append(line)
        click.echo(line)

    def get_id(self) -> str:
        return self._id


class PortfolioTracker:
    """Reports position value for symbols it holds; ignores the rest."""

    def __init__(self, tracker_id: str):
        self._id = tracker_id
        self._holdings: Dict[str, int] = {}
        self.rendered: List[str] = []

    def add_holding(self, symbol: str, shares: int) -> None:
        self._holdings[symbol] = shares

    def update(self, stock: StockData) -> None:
        shares = self._holdings.get(stock.symbol)
        if not shares:
            return

        value = shares * stock.price
        change = shares * stock.change
        sign = "+" if change >= 0 else "-"
        line = (
            f"[{self._id}] Portfolio: {stock.symbol} {shares} shares = ${value:.2f} "
            f"({sign}${abs(change):.2f})"
        )
        self.rendered.append(line)
        click.echo(line)

    def get_id(self) -> str:
        return self._id
