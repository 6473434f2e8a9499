"""Observer pattern: notification engines and example subjects."""

from .events import Event, EventEmitter, EventFilter, EventLogger
from .notifier import AsyncNotifier, AsyncObserver, Observer, ObserverFailure, SyncNotifier
from .processors import AsyncProcessor
from .stock import PortfolioTracker, Stock, StockData, StockDisplay
from .weather import (
    HumidityDisplay,
    TemperatureDisplay,
    WeatherData,
    WeatherForecast,
    WeatherStation,
)

__all__ = [
    "AsyncNotifier",
    "AsyncObserver",
    "AsyncProcessor",
    "Event",
    "EventEmitter",
    "EventFilter",
    "EventLogger",
    "HumidityDisplay",
    "Observer",
    "ObserverFailure",
    "PortfolioTracker",
    "Stock",
    "StockData",
    "StockDisplay",
    "SyncNotifier",
    "TemperatureDisplay",
    "WeatherData",
    "WeatherForecast",
    "WeatherStation",
]
