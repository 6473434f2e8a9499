"""Weather station subject with display and forecast observers."""

from collections import deque
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Deque, List

import click

from .notifier import SyncNotifier

HISTORY_SIZE = 10


@dataclass(frozen=True)
class WeatherData:
    """A single weather reading."""

    temperature: float
    humidity: float
    pressure: float
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class WeatherStation(SyncNotifier[WeatherData]):
    """Subject that publishes every new reading to its observers."""

    def __init__(self) -> None:
        super().__init__()
        self._current = WeatherData(temperature=20, humidity=50, pressure=1013.25)

    def set_weather_data(self, temperature: float, humidity: float, pressure: float) -> None:
        self._current = WeatherData(temperature=temperature, humidity=humidity, pressure=pressure)
        self.notify(self._current)

    def get_current_weather(self) -> WeatherData:
        return replace(self._current)


class _Display:
    def __init__(self, display_id: str):
        self._id = display_id
        self.rendered: List[str] = []

    def _show(self, line: str) -> None:
        self.rendered.append(line)
        click.echo(line)

    def get_id(self) -> str:
        return self._id


class TemperatureDisplay(_Display):
    def update(self, weather: WeatherData) -> None:
        self._show(f"[{self._id}] Temperature Display: {weather.temperature}°C")


class HumidityDisplay(_Display):
    def update(self, weather: WeatherData) -> None:
        self._show(f"[{self._id}] Humidity Display: {weather.humidity}%")


class WeatherForecast(_Display):
    """Keeps the last ten readings and forecasts from the latest two."""

    def __init__(self, display_id: str):
        super().__init__(display_id)
        self._history: Deque[WeatherData] = deque(maxlen=HISTORY_SIZE)

    @property
    def history(self) -> List[WeatherData]:
        return list(self._history)

    def update(self, weather: WeatherData) -> None:
        self._history.append(weather)
        self._show(f"[{self._id}] Weather Forecast: {self.generate_forecast()}")

    def generate_forecast(self) -> str:
        if len(self._history) < 2:
            return "Not enough data"

        previous, latest = self._history[-2], self._history[-1]
        temp_trend = latest.temperature - previous.temperature
        pressure_trend = latest.pressure - previous.pressure

        if pressure_trend > 1 and temp_trend > 0:
            return "Improving weather expected"
        elif pressure_trend < -1 and temp_trend < 0:
            return "Stormy weather expected"
        return "Stable weather expected"
