"""Observer pattern demo."""

import time

import click

from .events import EventEmitter, EventFilter, EventLogger
from .notifier import AsyncNotifier
from .processors import AsyncProcessor
from .stock import PortfolioTracker, Stock, StockDisplay
from .weather import HumidityDisplay, TemperatureDisplay, WeatherForecast, WeatherStation


async def demonstrate_observer() -> None:
    click.echo("=== Observer Pattern Demo ===\n")

    click.echo("1. Weather Station:")
    station = WeatherStation()
    temp_display_1 = TemperatureDisplay("TempDisplay-1")
    temp_display_2 = TemperatureDisplay("TempDisplay-2")
    for observer in (
        temp_display_1,
        temp_display_2,
        HumidityDisplay("HumidityDisplay"),
        WeatherForecast("WeatherForecast"),
    ):
        station.add(observer)

    click.echo(f"Observers registered: {station.count()}")
    station.set_weather_data(25, 60, 1020)
    station.set_weather_data(28, 55, 1025)
    station.set_weather_data(22, 70, 1015)

    click.echo("\nRemoving one temperature display...")
    station.remove(temp_display_2)
    station.set_weather_data(20, 75, 1010)
    click.echo()

    click.echo("2. Stock Market:")
    apple = Stock("AAPL", 150.00)
    google = Stock("GOOGL", 2800.00)
    stock_display = StockDisplay("StockDisplay")
    portfolio = PortfolioTracker("MyPortfolio")
    portfolio.add_holding("AAPL", 100)
    portfolio.add_holding("GOOGL", 10)
    for stock in (apple, google):
        stock.add(stock_display)
        stock.add(portfolio)

    apple.set_price(155.50)
    google.set_price(2750.00)
    apple.set_price(148.25)
    google.set_price(2820.50)
    click.echo()

    click.echo("3. Event System:")
    emitter = EventEmitter()
    system_logger = EventLogger("SystemLogger")
    error_filter = EventFilter("ErrorFilter", ["error", "warning"])
    debug_filter = EventFilter("DebugFilter", ["debug", "info"])
    emitter.add(system_logger)
    emitter.add(error_filter)
    emitter.add(debug_filter)

    error_logger = EventLogger("ErrorLogger")
    debug_logger = EventLogger("DebugLogger")
    error_filter.get_filtered_emitter().add(error_logger)
    debug_filter.get_filtered_emitter().add(debug_logger)

    emitter.emit("info", {"message": "Application started"}, "App")
    emitter.emit("error", {"message": "Database connection failed"}, "DB")
    emitter.emit("debug", {"message": "Processing user request"}, "API")
    emitter.emit("warning", {"message": "High memory usage detected"}, "Monitor")

    click.echo(f"\nTotal events logged: {system_logger.get_logs_count()}")
    click.echo(f"Error events logged: {error_logger.get_logs_count()}")
    click.echo(f"Debug events logged: {debug_logger.get_logs_count()}\n")

    click.echo("4. Async Observer Pattern:")
    notifier: AsyncNotifier[str] = AsyncNotifier()
    notifier.add(AsyncProcessor("AsyncProcessor1", 0.2))
    notifier.add(AsyncProcessor("AsyncProcessor2", 0.3))
    notifier.add(AsyncProcessor("AsyncProcessor3", 0.1))

    click.echo("Parallel async notification:")
    started = time.perf_counter()
    await notifier.notify_parallel("Parallel processing data")
    click.echo(f"Parallel processing completed in {(time.perf_counter() - started) * 1000:.0f}ms\n")

    click.echo("Sequential async notification:")
    started = time.perf_counter()
    await notifier.notify_sequential("Sequential processing data")
    click.echo(
        f"Sequential processing completed in {(time.perf_counter() - started) * 1000:.0f}ms\n"
    )

    click.echo("5. Observer Management:")
    managed = WeatherStation()
    displays = [TemperatureDisplay(f"Display{i}") for i in range(1, 4)]
    for display in displays:
        managed.add(display)

    click.echo(f"Observers: {managed.count()}")
    click.echo(f"Has Display1: {managed.has(displays[0])}")
    managed.set_weather_data(30, 40, 1030)

    click.echo("\nClearing all observers...")
    managed.clear()
    click.echo(f"Observers after clear: {managed.count()}")
    managed.set_weather_data(35, 45, 1035)

    click.echo("\n=== Observer Pattern Demo Complete ===")
