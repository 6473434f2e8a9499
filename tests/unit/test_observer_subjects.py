import pytest

from design_patterns.behavioral.observer import (
    HumidityDisplay,
    PortfolioTracker,
    Stock,
    StockDisplay,
    TemperatureDisplay,
    WeatherForecast,
    WeatherStation,
)


class TestWeatherStation:
    def test_initial_reading(self):
        current = WeatherStation().get_current_weather()
        assert (current.temperature, current.humidity, current.pressure) == (20, 50, 1013.25)

    def test_displays_render_each_reading(self):
        station = WeatherStation()
        temperature = TemperatureDisplay("temp")
        humidity = HumidityDisplay("humidity")
        station.add(temperature)
        station.add(humidity)

        station.set_weather_data(25, 60, 1015)

        assert temperature.rendered == ["[temp] Temperature Display: 25°C"]
        assert humidity.rendered == ["[humidity] Humidity Display: 60%"]
        assert station.get_current_weather().temperature == 25

    def test_removed_display_stops_updating(self):
        station = WeatherStation()
        display = TemperatureDisplay("temp")
        station.add(display)
        station.set_weather_data(25, 60, 1015)
        station.remove(display)
        station.set_weather_data(30, 70, 1020)

        assert len(display.rendered) == 1


class TestWeatherForecast:
    @pytest.mark.parametrize(
        "readings, expected",
        [
            ([(20, 50, 1013)], "Not enough data"),
            ([(20, 50, 1013), (22, 50, 1016)], "Improving weather expected"),
            ([(20, 50, 1013), (18, 50, 1010)], "Stormy weather expected"),
            ([(20, 50, 1013), (21, 50, 1013.5)], "Stable weather expected"),
        ],
    )
    def test_forecast_from_latest_two_readings(self, readings, expected):
        station = WeatherStation()
        forecast = WeatherForecast("forecast")
        station.add(forecast)

        for reading in readings:
            station.set_weather_data(*reading)

        assert forecast.generate_forecast() == expected
        assert forecast.rendered[-1] == f"[forecast] Weather Forecast: {expected}"

    def test_history_keeps_last_ten(self):
        station = WeatherStation()
        forecast = WeatherForecast("forecast")
        station.add(forecast)

        for temperature in range(15):
            station.set_weather_data(temperature, 50, 1013)

        history = forecast.history
        assert len(history) == 10
        assert history[0].temperature == 5
        assert history[-1].temperature == 14


class TestStock:
    def test_price_change_is_published(self):
        stock = Stock("AAPL", 150.0)
        display = StockDisplay("ticker")
        stock.add(display)

        data = stock.set_price(155.5)

        assert data.symbol == "AAPL"
        assert data.change == pytest.approx(5.5)
        assert data.change_percent == pytest.approx(3.6667, rel=1e-3)
        assert 100_000 <= data.volume < 1_100_000
        assert display.rendered == ["[ticker] 🟢 AAPL: $155.50 ↗ 3.67%"]
        assert stock.get_price() == 155.5
        assert stock.get_symbol() == "AAPL"

    def test_price_drop_rendering(self):
        stock = Stock("GOOGL", 2800.0)
        display = StockDisplay("ticker")
        stock.add(display)

        stock.set_price(2750.25)

        assert display.rendered == ["[ticker] 🔴 GOOGL: $2750.25 ↘ -1.78%"]

    def test_portfolio_tracks_held_symbols_only(self):
        apple = Stock("AAPL", 150.0)
        google = Stock("GOOGL", 2800.0)
        portfolio = PortfolioTracker("portfolio")
        portfolio.add_holding("AAPL", 100)
        apple.add(portfolio)
        google.add(portfolio)

        apple.set_price(155.5)
        google.set_price(2750.25)

        assert portfolio.rendered == [
            "[portfolio] Portfolio: AAPL 100 shares = $15550.00 (+$550.00)"
        ]
