"""Shared test fixtures."""

import pytest

from halden_weather.settings import Settings


def entry(time, temp=10, wind=3, symbol=None, precip=None, humidity=80, pressure=1013.2):
    """One raw Locationforecast timeseries item."""
    raw = {
        "time": time,
        "data": {
            "instant": {
                "details": {
                    "air_temperature": temp,
                    "wind_speed": wind,
                    "relative_humidity": humidity,
                    "air_pressure_at_sea_level": pressure,
                }
            }
        },
    }
    if symbol is not None or precip is not None:
        next1h = {}
        if symbol is not None:
            next1h["summary"] = {"symbol_code": symbol}
        if precip is not None:
            next1h["details"] = {"precipitation_amount": precip}
        raw["data"]["next_1_hours"] = next1h
    return raw


def forecast(*entries):
    return {"type": "Feature", "properties": {"timeseries": list(entries)}}


@pytest.fixture
def make_entry():
    return entry


@pytest.fixture
def make_forecast():
    return forecast


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings without a search key."""
    return Settings(log_dir=str(tmp_path / "logs"))


@pytest.fixture
def search_settings(tmp_path) -> Settings:
    return Settings(brave_api_key="test-key", log_dir=str(tmp_path / "logs"))
