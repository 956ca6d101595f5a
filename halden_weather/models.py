"""Forecast and search data types, plus the parsers that build them."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Failure:
    reason: str


@dataclass(frozen=True)
class ForecastEntry:
    time: datetime
    air_temperature: float
    wind_speed: float
    relative_humidity: float
    air_pressure_at_sea_level: float
    symbol_code: str | None = None
    precipitation_amount: float | None = None

    @property
    def precipitation(self) -> float:
        return self.precipitation_amount or 0

    @property
    def day_key(self) -> str:
        return self.time.astimezone(timezone.utc).date().isoformat()


@dataclass(frozen=True)
class Forecast:
    entries: tuple[ForecastEntry, ...]

    @property
    def current(self) -> ForecastEntry:
        return self.entries[0]


@dataclass(frozen=True)
class DailySummary:
    day: str
    min_temperature: float
    max_temperature: float
    symbol_code: str | None
    precipitation: float


@dataclass(frozen=True)
class SearchResult:
    title: str
    url: str
    description: str = ""


def parse_timestamp(value: str) -> datetime:
    # fromisoformat() only accepts a trailing "Z" from Python 3.11 on
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _number(details: dict[str, Any], key: str, required: bool = True) -> float | None:
    value = details.get(key)
    if value is None and not required:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{key} is not a number: {value!r}")
    return value


def _parse_entry(raw: dict[str, Any]) -> ForecastEntry:
    data = raw["data"]
    details = data["instant"]["details"]
    next1h = data.get("next_1_hours") or {}
    symbol_code = (next1h.get("summary") or {}).get("symbol_code")
    if symbol_code is not None and not isinstance(symbol_code, str):
        raise ValueError(f"symbol_code is not a string: {symbol_code!r}")
    return ForecastEntry(
        time=parse_timestamp(raw["time"]),
        air_temperature=_number(details, "air_temperature"),
        wind_speed=_number(details, "wind_speed"),
        relative_humidity=_number(details, "relative_humidity"),
        air_pressure_at_sea_level=_number(details, "air_pressure_at_sea_level"),
        symbol_code=symbol_code,
        precipitation_amount=_number(next1h.get("details") or {}, "precipitation_amount", required=False),
    )


def parse_forecast(payload: Any) -> Forecast:
    """Build a Forecast from a Locationforecast 2.0 JSON document.

    Raises:
        ValueError: the document is malformed or has an empty time series.
    """
    try:
        timeseries = payload["properties"]["timeseries"]
        entries = tuple(_parse_entry(raw) for raw in timeseries)
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise ValueError(f"malformed forecast payload: {e!r}") from e
    if not entries:
        raise ValueError("forecast payload has an empty timeseries")
    return Forecast(entries=entries)


def parse_search_results(payload: Any) -> list[SearchResult]:
    """Extract `web.results[]` from a Brave search response.

    A response without a `web` section or without `web.results` means no
    results; anything else that does not look like Brave's shape raises
    `ValueError`.
    """
    if not isinstance(payload, dict):
        raise ValueError("search payload is not a JSON object")
    web = payload.get("web")
    if web is None:
        return []
    results = web.get("results", []) if isinstance(web, dict) else None
    if not isinstance(results, list) or not all(isinstance(item, dict) for item in results):
        raise ValueError("search payload has no usable web.results list")
    return [
        SearchResult(
            title=item.get("title", ""),
            url=item.get("url", ""),
            description=item.get("description", ""),
        )
        for item in results
    ]
