"""Render forecast and search data as the text blocks the tools return."""

from datetime import date, tzinfo
from typing import Sequence

from .icons import weather_icon
from .models import DailySummary, ForecastEntry, SearchResult


def fmt_number(value) -> str:
    """Render a measurement the way the API sent it: 3.0 -> "3", 7.25 -> "7.25"."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_current(entry: ForecastEntry, location: str) -> str:
    icon = weather_icon(entry.symbol_code)
    return "\n".join([
        f"{icon} Current weather in {location} (via YR.no):",
        f"Temperature: {fmt_number(entry.air_temperature)}°C",
        f"Wind: {fmt_number(entry.wind_speed)} m/s",
        f"Humidity: {fmt_number(entry.relative_humidity)}%",
        f"Pressure: {fmt_number(entry.air_pressure_at_sea_level)} hPa",
    ])


def format_hour(entry: ForecastEntry, tz: tzinfo) -> str:
    hour = entry.time.astimezone(tz).strftime("%H:00")
    line = (
        f"{hour} {weather_icon(entry.symbol_code)} "
        f"{fmt_number(entry.air_temperature)}°C, {fmt_number(entry.wind_speed)} m/s"
    )
    if entry.precipitation > 0:
        line += f", 💧 {fmt_number(entry.precipitation)} mm"
    return line


def day_label(day: str) -> str:
    d = date.fromisoformat(day)
    return f"{d:%A}, {d:%B} {d.day}"


def format_day(summary: DailySummary) -> str:
    line = (
        f"{weather_icon(summary.symbol_code)} {day_label(summary.day)}: "
        f"{fmt_number(summary.min_temperature)}°C to {fmt_number(summary.max_temperature)}°C"
    )
    # Threshold on the raw total; 0.04 mm still shows up as "0.0 mm"
    if summary.precipitation > 0:
        line += f", 💧 {summary.precipitation:.1f} mm"
    return line


def format_search_results(results: Sequence[SearchResult]) -> str:
    return "\n".join(
        f"{i}. **{r.title}**\n   {r.url}\n   {r.description}\n"
        for i, r in enumerate(results, start=1)
    )


def format_venues(results: Sequence[SearchResult]) -> str:
    return "🎯 Suggested places:\n" + "\n\n".join(
        f"{i}. {r.title}\n   {r.url}" for i, r in enumerate(results, start=1)
    )
