from collections import Counter
from typing import Iterable

from .models import DailySummary, ForecastEntry


def dominant_symbol(entries: list[ForecastEntry]) -> str | None:
    """Most frequent symbol code; ties go to the code seen first."""
    codes = [e.symbol_code for e in entries if e.symbol_code]
    if not codes:
        return None
    counts = Counter(codes)
    best = max(counts.values())
    return next(code for code in codes if counts[code] == best)


def summarize_by_day(entries: Iterable[ForecastEntry], days: int = 3) -> list[DailySummary]:
    """Collapse a time series into per-day summaries.

    Days keep the order in which they first appear in `entries` (the upstream
    series is already chronological) and only the first `days` are returned.
    """
    groups: dict[str, list[ForecastEntry]] = {}
    for entry in entries:
        groups.setdefault(entry.day_key, []).append(entry)

    summaries = []
    for day, day_entries in list(groups.items())[:days]:
        temps = [e.air_temperature for e in day_entries]
        summaries.append(
            DailySummary(
                day=day,
                min_temperature=min(temps),
                max_temperature=max(temps),
                symbol_code=dominant_symbol(day_entries),
                precipitation=sum(e.precipitation for e in day_entries),
            )
        )
    return summaries
