from halden_weather.aggregate import dominant_symbol, summarize_by_day
from halden_weather.models import parse_forecast


def _entries(make_forecast, *raw):
    return parse_forecast(make_forecast(*raw)).entries


def test_two_days_min_max(make_entry, make_forecast):
    entries = _entries(
        make_forecast,
        make_entry("2026-07-01T10:00:00Z", temp=2),
        make_entry("2026-07-01T16:00:00Z", temp=8),
        make_entry("2026-07-02T10:00:00Z", temp=10),
        make_entry("2026-07-02T16:00:00Z", temp=1),
    )
    days = summarize_by_day(entries)
    assert [d.day for d in days] == ["2026-07-01", "2026-07-02"]
    assert (days[0].min_temperature, days[0].max_temperature) == (2, 8)
    assert (days[1].min_temperature, days[1].max_temperature) == (1, 10)


def test_limited_to_three_days_in_source_order(make_entry, make_forecast):
    entries = _entries(
        make_forecast,
        make_entry("2026-07-03T00:00:00Z"),
        make_entry("2026-07-01T00:00:00Z"),
        make_entry("2026-07-03T06:00:00Z"),
        make_entry("2026-07-02T00:00:00Z"),
        make_entry("2026-07-04T00:00:00Z"),
    )
    days = summarize_by_day(entries)
    assert [d.day for d in days] == ["2026-07-03", "2026-07-01", "2026-07-02"]


def test_precipitation_sums_missing_as_zero(make_entry, make_forecast):
    entries = _entries(
        make_forecast,
        make_entry("2026-07-01T10:00:00Z", precip=0.4),
        make_entry("2026-07-01T11:00:00Z"),
        make_entry("2026-07-01T12:00:00Z", symbol="rain", precip=1.1),
    )
    [day] = summarize_by_day(entries)
    assert round(day.precipitation, 2) == 1.5


def test_dominant_symbol(make_entry, make_forecast):
    entries = _entries(
        make_forecast,
        make_entry("2026-07-01T10:00:00Z", symbol="cloudy"),
        make_entry("2026-07-01T11:00:00Z", symbol="rain"),
        make_entry("2026-07-01T12:00:00Z", symbol="rain"),
    )
    assert summarize_by_day(entries)[0].symbol_code == "rain"


def test_tie_goes_to_first_seen(make_entry, make_forecast):
    entries = _entries(
        make_forecast,
        make_entry("2026-07-01T10:00:00Z", symbol="fair_day"),
        make_entry("2026-07-01T11:00:00Z", symbol="cloudy"),
        make_entry("2026-07-01T12:00:00Z", symbol="cloudy"),
        make_entry("2026-07-01T13:00:00Z", symbol="fair_day"),
    )
    assert dominant_symbol(list(entries)) == "fair_day"


def test_no_symbols(make_entry, make_forecast):
    entries = _entries(make_forecast, make_entry("2026-07-01T10:00:00Z"))
    assert dominant_symbol(list(entries)) is None
