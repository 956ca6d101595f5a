from datetime import datetime, timezone

import pytest

from halden_weather.models import parse_forecast, parse_search_results


def test_parse_forecast(make_entry, make_forecast):
    payload = make_forecast(
        make_entry("2026-07-01T12:00:00Z", temp=3, wind=12, symbol="rain", precip=1.2),
        make_entry("2026-07-01T13:00:00Z"),
    )
    fc = parse_forecast(payload)
    assert len(fc.entries) == 2
    first = fc.current
    assert first.time == datetime(2026, 7, 1, 12, tzinfo=timezone.utc)
    assert first.air_temperature == 3
    assert first.symbol_code == "rain"
    assert first.precipitation == 1.2
    assert fc.entries[1].symbol_code is None
    assert fc.entries[1].precipitation == 0


def test_day_key_uses_utc_date(make_entry, make_forecast):
    late, early = parse_forecast(make_forecast(
        make_entry("2026-07-01T23:30:00+02:00"),
        make_entry("2026-07-02T01:30:00+02:00"),
    )).entries
    assert late.day_key == "2026-07-01"
    assert early.day_key == "2026-07-01"


@pytest.mark.parametrize("payload", [
    {},
    {"properties": {}},
    {"properties": {"timeseries": []}},
    {"properties": {"timeseries": [{"time": "2026-07-01T12:00:00Z"}]}},
    {"properties": {"timeseries": [{"time": "yesterday", "data": {}}]}},
    ["not", "an", "object"],
])
def test_malformed_forecast_raises(payload):
    with pytest.raises(ValueError):
        parse_forecast(payload)


def _with(raw, **data):
    raw["data"].update(data)
    return raw


@pytest.mark.parametrize("build", [
    lambda e: {**e("2026-07-01T12:00:00Z"), "time": None},
    lambda e: _with(e("2026-07-01T12:00:00Z"), next_1_hours=["x"]),
    lambda e: _with(e("2026-07-01T12:00:00Z"), next_1_hours={"summary": "rain"}),
    lambda e: _with(e("2026-07-01T12:00:00Z"), next_1_hours={"summary": {"symbol_code": 4}}),
    lambda e: _with(e("2026-07-01T12:00:00Z"), next_1_hours={"details": {"precipitation_amount": "1.2"}}),
    lambda e: _with(e("2026-07-01T12:00:00Z"), instant={"details": "cold"}),
    lambda e: e("2026-07-01T12:00:00Z", temp=None),
    lambda e: e("2026-07-01T12:00:00Z", wind="12"),
    lambda e: e("2026-07-01T12:00:00Z", humidity=None),
    lambda e: e("2026-07-01T12:00:00Z", pressure=True),
])
def test_wrong_typed_entry_raises(build, make_entry, make_forecast):
    with pytest.raises(ValueError):
        parse_forecast(make_forecast(build(make_entry)))


def test_missing_next_hour_precipitation_is_allowed(make_entry, make_forecast):
    entry = make_entry("2026-07-01T12:00:00Z", symbol="cloudy")
    assert parse_forecast(make_forecast(entry)).current.precipitation_amount is None


def test_parse_search_results():
    payload = {"web": {"results": [
        {"title": "A", "url": "https://a.no", "description": "first"},
        {"title": "B", "url": "https://b.no"},
    ]}}
    results = parse_search_results(payload)
    assert [r.title for r in results] == ["A", "B"]
    assert results[1].description == ""


def test_search_without_web_section_is_empty():
    assert parse_search_results({"query": {}}) == []


@pytest.mark.parametrize("payload", [
    {"web": []},
    {"web": {"results": "none"}},
    {"web": {"results": ["not a result"]}},
    "just text",
])
def test_malformed_search_payload_raises(payload):
    with pytest.raises(ValueError):
        parse_search_results(payload)


def test_search_without_results_key_is_empty():
    assert parse_search_results({"web": {"type": "search"}}) == []
