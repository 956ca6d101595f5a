"""The Halden weather tools.

Each handler fetches what it needs, formats one text block and returns it.
Upstream failures become fixed messages; handlers never raise.
"""

import logging
from zoneinfo import ZoneInfo

from .activities import plan_activities
from .aggregate import summarize_by_day
from .formatting import (
    fmt_number,
    format_current,
    format_day,
    format_hour,
    format_search_results,
    format_venues,
)
from .models import Failure
from .registry import tool
from .search import BraveSearchClient
from .settings import Settings
from .yr import YrClient

logger = logging.getLogger("halden_weather.tools")

HOURLY_LIMIT = 12
FORECAST_DAYS = 3
ACTIVITY_RESULTS = 2
SEARCH_RESULTS = 3

SEARCH_SETUP_HINT = (
    "🔍 Search functionality requires Brave API key configuration.\n\n"
    "To enable search:\n"
    "1. Get API key from https://brave.com/search/api/\n"
    "2. Set BRAVE_API_KEY environment variable"
)
VENUE_HINT = "💡 Enable search with Brave API key for specific venue suggestions"


class HaldenWeatherTools:
    def __init__(self, settings: Settings, forecast_client=None, search_client=None):
        self.settings = settings
        self.forecast = forecast_client or YrClient(settings)
        self.search = search_client or BraveSearchClient(settings)
        self.tz = ZoneInfo(settings.timezone)

    @property
    def location(self) -> str:
        return self.settings.location_name

    @tool("get-current-weather")
    async def get_current_weather(self) -> str:
        """Get current weather conditions in Halden using YR (Norwegian Meteorological Institute) data"""
        result = await self.forecast.fetch_forecast()
        if isinstance(result, Failure):
            return "❌ Unable to fetch current weather data from YR API. Please try again later."
        return format_current(result.value.current, self.location)

    @tool("get-hourly-forecast")
    async def get_hourly_forecast(self) -> str:
        """Get the hour-by-hour forecast for the next 12 hours in Halden"""
        result = await self.forecast.fetch_forecast()
        if isinstance(result, Failure):
            return "❌ Unable to fetch hourly forecast from YR API. Please try again later."
        lines = [f"⏰ Next {HOURLY_LIMIT} hours in {self.location} (via YR.no):", ""]
        lines += [format_hour(e, self.tz) for e in result.value.entries[:HOURLY_LIMIT]]
        return "\n".join(lines)

    @tool("get-3day-forecast")
    async def get_3day_forecast(self) -> str:
        """Get a 3-day forecast for Halden with temperature range, conditions and precipitation"""
        result = await self.forecast.fetch_forecast()
        if isinstance(result, Failure):
            return "❌ Unable to fetch 3-day forecast from YR API. Please try again later."
        days = summarize_by_day(result.value.entries, days=FORECAST_DAYS)
        lines = [f"📅 {FORECAST_DAYS}-day forecast for {self.location} (via YR.no):", ""]
        lines += [format_day(d) for d in days]
        return "\n".join(lines)

    @tool("suggest-activities")
    async def suggest_activities(self) -> str:
        """Get activity suggestions based on current Halden weather"""
        result = await self.forecast.fetch_forecast()
        if isinstance(result, Failure):
            return "❌ Unable to get weather data for activity suggestions."

        current = result.value.current
        plan = plan_activities(current, self.settings.location_query)

        extra = ""
        if self.search.enabled:
            found = await self.search.search(plan.query, ACTIVITY_RESULTS)
            if isinstance(found, Failure):
                logger.info(f"[Activities] no venue suggestions: {found.reason}")
            elif found.value:
                extra = "\n\n" + format_venues(found.value)
        else:
            extra = "\n\n" + VENUE_HINT

        return "\n".join([
            f"🎯 Activity suggestions for {self.location} "
            f"({fmt_number(current.air_temperature)}°C, {fmt_number(current.wind_speed)} m/s wind):",
            "",
            *plan.messages,
            extra,
        ])

    @tool("search-local-info", schema={
        "type": "object",
        "properties": {
            "query": {
                "type": "string",
                "description": "What to search for in Halden (e.g., 'restaurants', 'events', 'hiking trails')",
            },
        },
        "required": ["query"],
        "additionalProperties": False,
    })
    async def search_local_info(self, query: str) -> str:
        """Search for local information about Halden

        Args:
            query: What to search for, e.g. "restaurants" or "events"
        """
        if not self.search.enabled:
            return SEARCH_SETUP_HINT

        found = await self.search.search(f"{self.settings.location_query} {query}", SEARCH_RESULTS)
        if isinstance(found, Failure) or not found.value:
            return f'🔍 No search results found for "{query}" in {self.location}. Try different keywords.'

        return "\n".join([
            f'🔍 Local info for "{query}" in {self.location}:',
            "",
            format_search_results(found.value),
        ])
