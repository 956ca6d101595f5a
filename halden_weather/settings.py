"""Process-wide configuration for the Halden weather server.

Built once at startup with `Settings.from_env()` and handed to every client,
so nothing below this module reads the environment.
"""

import os
from dataclasses import dataclass, field
from typing import Mapping

# Halden coordinates
HALDEN_LAT = 59.1313
HALDEN_LON = 11.3871

USER_AGENT = "weather-mcp-app/1.0"
YR_FORECAST_URL = "https://api.met.no/weatherapi/locationforecast/2.0/compact"
BRAVE_SEARCH_URL = "https://api.search.brave.com/res/v1/web/search"
DEFAULT_AGENT_MODEL = "claude-haiku-4-5-20251001"


@dataclass(frozen=True)
class Settings:
    latitude: float = HALDEN_LAT
    longitude: float = HALDEN_LON
    location_name: str = "Halden"
    country_code: str = "NO"
    timezone: str = "Europe/Oslo"
    user_agent: str = USER_AGENT
    forecast_url: str = YR_FORECAST_URL
    search_url: str = BRAVE_SEARCH_URL
    brave_api_key: str | None = None
    http_timeout: float = 30.0
    log_dir: str = "logs"
    enabled_tools: tuple[str, ...] = field(default_factory=tuple)
    agent_model: str = DEFAULT_AGENT_MODEL

    @property
    def search_enabled(self) -> bool:
        return bool(self.brave_api_key)

    @property
    def location_query(self) -> str:
        """Qualifier prepended to every web search, e.g. "Halden Norway"."""
        return f"{self.location_name} Norway"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ
        api_key = (env.get("BRAVE_API_KEY") or "").strip() or None
        tools = tuple(
            name.strip()
            for name in env.get("HALDEN_WEATHER_TOOLS", "").split(",")
            if name.strip()
        )
        return cls(
            brave_api_key=api_key,
            log_dir=env.get("LOG_DIR", "logs"),
            enabled_tools=tools,
            agent_model=env.get("HALDEN_AGENT_MODEL") or DEFAULT_AGENT_MODEL,
        )
