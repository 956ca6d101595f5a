"""Client for the MET Norway (YR) Locationforecast API."""

import logging

import httpx

from .models import Failure, Forecast, Ok, parse_forecast
from .settings import Settings

logger = logging.getLogger("halden_weather.yr")


class YrClient:
    def __init__(self, settings: Settings):
        self.settings = settings

    async def fetch_forecast(self) -> Ok[Forecast] | Failure:
        """Fetch the compact forecast for the configured coordinates.

        Makes exactly one request. Never raises: every failure is logged and
        returned as a `Failure`.
        """
        params = {"lat": self.settings.latitude, "lon": self.settings.longitude}
        headers = {"User-Agent": self.settings.user_agent, "Accept": "application/json"}
        async with httpx.AsyncClient(follow_redirects=True) as client:
            try:
                response = await client.get(
                    self.settings.forecast_url,
                    params=params,
                    headers=headers,
                    timeout=self.settings.http_timeout,
                )
                response.raise_for_status()
                payload = response.json()
            except httpx.HTTPStatusError as e:
                logger.error(f"[YR API Error] status {e.response.status_code}: {e.response.reason_phrase}")
                return Failure(f"YR API responded with status {e.response.status_code}")
            except httpx.RequestError as e:
                logger.exception(f"[YR API Error] request failed: {e}")
                return Failure(f"YR API request failed: {e}")
            except ValueError as e:
                logger.error(f"[YR API Error] invalid JSON body: {e}")
                return Failure("YR API returned invalid JSON")

        try:
            forecast = parse_forecast(payload)
        except ValueError as e:
            logger.error(f"[YR API Error] {e}")
            return Failure(str(e))

        logger.info(
            f"[YR API] fetched forecast for {self.settings.location_name} "
            f"({len(forecast.entries)} time points)"
        )
        return Ok(forecast)
