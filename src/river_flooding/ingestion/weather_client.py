"""Catchment weather client supplying rainfall to the discharge optimizer.

Fetches current conditions and the short-range forecast from OpenWeather for
the catchment above Gangapur Dam. Any failure (missing key, network error,
malformed payload) degrades to a fallback reading built from the historical
monsoon average, so callers always receive a usable rainfall figure.
"""
from datetime import datetime, timezone
from typing import Dict, List, Optional
import logging

import requests
from pydantic import BaseModel

from river_flooding.config import settings
from river_flooding.domain.hydrology import predicted_inflow

logger = logging.getLogger(__name__)

FORECAST_HOURS = 6
FALLBACK_TAPER_MM_HR = 0.3


class ForecastPoint(BaseModel):
    time: str
    rain_mm_hr: float


class CatchmentReading(BaseModel):
    current_rainfall: float
    predicted_inflow: float
    hourly_forecast: List[ForecastPoint]
    description: str
    temp: Optional[float] = None
    is_fallback: bool = False
    reason: Optional[str] = None
    updated_at: str


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def build_fallback_reading(reason: str = "missing-api-key", rain_mm_hr: Optional[float] = None) -> CatchmentReading:
    """Reading based on the historical average, tapering over the forecast window."""
    rain = settings.FALLBACK_RAIN_MM_HR if rain_mm_hr is None else rain_mm_hr
    hourly = [
        ForecastPoint(time=f"+{i + 1}h", rain_mm_hr=max(0.0, rain - i * FALLBACK_TAPER_MM_HR))
        for i in range(FORECAST_HOURS)
    ]
    return CatchmentReading(
        current_rainfall=rain,
        predicted_inflow=predicted_inflow(rain),
        hourly_forecast=hourly,
        description="Historical monsoon average (fallback)",
        is_fallback=True,
        reason=reason,
        updated_at=_now_iso(),
    )


class CatchmentWeatherClient:
    """Wrapper for OpenWeather current + forecast retrieval."""

    def __init__(self, api_key: Optional[str] = None, base_url: Optional[str] = None,
                 lat: Optional[float] = None, lon: Optional[float] = None,
                 timeout: Optional[float] = None, session: Optional[requests.Session] = None):
        self.api_key = api_key if api_key is not None else settings.OPENWEATHER_API_KEY
        self.base_url = (base_url or settings.OPENWEATHER_URL).rstrip("/")
        self.lat = lat if lat is not None else settings.CATCHMENT_LAT
        self.lon = lon if lon is not None else settings.CATCHMENT_LON
        self.timeout = timeout if timeout is not None else settings.WEATHER_TIMEOUT_S
        self.session = session or requests.Session()

    def _get(self, endpoint: str) -> Dict:
        params = {"lat": self.lat, "lon": self.lon, "appid": self.api_key, "units": "metric"}
        response = self.session.get(f"{self.base_url}/{endpoint}", params=params, timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    @staticmethod
    def parse_forecast(forecast: Dict) -> List[ForecastPoint]:
        """Convert 3-hour accumulations of the first forecast entries to mm/hr."""
        points = []
        for entry in (forecast.get("list") or [])[:FORECAST_HOURS]:
            rain_3h = (entry.get("rain") or {}).get("3h", 0.0)
            points.append(ForecastPoint(time=entry.get("dt_txt", "N/A"), rain_mm_hr=float(rain_3h) / 3))
        return points

    @staticmethod
    def parse_current(current: Dict) -> Dict:
        weather = current.get("weather") or [{}]
        return {
            "rain_1h": float((current.get("rain") or {}).get("1h", 0.0)),
            "description": weather[0].get("description", "No description"),
            "temp": (current.get("main") or {}).get("temp"),
        }

    def fetch(self) -> CatchmentReading:
        if not self.api_key:
            logger.warning("OPENWEATHER_API_KEY not set; using fallback rainfall average")
            return build_fallback_reading("missing-api-key")
        try:
            current = self.parse_current(self._get("weather"))
            hourly = self.parse_forecast(self._get("forecast"))
        except (requests.exceptions.RequestException, ValueError, TypeError, AttributeError) as e:
            logger.error(f"Catchment weather fetch failed, using fallback: {e}")
            return build_fallback_reading("request-failed")
        return CatchmentReading(
            current_rainfall=current["rain_1h"],
            predicted_inflow=predicted_inflow(current["rain_1h"]),
            hourly_forecast=hourly,
            description=current["description"],
            temp=current["temp"],
            updated_at=_now_iso(),
        )
