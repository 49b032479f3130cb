"""
clients/weather_client.py
-------------------------
Async client for Open-Meteo (forecast, geocoding) and Nominatim
(reverse geocoding).

Responsibilities:
    - Resolve a city name to coordinates and coordinates to a city.
    - Fetch current conditions, hourly and daily forecasts.
    - Map raw JSON to models.weather records.
"""

from datetime import date, datetime
from typing import Any, Optional

import httpx

from config import (
    NOMINATIM_REVERSE_URL,
    OPEN_METEO_FORECAST_URL,
    OPEN_METEO_GEOCODING_URL,
    WEATHER_HTTP_TIMEOUT_SECONDS,
    WEATHER_USER_AGENT,
)
from models.weather import (
    CurrentWeather,
    DailyForecast,
    HourlyForecast,
    ReverseGeocodingResult,
    Weather,
)
from utils.logger import get_logger

logger = get_logger(__name__)

CURRENT_VARS = (
    "temperature_2m,relative_humidity_2m,apparent_temperature,is_day,"
    "precipitation,cloud_cover,wind_speed_10m"
)
HOURLY_VARS = (
    "temperature_2m,relative_humidity_2m,apparent_temperature,"
    "precipitation_probability,precipitation,cloud_cover,wind_speed_10m,"
    "uv_index,is_day"
)
DAILY_VARS = (
    "temperature_2m_max,temperature_2m_min,precipitation_sum,"
    "precipitation_probability_max,uv_index_max,cloud_cover_mean"
)


class WeatherApiError(Exception):
    """A weather or geocoding request failed or returned nothing usable."""


def map_condition(precipitation: float, cloud_cover: float, is_day: bool = True) -> tuple[str, str]:
    """
    Summarize raw readings as a (condition, icon) pair.

    Heavy precipitation wins over cloud cover; "Sunny" needs daylight.
    """
    if precipitation >= 3:
        return "Rainy", "🌧"
    if cloud_cover >= 80:
        return "Cloudy", "☁️"
    if is_day and cloud_cover <= 20:
        return "Sunny", "☀️"
    return "Clear", "🌤"


def _num(value: Any, default: float = 0.0) -> float:
    return default if value is None else float(value)


def _opt(value: Any) -> Optional[float]:
    return None if value is None else float(value)


def _column(block: dict, key: str, index: int) -> Any:
    values = block.get(key) or []
    return values[index] if index < len(values) else None


class WeatherApiClient:
    """
    Thin async wrapper over the weather HTTP APIs.

    One httpx.AsyncClient is reused for every request; call `close()` on shutdown.
    """

    def __init__(self, client: Optional[httpx.AsyncClient] = None):
        self.client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(WEATHER_HTTP_TIMEOUT_SECONDS, connect=5.0),
            headers={"User-Agent": WEATHER_USER_AGENT},
        )

    async def _get_json(self, url: str, params: dict) -> dict:
        try:
            response = await self.client.get(url, params=params)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"[weather] {url} -> {e.response.status_code}")
            raise WeatherApiError(f"Weather provider returned {e.response.status_code}") from e
        except httpx.RequestError as e:
            logger.error(f"[weather] Request to {url} failed: {e}")
            raise WeatherApiError("Weather provider unreachable") from e
        except ValueError as e:
            logger.error(f"[weather] {url} returned invalid JSON: {e}")
            raise WeatherApiError("Weather provider returned invalid JSON") from e

        if not isinstance(data, dict):
            logger.error(f"[weather] {url} returned {type(data).__name__}, expected an object")
            raise WeatherApiError("Weather provider returned an unexpected payload")
        return data

    # ── Geocoding ─────────────────────────────────────────

    async def get_coordinates_by_city(self, city: str) -> tuple[float, float]:
        """
        Resolve a city name to (latitude, longitude).

        Raises:
            WeatherApiError: If the city is unknown or the request fails.
        """
        data = await self._get_json(
            OPEN_METEO_GEOCODING_URL,
            {"name": city, "count": 1, "language": "en"},
        )
        results = data.get("results") or []
        if not results:
            raise WeatherApiError(f"City not found: {city}")
        first = results[0]
        return float(first["latitude"]), float(first["longitude"])

    async def get_city_and_country(self, lat: float, lon: float) -> ReverseGeocodingResult:
        data = await self._get_json(
            NOMINATIM_REVERSE_URL,
            {"format": "json", "lat": lat, "lon": lon, "zoom": 10, "addressdetails": 1},
        )
        address = data.get("address") or {}
        city = address.get("city") or address.get("town") or address.get("village") or ""
        return ReverseGeocodingResult(city=city, country=address.get("country", ""))

    # ── Forecasts ─────────────────────────────────────────

    async def _forecast(
        self,
        lat: float,
        lon: float,
        hourly: bool = True,
        daily: bool = True,
        forecast_days: int = 7,
    ) -> Weather:
        params = {
            "latitude": lat,
            "longitude": lon,
            "current": CURRENT_VARS,
            "timezone": "auto",
            "forecast_days": forecast_days,
        }
        if hourly:
            params["hourly"] = HOURLY_VARS
        if daily:
            params["daily"] = DAILY_VARS
        return self._parse_forecast(await self._get_json(OPEN_METEO_FORECAST_URL, params))

    async def get_current_weather(self, lat: float, lon: float) -> Weather:
        return await self._forecast(lat, lon, hourly=True, daily=False, forecast_days=1)

    async def get_hourly_forecast(self, lat: float, lon: float, hours: int = 24) -> Weather:
        weather = await self._forecast(lat, lon, hourly=True, daily=False, forecast_days=2)
        weather.hourly = weather.hourly[:hours]
        return weather

    async def get_daily_forecast(self, lat: float, lon: float, days: int = 7) -> Weather:
        weather = await self._forecast(lat, lon, hourly=False, daily=True, forecast_days=days)
        weather.daily = weather.daily[:days]
        return weather

    async def get_full_report(self, lat: float, lon: float) -> Weather:
        return await self._forecast(lat, lon)

    @staticmethod
    def _parse_forecast(data: dict) -> Weather:
        raw_current = data.get("current") or {}
        now = raw_current.get("time")
        now_hour = datetime.fromisoformat(now).replace(minute=0) if now else None

        hourly_block = data.get("hourly") or {}
        hours = []
        for i, stamp in enumerate(hourly_block.get("time") or []):
            at = datetime.fromisoformat(stamp)
            if now_hour is not None and at < now_hour:
                continue
            precipitation = _num(_column(hourly_block, "precipitation", i))
            clouds = _opt(_column(hourly_block, "cloud_cover", i))
            condition, icon = map_condition(
                precipitation, clouds or 0.0, bool(_column(hourly_block, "is_day", i) or 0)
            )
            hours.append(HourlyForecast(
                time=at,
                temperature_c=_num(_column(hourly_block, "temperature_2m", i)),
                feels_like_c=_num(_column(hourly_block, "apparent_temperature", i)),
                wind_speed_kph=_num(_column(hourly_block, "wind_speed_10m", i)),
                humidity=_num(_column(hourly_block, "relative_humidity_2m", i)),
                rain_chance=_opt(_column(hourly_block, "precipitation_probability", i)),
                cloud_cover=clouds,
                uv_index=_opt(_column(hourly_block, "uv_index", i)),
                condition=condition,
                icon=icon,
            ))

        daily_block = data.get("daily") or {}
        days = []
        for i, stamp in enumerate(daily_block.get("time") or []):
            precipitation = _num(_column(daily_block, "precipitation_sum", i))
            condition, icon = map_condition(
                precipitation, _num(_column(daily_block, "cloud_cover_mean", i))
            )
            days.append(DailyForecast(
                date=date.fromisoformat(stamp),
                temperature_min_c=_num(_column(daily_block, "temperature_2m_min", i)),
                temperature_max_c=_num(_column(daily_block, "temperature_2m_max", i)),
                rain_chance=_opt(_column(daily_block, "precipitation_probability_max", i)),
                uv_index=_opt(_column(daily_block, "uv_index_max", i)),
                condition=condition,
                icon=icon,
            ))

        cloud_cover = _opt(raw_current.get("cloud_cover"))
        condition, icon = map_condition(
            _num(raw_current.get("precipitation")),
            cloud_cover or 0.0,
            bool(raw_current.get("is_day", 1)),
        )
        # Open-Meteo has no rain probability or UV for "current"; borrow the running hour
        first_hour = hours[0] if hours else None
        current = CurrentWeather(
            temperature_c=_num(raw_current.get("temperature_2m")),
            feels_like_c=_num(raw_current.get("apparent_temperature")),
            wind_speed_kph=_num(raw_current.get("wind_speed_10m")),
            humidity=_num(raw_current.get("relative_humidity_2m")),
            condition=condition,
            icon=icon,
            uv_index=first_hour.uv_index if first_hour else None,
            rain_chance=first_hour.rain_chance if first_hour else None,
            cloud_cover=cloud_cover,
        )

        return Weather(
            latitude=_num(data.get("latitude")),
            longitude=_num(data.get("longitude")),
            timezone=data.get("timezone") or "UTC",
            current=current,
            hourly=hours,
            daily=days,
        )

    async def close(self) -> None:
        await self.client.aclose()
        logger.info("Weather HTTP client closed.")
