"""
models/weather.py
-----------------
Weather records returned by the weather client.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional


@dataclass
class CurrentWeather:
    temperature_c: float = 0.0
    feels_like_c: float = 0.0
    wind_speed_kph: float = 0.0
    humidity: float = 0.0
    condition: str = "Clear"
    icon: str = "🌤"
    uv_index: Optional[float] = None
    rain_chance: Optional[float] = None
    cloud_cover: Optional[float] = None


@dataclass
class HourlyForecast:
    time: datetime
    temperature_c: float = 0.0
    feels_like_c: float = 0.0
    wind_speed_kph: float = 0.0
    humidity: float = 0.0
    rain_chance: Optional[float] = None
    cloud_cover: Optional[float] = None
    uv_index: Optional[float] = None
    condition: str = "Clear"
    icon: str = "🌤"


@dataclass
class DailyForecast:
    date: date
    temperature_min_c: float = 0.0
    temperature_max_c: float = 0.0
    rain_chance: Optional[float] = None
    uv_index: Optional[float] = None
    condition: str = "Clear"
    icon: str = "🌤"


@dataclass
class Weather:
    """A forecast response: current conditions plus optional hourly/daily series."""
    latitude: float
    longitude: float
    timezone: str = "UTC"
    current: CurrentWeather = field(default_factory=CurrentWeather)
    hourly: list[HourlyForecast] = field(default_factory=list)
    daily: list[DailyForecast] = field(default_factory=list)


@dataclass(frozen=True)
class ReverseGeocodingResult:
    city: str = ""
    country: str = ""
