"""
ui/weather_format.py
--------------------
Turns weather records into chat messages (Telegram Markdown).
"""

from typing import Optional

from models.weather import CurrentWeather, DailyForecast, HourlyForecast


def _pct(value: Optional[float]) -> str:
    return "n/a" if value is None else f"{value:.0f}%"


def _uv(value: Optional[float]) -> str:
    return "n/a" if value is None else f"{value:.1f}"


def _clean(name: str) -> str:
    """Strip characters that would break Markdown emphasis around a place name."""
    return name.replace("*", "").replace("_", " ").replace("`", "")


def full(city: str, w: CurrentWeather) -> str:
    return (
        f"🌤 Weather in *{_clean(city) or 'your location'}*\n\n"
        f"🌡 Temp: {w.temperature_c:.1f}°C\n"
        f"🥵 Feels like: {w.feels_like_c:.1f}°C\n"
        f"💧 Humidity: {w.humidity:.0f}%\n"
        f"🌬 Wind: {w.wind_speed_kph:.1f} km/h\n"
        f"☁️ Clouds: {_pct(w.cloud_cover)}\n"
        f"🌧 Rain: {_pct(w.rain_chance)}\n"
        f"🔆 UV: {_uv(w.uv_index)}\n\n"
        f"Condition: *{w.condition}* {w.icon}"
    )


def current(w: CurrentWeather) -> str:
    return (
        "🌦 *Current weather*\n\n"
        f"🌡 Temp: {w.temperature_c:.1f}°C\n"
        f"🥵 Feels like: {w.feels_like_c:.1f}°C\n"
        f"💧 Humidity: {w.humidity:.0f}%\n"
        f"🌬 Wind: {w.wind_speed_kph:.1f} km/h\n"
        f"🌧 Rain: {_pct(w.rain_chance)}\n"
        f"🔆 UV: {_uv(w.uv_index)}\n\n"
        f"Condition: *{w.condition}* {w.icon}"
    )


def city_summary(city: str, w: CurrentWeather) -> str:
    return (
        f"🌤 Weather in *{_clean(city)}*\n\n"
        f"🌡 Temp: {w.temperature_c:.1f}°C\n"
        f"💧 Humidity: {w.humidity:.0f}%\n"
        f"🌬 Wind: {w.wind_speed_kph:.1f} km/h\n\n"
        f"Condition: *{w.condition}* {w.icon}"
    )


def hourly(hours: list[HourlyForecast], limit: int = 12) -> str:
    if not hours:
        return "⚠️ No hourly forecast available."
    lines = [
        f"🕒 *{h.time:%H:%M}*\n"
        f"🌡 {h.temperature_c:.1f}°C (Feels {h.feels_like_c:.1f}°C)\n"
        f"💧 {h.humidity:.0f}%\n"
        f"🌬 {h.wind_speed_kph:.1f} km/h\n"
        f"🌧 {_pct(h.rain_chance)}\n"
        f"{h.condition} {h.icon}"
        for h in hours[:limit]
    ]
    return f"⏱ *Hourly forecast (next {min(limit, len(hours))} hours)*\n\n" + "\n\n".join(lines)


def daily(days: list[DailyForecast], limit: int = 5) -> str:
    if not days:
        return "⚠️ No daily forecast available."
    lines = [
        f"📆 *{d.date:%A}*\n"
        f"🌡 {d.temperature_max_c:.1f}°C / {d.temperature_min_c:.1f}°C\n"
        f"🌧 {_pct(d.rain_chance)}\n"
        f"{d.condition} {d.icon}"
        for d in days[:limit]
    ]
    return f"📆 *Daily forecast (next {min(limit, len(days))} days)*\n\n" + "\n\n".join(lines)


def weekly(week: list[DailyForecast]) -> str:
    if not week:
        return "⚠️ No weekly forecast available."
    lines = [
        f"📅 *{d.date:%a}* {d.temperature_max_c:.0f}° / {d.temperature_min_c:.0f}° "
        f"🌧 {_pct(d.rain_chance)} {d.icon}"
        for d in week[:7]
    ]
    return "📅 *Weekly forecast*\n\n" + "\n".join(lines)
