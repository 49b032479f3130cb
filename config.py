"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from dotenv import load_dotenv

load_dotenv()


# ── Telegram ──────────────────────────────────────────────
TELEGRAM_BOT_TOKEN: str = os.getenv("TELEGRAM_BOT_TOKEN", "")

# ── PostgreSQL ────────────────────────────────────────────
DB_HOST: str = os.getenv("DB_HOST", "localhost")
DB_PORT: int = int(os.getenv("DB_PORT", "5432"))
DB_NAME: str = os.getenv("DB_NAME", "musebot")
DB_USER: str = os.getenv("DB_USER", "musebot_user")
DB_PASS: str = os.getenv("DB_PASS", "")

DATABASE_URL: str = (
    f"postgresql://{DB_USER}:{DB_PASS}@{DB_HOST}:{DB_PORT}/{DB_NAME}"
)
DB_POOL_MIN: int = int(os.getenv("DB_POOL_MIN", "1"))
DB_POOL_MAX: int = int(os.getenv("DB_POOL_MAX", "5"))

# ── Weather providers ─────────────────────────────────────
OPEN_METEO_FORECAST_URL: str = os.getenv(
    "OPEN_METEO_FORECAST_URL", "https://api.open-meteo.com/v1/forecast"
)
OPEN_METEO_GEOCODING_URL: str = os.getenv(
    "OPEN_METEO_GEOCODING_URL", "https://geocoding-api.open-meteo.com/v1/search"
)
NOMINATIM_REVERSE_URL: str = os.getenv(
    "NOMINATIM_REVERSE_URL", "https://nominatim.openstreetmap.org/reverse"
)
WEATHER_HTTP_TIMEOUT_SECONDS: float = float(os.getenv("WEATHER_HTTP_TIMEOUT_SECONDS", "10"))
# Nominatim rejects requests without an identifying User-Agent
WEATHER_USER_AGENT: str = os.getenv("WEATHER_USER_AGENT", "MuseBot/1.0")

# ── Inspirations ──────────────────────────────────────────
INSPIRATIONS_PAGE_SIZE: int = int(os.getenv("INSPIRATIONS_PAGE_SIZE", "5"))

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
