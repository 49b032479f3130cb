"""
models/user.py
--------------
Domain model for bot users and their saved location.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass
class Location:
    """A geographic point, optionally resolved to a city and country."""
    lat: float
    lon: float
    city: str = ""
    country: str = ""


@dataclass
class User:
    """
    A Telegram user known to the bot.

    Attributes:
        telegram_id: Telegram user ID (unique).
        username: Telegram @username, may be empty.
        first_name: Display name used in greetings.
        timezone: IANA timezone name (default: UTC).
        location: Last shared location, None until the user shares one.
        id: Database primary key (None for new records).
        created_at: Timestamp when the record was created.
    """
    telegram_id: int
    username: str = ""
    first_name: str = ""
    timezone: str = "UTC"
    location: Optional[Location] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = field(default=None, repr=False)
