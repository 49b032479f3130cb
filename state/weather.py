"""
state/weather.py
----------------
State for the two-step weather city search.
"""

from state.store import IntentStore


class CitySearchStore(IntentStore):
    """Set by the "Search city" button; the next text is read as a city name."""

    def __init__(self):
        super().__init__("weather_city_search")
