"""
handlers/weather_handler.py
----------------------------
Weather interactions: the /weather command, the weather menu callbacks,
shared locations and the two-step "search city" flow.
Weather data comes from WeatherApiClient; locations are stored via UserService.
"""

from typing import Optional

from telegram import Bot, ReplyKeyboardRemove

from clients.weather_client import WeatherApiClient
from models.update import BotUpdate, CallbackUpdate, LocationUpdate, TextUpdate
from models.user import Location, User
from routing.contracts import CommandHandler, UpdateHandler
from services.user_service import UserService
from state.weather import CitySearchStore
from ui import keyboards, weather_format
from ui.buttons import Commands, WeatherActions
from utils.logger import get_logger

logger = get_logger(__name__)

MIN_CITY_LENGTH = 2


class WeatherCommandHandler(CommandHandler):
    """
    Handle /weather.

    Usage:
        /weather          → location prompt (if none stored) + weather menu
        /weather London   → one-off report for a city, nothing stored
    """

    command = Commands.WEATHER

    def __init__(self, bot: Bot, weather_client: WeatherApiClient, user_service: UserService):
        self.bot = bot
        self.weather_client = weather_client
        self.user_service = user_service

    async def handle(self, update: BotUpdate) -> None:
        if not isinstance(update, TextUpdate):
            return

        parts = update.text.split(maxsplit=1)
        if len(parts) > 1 and parts[1].strip():
            await self._send_city_report(update.chat_id, parts[1].strip())
            return

        try:
            user = await self.user_service.get_by_telegram_id(update.user_id)
            if user is None or user.location is None:
                await self.bot.send_message(
                    chat_id=update.chat_id,
                    text="To show weather at your location, please tap the button below:",
                    reply_markup=keyboards.request_location_menu(),
                )
            await self.bot.send_message(
                chat_id=update.chat_id,
                text="Choose a weather option:",
                reply_markup=keyboards.weather_menu(),
            )
        except Exception as e:
            logger.error(f"Error handling /weather for user {update.user_id}: {e}", exc_info=True)
            await self.bot.send_message(chat_id=update.chat_id, text="⚠️ Something went wrong. Please try again.")

    async def _send_city_report(self, chat_id: int, city: str) -> None:
        try:
            lat, lon = await self.weather_client.get_coordinates_by_city(city)
            weather = await self.weather_client.get_full_report(lat, lon)
            await self.bot.send_message(
                chat_id=chat_id,
                text=weather_format.full(city, weather.current),
                parse_mode="Markdown",
            )
        except Exception as e:
            logger.error(f"Error fetching weather for city {city!r}: {e}")
            await self.bot.send_message(
                chat_id=chat_id,
                text="⚠️ Couldn't fetch weather for that city. Check the spelling and try again.",
            )


class WeatherCallbackHandler(UpdateHandler):
    """
    Handles `weather_*` callbacks from the weather menu.

    Forecasts need a stored location; without one the user is asked to
    share it. "Search city" needs none and arms the city-search flow.
    """

    def __init__(
        self,
        bot: Bot,
        weather_client: WeatherApiClient,
        user_service: UserService,
        city_search: CitySearchStore,
    ):
        self.bot = bot
        self.weather_client = weather_client
        self.user_service = user_service
        self.city_search = city_search

    def can_handle(self, update: BotUpdate) -> bool:
        return isinstance(update, CallbackUpdate) and update.data.startswith(WeatherActions.PREFIX)

    async def handle(self, update: BotUpdate) -> None:
        if update.callback_id:
            await self.bot.answer_callback_query(update.callback_id)

        action = update.data.split(":", 1)[0]
        chat_id = update.chat_id

        if action == WeatherActions.SEARCH_CITY:
            self.city_search.enable(update.user_id)
            await self.bot.send_message(chat_id=chat_id, text="Send the city name:")
            return

        try:
            user = await self.user_service.get_by_telegram_id(update.user_id)
            if user is None or user.location is None:
                await self.bot.send_message(
                    chat_id=chat_id,
                    text="Please share your location:",
                    reply_markup=keyboards.request_location_menu(),
                )
                return

            text = await self._render(action, user)
            if text is None:
                logger.warning(f"Unknown weather action {update.data!r}")
                return
            await self.bot.send_message(chat_id=chat_id, text=text, parse_mode="Markdown")
        except Exception as e:
            logger.error(f"Weather callback {update.data!r} failed: {e}", exc_info=True)
            await self.bot.send_message(chat_id=chat_id, text="⚠️ Failed to fetch weather data.")

    async def _render(self, action: str, user: User) -> Optional[str]:
        lat, lon = user.location.lat, user.location.lon
        if action == WeatherActions.CURRENT:
            weather = await self.weather_client.get_current_weather(lat, lon)
            return weather_format.current(weather.current)
        if action == WeatherActions.HOURLY:
            weather = await self.weather_client.get_hourly_forecast(lat, lon)
            return weather_format.hourly(weather.hourly)
        if action == WeatherActions.DAILY:
            weather = await self.weather_client.get_daily_forecast(lat, lon, days=5)
            return weather_format.daily(weather.daily)
        if action == WeatherActions.WEEKLY:
            weather = await self.weather_client.get_daily_forecast(lat, lon, days=7)
            return weather_format.weekly(weather.daily)
        return None


class WeatherLocationHandler(UpdateHandler):
    """
    Handles a shared location: stores it on the user (with city/country
    from reverse geocoding) and replies with a full report.
    """

    def __init__(self, bot: Bot, weather_client: WeatherApiClient, user_service: UserService):
        self.bot = bot
        self.weather_client = weather_client
        self.user_service = user_service

    def can_handle(self, update: BotUpdate) -> bool:
        return isinstance(update, LocationUpdate)

    async def handle(self, update: BotUpdate) -> None:
        chat_id = update.chat_id
        try:
            user = await self.user_service.get_by_telegram_id(update.user_id)
            if user is None:
                await self.bot.send_message(chat_id=chat_id, text="⚠️ Please use /start first.")
                return

            geo = await self.weather_client.get_city_and_country(update.lat, update.lon)
            user = await self.user_service.update_location(
                update.user_id,
                Location(lat=update.lat, lon=update.lon, city=geo.city, country=geo.country),
            )
            weather = await self.weather_client.get_full_report(update.lat, update.lon)

            await self.bot.send_message(
                chat_id=chat_id,
                text=weather_format.full(user.location.city, weather.current),
                parse_mode="Markdown",
            )
            await self.bot.send_message(chat_id=chat_id, text="Done ✔", reply_markup=ReplyKeyboardRemove())
        except Exception as e:
            logger.error(f"Error handling location from user {update.user_id}: {e}", exc_info=True)
            await self.bot.send_message(chat_id=chat_id, text="⚠️ Something went wrong while fetching weather.")


class WeatherSearchCityHandler(UpdateHandler):
    """
    Second step of "Search city": the next text from the user is a city name.

    The search flag is peeked in `can_handle` and consumed at the start of
    `handle`, so only one text per "Search city" press runs a lookup and a
    new press during a lookup is kept.
    """

    def __init__(self, bot: Bot, weather_client: WeatherApiClient, city_search: CitySearchStore):
        self.bot = bot
        self.weather_client = weather_client
        self.city_search = city_search

    def can_handle(self, update: BotUpdate) -> bool:
        return (
            isinstance(update, TextUpdate)
            and len(update.text.strip()) >= MIN_CITY_LENGTH
            and update.user_id in self.city_search
        )

    async def handle(self, update: BotUpdate) -> None:
        if not self.city_search.consume(update.user_id):
            logger.debug(f"City search of user {update.user_id} already claimed")
            return

        city = update.text.strip()
        try:
            lat, lon = await self.weather_client.get_coordinates_by_city(city)
            weather = await self.weather_client.get_current_weather(lat, lon)
            text = weather_format.city_summary(city, weather.current)
            parse_mode = "Markdown"
        except Exception as e:
            logger.error(f"Failed to fetch weather for city {city!r}: {e}")
            text = "⚠️ I couldn't find weather information for that city. Try something like: London"
            parse_mode = None

        await self.bot.send_message(chat_id=update.chat_id, text=text, parse_mode=parse_mode)
