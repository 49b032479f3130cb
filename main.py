"""
main.py
-------
Entry point for the MuseBot Telegram bot.

Responsibilities:
    - Initialize the database connection pool and schema.
    - Build the conversation state stores, services and handlers.
    - Start long polling and feed every update to the Dispatcher.
"""

from dataclasses import dataclass

from telegram import Bot, BotCommand, Update
from telegram.ext import Application, ContextTypes, TypeHandler

from clients.weather_client import WeatherApiClient
from config import TELEGRAM_BOT_TOKEN
from db.connection import close_pool, init_pool
from db.init_db import create_tables
from handlers.idea_handler import IdeaCommandHandler
from handlers.inspiration_handler import (
    InspirationCallbackHandler,
    InspirationCommandHandler,
    InspirationCreateHandler,
    InspirationEditHandler,
)
from handlers.note_handler import NoteCommandHandler
from handlers.start_handler import HelpCommandHandler, StartCommandHandler
from handlers.weather_handler import (
    WeatherCallbackHandler,
    WeatherCommandHandler,
    WeatherLocationHandler,
    WeatherSearchCityHandler,
)
from models.update import from_telegram
from routing.command_router import CommandRouter
from routing.dispatcher import Dispatcher
from routing.registry import HandlerRegistry
from routing.update_router import UpdateRouter
from services.idea_service import IdeaService
from services.inspiration_service import InspirationService
from services.user_service import UserService
from state.inspiration import InspirationCreateIntentStore, InspirationEditStore
from state.weather import CitySearchStore
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class Services:
    users: UserService
    inspirations: InspirationService
    ideas: IdeaService
    weather: WeatherApiClient


@dataclass
class StateStores:
    create_intents: InspirationCreateIntentStore
    edits: InspirationEditStore
    city_search: CitySearchStore


def build_registry(bot: Bot, services: Services, stores: StateStores) -> HandlerRegistry:
    """
    Wire every handler. Update handler order is priority order (first match wins):
    callbacks and locations first, then the state-gated text/photo handlers.
    Any future catch-all text handler must go last, or it would shadow them.
    """
    command_handlers = [
        StartCommandHandler(bot, services.users),
        HelpCommandHandler(bot),
        WeatherCommandHandler(bot, services.weather, services.users),
        NoteCommandHandler(bot),
        IdeaCommandHandler(bot, services.ideas),
        InspirationCommandHandler(bot),
    ]
    update_handlers = [
        InspirationCallbackHandler(bot, services.inspirations, stores.edits, stores.create_intents),
        WeatherCallbackHandler(bot, services.weather, services.users, stores.city_search),
        WeatherLocationHandler(bot, services.weather, services.users),
        InspirationCreateHandler(bot, services.inspirations, stores.create_intents),
        InspirationEditHandler(bot, services.inspirations, stores.edits),
        WeatherSearchCityHandler(bot, services.weather, stores.city_search),
    ]
    return HandlerRegistry(command_handlers, update_handlers)


def build_dispatcher(bot: Bot, services: Services, stores: StateStores) -> Dispatcher:
    registry = build_registry(bot, services, stores)
    return Dispatcher(bot, CommandRouter(registry), UpdateRouter(registry))


async def set_bot_commands(application: Application) -> None:
    """Register bot commands menu in Telegram on startup."""
    commands = [
        BotCommand("start", "🚀 Start the bot"),
        BotCommand("help", "📖 Show help"),
        BotCommand("weather", "🌤 Weather menu"),
        BotCommand("notes", "📝 Notes"),
        BotCommand("ideas", "💡 Ideas"),
        BotCommand("inspirations", "🎀 Inspirations"),
    ]
    await application.bot.set_my_commands(commands)
    logger.info("Bot commands menu registered successfully.")


async def log_error(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Last-resort logging for exceptions a handler failed to catch."""
    logger.error(f"Unhandled error while processing update {update}", exc_info=context.error)


def main() -> None:
    """Initialize and run the bot."""

    # ── 1. Database setup ─────────────────────────────────
    logger.info("Initializing database...")
    init_pool()
    create_tables()

    # ── 2. Build the Telegram application ─────────────────
    logger.info("Starting Telegram bot...")
    weather_client = WeatherApiClient()

    async def on_shutdown(_: Application) -> None:
        await weather_client.close()

    app = (
        Application.builder()
        .token(TELEGRAM_BOT_TOKEN)
        .concurrent_updates(True)
        .post_init(set_bot_commands)
        .post_shutdown(on_shutdown)
        .build()
    )

    # ── 3. Wire state, services and handlers ──────────────
    services = Services(
        users=UserService(),
        inspirations=InspirationService(),
        ideas=IdeaService(),
        weather=weather_client,
    )
    stores = StateStores(
        create_intents=InspirationCreateIntentStore(),
        edits=InspirationEditStore(),
        city_search=CitySearchStore(),
    )
    dispatcher = build_dispatcher(app.bot, services, stores)

    async def on_update(update: Update, _: ContextTypes.DEFAULT_TYPE) -> None:
        await dispatcher.dispatch(from_telegram(update))

    # ── 4. Every update goes through the Dispatcher ───────
    app.add_handler(TypeHandler(Update, on_update))
    app.add_error_handler(log_error)

    # ── 5. Start polling ──────────────────────────────────
    logger.info("🚀 MuseBot is running! Press Ctrl+C to stop.")
    app.run_polling(drop_pending_updates=True, allowed_updates=["message", "callback_query"])

    # ── 6. Cleanup on shutdown ────────────────────────────
    close_pool()
    logger.info("MuseBot stopped.")


if __name__ == "__main__":
    main()
