"""
handlers/start_handler.py
--------------------------
Handles /start and /help commands.
Registers the user and shows the main menu.
"""

from telegram import Bot

from models.update import BotUpdate, TextUpdate
from routing.contracts import CommandHandler
from services.user_service import UserService
from ui.buttons import Commands, start_menu
from utils.logger import get_logger

logger = get_logger(__name__)

HELP_TEXT = """
🤖 *Welcome to MuseBot!*

*🔧 Available commands:*
/start - Start the bot
/help - Show this help
/weather - Weather menu (or `/weather London`)
/notes - Quick notes (`/notes create <text>`, `/notes list`)
/ideas - Ideas (`/ideas create <text>`, `/ideas list`)
/inspirations - Save photos with captions

📍 Share your location any time to get the weather where you are.
"""


class StartCommandHandler(CommandHandler):
    """
    Handles /start. Idempotent: a returning user is greeted, not re-registered.
    """

    command = Commands.START

    def __init__(self, bot: Bot, user_service: UserService):
        self.bot = bot
        self.user_service = user_service

    async def handle(self, update: BotUpdate) -> None:
        if not isinstance(update, TextUpdate):
            return

        first_name = update.first_name or "friend"
        try:
            existing = await self.user_service.get_by_telegram_id(update.user_id)
            if existing is not None:
                await self.bot.send_message(
                    chat_id=update.chat_id,
                    text=f"Welcome back, {first_name}! 🎉",
                    reply_markup=start_menu(),
                )
                return

            await self.user_service.add(update.user_id, update.username, first_name)
            logger.info(f"User {update.user_id} ({first_name}) started the bot.")

            await self.bot.send_message(
                chat_id=update.chat_id,
                text=(
                    f"Hello {first_name}! 👋\n"
                    "I'm your personal bot.\n\n"
                    "You can get weather updates, keep ideas and save inspirations right here.\n"
                    "Use the keyboard below to get started:"
                ),
                reply_markup=start_menu(),
            )
        except Exception as e:
            logger.error(f"Error handling /start for user {update.user_id}: {e}", exc_info=True)
            await self.bot.send_message(
                chat_id=update.chat_id,
                text="⚠️ Something went wrong while setting up your account.",
            )


class HelpCommandHandler(CommandHandler):
    """Handles /help (also reached through the ❓ Help button)."""

    command = Commands.HELP

    def __init__(self, bot: Bot):
        self.bot = bot

    async def handle(self, update: BotUpdate) -> None:
        await self.bot.send_message(chat_id=update.chat_id, text=HELP_TEXT, parse_mode="Markdown")
