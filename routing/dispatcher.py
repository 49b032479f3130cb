"""
routing/dispatcher.py
---------------------
Entry point for every inbound update.

Rules, first applicable wins:
    1. Callback query          -> UpdateRouter
    2. Shared location         -> UpdateRouter
    3. No message content      -> ignored
    4. Text starting with "/"  -> CommandRouter
    5. Main-menu button label  -> synthetic command -> CommandRouter
    6. Anything else           -> UpdateRouter

Only command misses (4, 5) get the fallback reply. An update nobody
accepts in the UpdateRouter is answered with silence.
"""

from typing import Mapping

from telegram import Bot

from models.update import (
    BotUpdate,
    CallbackUpdate,
    LocationUpdate,
    OtherUpdate,
    TextUpdate,
    synthesize_command,
)
from routing.command_router import CommandRouter
from routing.contracts import COMMAND_MARKER
from routing.update_router import UpdateRouter
from ui.buttons import GLOBAL_BUTTONS_TO_COMMAND
from utils.logger import get_logger

logger = get_logger(__name__)

FALLBACK_TEXT = "Send a command, press a button, or share your location 🌤"


class Dispatcher:
    """Classifies an update and hands it to exactly one router."""

    def __init__(
        self,
        bot: Bot,
        command_router: CommandRouter,
        update_router: UpdateRouter,
        button_commands: Mapping[str, str] = GLOBAL_BUTTONS_TO_COMMAND,
    ):
        self.bot = bot
        self.command_router = command_router
        self.update_router = update_router
        self.button_commands = button_commands

    async def dispatch(self, update: BotUpdate) -> None:
        if isinstance(update, (CallbackUpdate, LocationUpdate)):
            await self.update_router.route(update)
            return

        if isinstance(update, OtherUpdate) or (isinstance(update, TextUpdate) and not update.text):
            return

        if isinstance(update, TextUpdate):
            if update.text.startswith(COMMAND_MARKER):
                handled = await self.command_router.route(update)
                await self._fallback_if_unhandled(update, handled)
                return

            command = self.button_commands.get(update.text)
            if command is not None:
                handled = await self.command_router.route(synthesize_command(update, command))
                await self._fallback_if_unhandled(update, handled)
                return

        await self.update_router.route(update)

    async def _fallback_if_unhandled(self, update: TextUpdate, handled: bool) -> None:
        if handled:
            return
        logger.info(f"Unhandled command {update.text!r} from user {update.user_id}")
        await self.bot.send_message(chat_id=update.chat_id, text=FALLBACK_TEXT)
