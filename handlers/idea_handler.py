"""
handlers/idea_handler.py
-------------------------
Handles /ideas for storing and listing text ideas.
Delegates all logic to IdeaService.
"""

from telegram import Bot

from models.update import BotUpdate, TextUpdate
from routing.contracts import CommandHandler
from services.idea_service import IdeaService
from ui.buttons import Commands
from utils.logger import get_logger

logger = get_logger(__name__)

USAGE = "Use:\n/ideas create <text>\n\nOr:\n/ideas list 💡"


class IdeaCommandHandler(CommandHandler):
    """
    Handle /ideas.

    Usage:
        /ideas create Build a birdhouse
        /ideas list
    """

    command = Commands.IDEAS

    def __init__(self, bot: Bot, idea_service: IdeaService):
        self.bot = bot
        self.idea_service = idea_service

    async def handle(self, update: BotUpdate) -> None:
        if not isinstance(update, TextUpdate):
            return

        parts = update.text.split(maxsplit=2)
        if len(parts) < 2:
            await self.bot.send_message(chat_id=update.chat_id, text=USAGE)
            return

        sub_command = parts[1].lower()
        content = parts[2].strip() if len(parts) > 2 else ""

        try:
            if sub_command == "create":
                if not content:
                    await self.bot.send_message(chat_id=update.chat_id, text="You need to write something ✍️")
                    return
                await self.idea_service.add(update.user_id, content)
                await self.bot.send_message(chat_id=update.chat_id, text="💡 Idea saved!")

            elif sub_command == "list":
                ideas = await self.idea_service.list_for_user(update.user_id)
                if not ideas:
                    await self.bot.send_message(chat_id=update.chat_id, text="You haven't saved any ideas yet 🤔")
                    return
                await self.bot.send_message(chat_id=update.chat_id, text="\n\n".join(str(i) for i in ideas))

            else:
                await self.bot.send_message(chat_id=update.chat_id, text="Unknown subcommand 😅\n\n" + USAGE)
        except Exception as e:
            logger.error(f"Error handling /ideas for user {update.user_id}: {e}", exc_info=True)
            await self.bot.send_message(chat_id=update.chat_id, text="Something went wrong 😢 Try again later.")
