"""
handlers/note_handler.py
-------------------------
Handles /notes. Notes are acknowledged but not stored yet.

Usage:
    /notes create <text>
    /notes list
"""

from telegram import Bot

from models.update import BotUpdate, TextUpdate
from routing.contracts import CommandHandler
from ui.buttons import Commands
from utils.logger import get_logger

logger = get_logger(__name__)

USAGE = "Use:\n/notes create <text>\n\nOr:\n/notes list 📝"


class NoteCommandHandler(CommandHandler):
    command = Commands.NOTES

    def __init__(self, bot: Bot):
        self.bot = bot

    async def handle(self, update: BotUpdate) -> None:
        if not isinstance(update, TextUpdate):
            return

        parts = update.text.split(maxsplit=2)
        if len(parts) < 2:
            await self.bot.send_message(chat_id=update.chat_id, text=USAGE)
            return

        sub_command = parts[1].lower()
        content = parts[2].strip() if len(parts) > 2 else ""

        if sub_command == "create":
            if not content:
                await self.bot.send_message(chat_id=update.chat_id, text="You need to write something for the note ✍️")
                return
            await self.bot.send_message(chat_id=update.chat_id, text=f"📝 Note saved:\n\n{content}")
        elif sub_command == "list":
            await self.bot.send_message(chat_id=update.chat_id, text="Here are your recent notes (coming soon) 📔")
        else:
            await self.bot.send_message(chat_id=update.chat_id, text="Unknown note command 😅\n\n" + USAGE)
