"""
routing/command_router.py
-------------------------
Routes command messages to their CommandHandler.
"""

from models.update import BotUpdate, TextUpdate
from routing.registry import HandlerRegistry
from utils.logger import get_logger

logger = get_logger(__name__)


class CommandRouter:
    """Looks up the first token of the message text and runs the matching handler."""

    def __init__(self, registry: HandlerRegistry):
        self.registry = registry

    async def route(self, update: BotUpdate) -> bool:
        """
        Route a command update.

        Returns:
            True if a handler was found and ran, False if nothing matched.
            A miss is not an error and never raises.
        """
        if not isinstance(update, TextUpdate):
            return False

        tokens = update.text.split()
        if not tokens:
            return False

        command = tokens[0].lower()
        handler = self.registry.find_command(command)
        if handler is None:
            logger.debug(f"No command handler for {command!r} (user {update.user_id})")
            return False

        logger.debug(f"{command} -> {type(handler).__name__} (user {update.user_id})")
        await handler.handle(update)
        return True
