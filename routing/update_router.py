"""
routing/update_router.py
------------------------
Routes non-command updates to the first UpdateHandler that accepts them.
"""

from typing import Optional

from models.update import BotUpdate
from routing.contracts import UpdateHandler
from routing.registry import HandlerRegistry
from utils.logger import get_logger

logger = get_logger(__name__)


class UpdateRouter:
    """
    Tries update handlers in registration order; first match wins.

    Later handlers are never asked once one accepts, so state-gated handlers
    must be registered before broader ones (see main.build_registry).
    """

    def __init__(self, registry: HandlerRegistry):
        self.registry = registry

    async def route(self, update: BotUpdate) -> Optional[UpdateHandler]:
        """
        Run the first handler whose `can_handle` accepts the update.

        Returns:
            The handler that ran, or None when nothing matched (a silent no-op).
        """
        for handler in self.registry.update_handlers:
            if handler.can_handle(update):
                logger.debug(f"{type(update).__name__} -> {handler!r}")
                await handler.handle(update)
                return handler

        logger.debug(f"No update handler accepted {type(update).__name__}")
        return None
