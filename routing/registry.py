"""
routing/registry.py
-------------------
Immutable collection of command and update handlers, built once at startup.
"""

from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from routing.contracts import COMMAND_MARKER, CommandHandler, UpdateHandler
from utils.logger import get_logger

logger = get_logger(__name__)


class HandlerConfigurationError(Exception):
    """Raised at startup when the handler set is inconsistent."""


class HandlerRegistry:
    """
    Holds the registered handlers.

    Command handlers are keyed by their lower-cased command; registering the
    same command twice raises instead of letting one silently shadow the other.
    Update handlers keep their registration order, which is their priority.
    """

    def __init__(
        self,
        command_handlers: Iterable[CommandHandler],
        update_handlers: Iterable[UpdateHandler],
    ):
        commands: dict[str, CommandHandler] = {}
        for handler in command_handlers:
            key = (handler.command or "").strip().lower()
            if not key.startswith(COMMAND_MARKER) or len(key) == 1:
                raise HandlerConfigurationError(
                    f"{type(handler).__name__} has invalid command {handler.command!r}"
                )
            if key in commands:
                raise HandlerConfigurationError(
                    f"Command {key!r} is claimed by both "
                    f"{type(commands[key]).__name__} and {type(handler).__name__}"
                )
            commands[key] = handler

        self._commands: Mapping[str, CommandHandler] = MappingProxyType(commands)
        self._update_handlers: tuple[UpdateHandler, ...] = tuple(update_handlers)

        logger.info(
            f"Registered {len(self._commands)} command handlers "
            f"({', '.join(sorted(self._commands))}) and "
            f"{len(self._update_handlers)} update handlers "
            f"({', '.join(repr(h) for h in self._update_handlers)})."
        )

    @property
    def commands(self) -> Mapping[str, CommandHandler]:
        return self._commands

    @property
    def update_handlers(self) -> tuple[UpdateHandler, ...]:
        """Update handlers in priority order."""
        return self._update_handlers

    def find_command(self, token: str) -> Optional[CommandHandler]:
        """Exact, case-insensitive lookup of a command token like ``/Start``."""
        return self._commands.get(token.lower())
