"""
routing/contracts.py
--------------------
The two handler capabilities the routers know about.
"""

from abc import ABC, abstractmethod

from models.update import BotUpdate

COMMAND_MARKER = "/"


class CommandHandler(ABC):
    """
    Handles exactly one slash command, e.g. ``/start``.

    `command` includes the leading slash and is matched case-insensitively
    against the first token of the message text. The handler receives the
    whole update (arguments included) and is responsible for every reply,
    including apologies when a collaborator fails.
    """

    command: str = ""

    @abstractmethod
    async def handle(self, update: BotUpdate) -> None:
        ...


class UpdateHandler(ABC):
    """
    Handles a non-command update selected by `can_handle`.

    `can_handle` must be fast, synchronous and free of side effects, with
    one documented exception: a handler gated by a single-use intent may
    consume that intent inside `can_handle`. Checking and claiming the
    intent has to be one atomic step, otherwise two near-simultaneous
    updates could both see it. Such handlers must say so in their
    docstring and the update is then committed to them.

    `handle` runs only after `can_handle` returned True. It must catch its
    own failures and answer the user.
    """

    @abstractmethod
    def can_handle(self, update: BotUpdate) -> bool:
        ...

    @abstractmethod
    async def handle(self, update: BotUpdate) -> None:
        ...

    def __repr__(self) -> str:
        return type(self).__name__
