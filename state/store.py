"""
state/store.py
--------------
Thread-safe keyed store mapping a Telegram user ID to a conversation value.

All operations take a single lock, so a check-and-remove (`consume`) is
atomic even when two updates from the same user are processed concurrently.
"""

import threading
from typing import Generic, Optional, TypeVar

V = TypeVar("V")

_MISSING = object()


class ConversationStateStore(Generic[V]):
    """
    Per-user conversation state.

    At most one value is held per user; `set` overwrites, it never queues.
    """

    def __init__(self, name: str = "state"):
        self.name = name
        self._values: dict[int, V] = {}
        self._lock = threading.Lock()

    def set(self, user_id: int, value: V) -> None:
        """Set or replace the value for a user."""
        with self._lock:
            self._values[user_id] = value

    def try_get(self, user_id: int) -> Optional[V]:
        """Return the user's value without removing it, or None."""
        with self._lock:
            return self._values.get(user_id)

    def take(self, user_id: int) -> Optional[V]:
        """
        Remove and return the user's value, or None if there is none.

        Only one caller gets the value set by a given `set`; the rest get None.
        """
        with self._lock:
            return self._values.pop(user_id, None)

    def consume(self, user_id: int) -> bool:
        """
        Remove the user's value if present.

        Returns:
            True for exactly one caller per `set`; every other caller gets False.
        """
        with self._lock:
            return self._values.pop(user_id, _MISSING) is not _MISSING

    def clear(self, user_id: int) -> None:
        """Remove the user's value. No-op if absent."""
        with self._lock:
            self._values.pop(user_id, None)

    def __contains__(self, user_id: int) -> bool:
        with self._lock:
            return user_id in self._values

    def __len__(self) -> int:
        with self._lock:
            return len(self._values)

    def __repr__(self) -> str:
        return f"<ConversationStateStore {self.name!r} users={len(self)}>"


class IntentStore(ConversationStateStore[bool]):
    """
    Single-use flag: "the next qualifying update from this user continues a flow".

    Presence is the signal, the stored value is always True.
    """

    def enable(self, user_id: int) -> None:
        self.set(user_id, True)
