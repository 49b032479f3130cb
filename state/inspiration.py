"""
state/inspiration.py
--------------------
State records for the inspiration flows.
"""

from dataclasses import dataclass
from enum import Enum

from state.store import ConversationStateStore, IntentStore


class EditField(str, Enum):
    """Which inspiration field the user's next text message replaces."""
    CONTENT = "content"
    TAGS = "tags"
    LABEL = "label"


@dataclass(frozen=True)
class EditContext:
    """The inspiration being edited and the field the next text updates."""
    target_entity_id: str
    field: EditField


class InspirationEditStore(ConversationStateStore[EditContext]):
    def __init__(self):
        super().__init__("inspiration_edit")


class InspirationCreateIntentStore(IntentStore):
    """Set by the "Add" button, consumed by the next photo with a caption."""

    def __init__(self):
        super().__init__("inspiration_create")

