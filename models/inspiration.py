"""
models/inspiration.py
---------------------
Domain model for inspirations: a saved photo with a caption.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass
class Inspiration:
    """
    A photo saved for later inspiration.

    Attributes:
        id: Hex string identifier, generated on creation.
        telegram_id: Owner's Telegram user ID.
        content: The caption text.
        image_file_id: Telegram file id of the photo.
        label: Short category such as "mood_board".
        tags: Free-form tags.
        favorite: Whether the user starred it.
    """
    telegram_id: int
    content: str
    image_file_id: str
    label: str = ""
    tags: list[str] = field(default_factory=list)
    favorite: bool = False
    id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
