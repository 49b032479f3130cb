"""
models/idea.py
--------------
Domain model for short text ideas.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass
class Idea:
    """A text idea saved with `/ideas create`."""
    telegram_id: int
    content: str
    label: str = ""
    tags: list[str] = field(default_factory=list)
    favorite: bool = False
    id: Optional[str] = None
    created_at: Optional[datetime] = None

    def __str__(self) -> str:
        return f"💭 {self.label or 'Idea'}: {self.content}"
