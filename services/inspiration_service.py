"""
services/inspiration_service.py
--------------------------------
Business logic for inspirations (photo + caption).
"""

import asyncio
from typing import Optional

from models.inspiration import Inspiration
from models.paged import PagedResult
from repositories.inspiration_repo import InspirationRepository
from services.errors import NotFoundError
from utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_LABEL = "mood_board"


def split_tags(text: str) -> list[str]:
    """Split comma-separated tags, trimming each and dropping empty entries."""
    return [tag.strip() for tag in text.split(",") if tag.strip()]


def _require_id(inspiration_id: str) -> None:
    if not inspiration_id or not inspiration_id.strip():
        raise ValueError("Inspiration id cannot be empty")


class InspirationService:
    """
    Handles all business logic related to inspirations.

    Every update method raises NotFoundError when the target row is gone,
    so callers can tell "saved" from "nothing to save".
    """

    def __init__(self, repo: Optional[InspirationRepository] = None):
        self.repo = repo or InspirationRepository()

    async def add(
        self,
        telegram_id: int,
        caption: str,
        image_file_id: str,
        label: str = DEFAULT_LABEL,
        tags: Optional[list[str]] = None,
        favorite: bool = False,
    ) -> Inspiration:
        """
        Save a new inspiration.

        Raises:
            ValueError: If the owner, caption or image reference is missing.
        """
        if telegram_id <= 0:
            raise ValueError("telegram_id must be a positive number")
        if not caption or not caption.strip():
            raise ValueError("caption cannot be empty")
        if not image_file_id:
            raise ValueError("image_file_id cannot be empty")

        inspiration = Inspiration(
            telegram_id=telegram_id,
            content=caption.strip(),
            image_file_id=image_file_id,
            label=label or "",
            tags=tags or [],
            favorite=favorite,
        )
        return await asyncio.to_thread(self.repo.add, inspiration)

    async def get_by_id(self, inspiration_id: str) -> Inspiration:
        _require_id(inspiration_id)
        inspiration = await asyncio.to_thread(self.repo.get_by_id, inspiration_id)
        if inspiration is None:
            raise NotFoundError("Inspiration", inspiration_id)
        return inspiration

    async def get_page(self, telegram_id: int, page: int, page_size: int) -> PagedResult[Inspiration]:
        """
        Fetch page `page` (zero-based) of a user's inspirations.

        Raises:
            ValueError: On a negative page or a non-positive page size.
        """
        if page < 0:
            raise ValueError("page must be >= 0")
        if page_size <= 0:
            raise ValueError("page_size must be > 0")

        items, total = await asyncio.to_thread(
            self.repo.get_page, telegram_id, page * page_size, page_size
        )
        return PagedResult(page=page, page_size=page_size, total_count=total, items=items)

    async def update_content(self, inspiration_id: str, content: str) -> None:
        _require_id(inspiration_id)
        if not await asyncio.to_thread(self.repo.update_content, inspiration_id, content):
            raise NotFoundError("Inspiration", inspiration_id)

    async def update_tags(self, inspiration_id: str, tags: list[str]) -> None:
        _require_id(inspiration_id)
        if not await asyncio.to_thread(self.repo.update_tags, inspiration_id, tags):
            raise NotFoundError("Inspiration", inspiration_id)

    async def update_label(self, inspiration_id: str, label: str) -> None:
        _require_id(inspiration_id)
        if not await asyncio.to_thread(self.repo.update_label, inspiration_id, label):
            raise NotFoundError("Inspiration", inspiration_id)

    async def toggle_favorite(self, inspiration_id: str) -> bool:
        """Flip the favorite flag and return its new value."""
        _require_id(inspiration_id)
        favorite = await asyncio.to_thread(self.repo.toggle_favorite, inspiration_id)
        if favorite is None:
            raise NotFoundError("Inspiration", inspiration_id)
        return favorite

    async def delete(self, inspiration_id: str) -> bool:
        _require_id(inspiration_id)
        return await asyncio.to_thread(self.repo.delete, inspiration_id)
