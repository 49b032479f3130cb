"""
services/idea_service.py
-------------------------
Business logic for text ideas.
"""

import asyncio
from typing import Optional

from models.idea import Idea
from repositories.idea_repo import IdeaRepository


class IdeaService:
    def __init__(self, repo: Optional[IdeaRepository] = None):
        self.repo = repo or IdeaRepository()

    async def add(self, telegram_id: int, content: str, label: str = "") -> Idea:
        if not content or not content.strip():
            raise ValueError("content cannot be empty")
        idea = Idea(telegram_id=telegram_id, content=content.strip(), label=label)
        return await asyncio.to_thread(self.repo.add, idea)

    async def list_for_user(self, telegram_id: int) -> list[Idea]:
        return await asyncio.to_thread(self.repo.list_by_telegram_id, telegram_id)
