"""
services/user_service.py
-------------------------
Business logic for bot users.
"""

import asyncio
from typing import Optional

from models.user import Location, User
from repositories.user_repo import UserRepository
from services.errors import NotFoundError
from utils.logger import get_logger

logger = get_logger(__name__)


class UserService:
    """Registers users and keeps their shared location."""

    def __init__(self, repo: Optional[UserRepository] = None):
        self.repo = repo or UserRepository()

    async def get_by_telegram_id(self, telegram_id: int) -> Optional[User]:
        return await asyncio.to_thread(self.repo.get_by_telegram_id, telegram_id)

    async def add(
        self,
        telegram_id: int,
        username: str = "",
        first_name: str = "",
        timezone: str = "UTC",
    ) -> User:
        """
        Register a user. Idempotent: an existing user is returned unchanged.

        Raises:
            ValueError: If telegram_id is not a positive integer.
        """
        if telegram_id <= 0:
            raise ValueError("telegram_id must be a positive number")
        user = User(telegram_id=telegram_id, username=username, first_name=first_name, timezone=timezone)
        return await asyncio.to_thread(self.repo.add, user)

    async def update_location(self, telegram_id: int, location: Location) -> User:
        """
        Persist the user's last shared location.

        Raises:
            NotFoundError: If the user never ran /start.
        """
        user = await asyncio.to_thread(self.repo.update_location, telegram_id, location)
        if user is None:
            raise NotFoundError("User", telegram_id)
        logger.info(f"Updated location for user {telegram_id}: {location.city or '?'}, {location.country or '?'}")
        return user
