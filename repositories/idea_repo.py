"""
repositories/idea_repo.py
--------------------------
Data access layer for ideas.
"""

import uuid

from db.connection import get_connection, release_connection
from models.idea import Idea
from utils.logger import get_logger

logger = get_logger(__name__)


class IdeaRepository:
    """Repository for CRUD operations on the ideas table."""

    def add(self, idea: Idea) -> Idea:
        sql = """
            INSERT INTO ideas (id, telegram_id, content, label, tags, favorite)
            VALUES (%s, %s, %s, %s, %s, %s)
            RETURNING created_at;
        """
        idea.id = idea.id or uuid.uuid4().hex
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (idea.id, idea.telegram_id, idea.content, idea.label, idea.tags, idea.favorite))
                idea.created_at = cur.fetchone()[0]
            conn.commit()
            logger.info(f"Added idea {idea.id} for user {idea.telegram_id}")
            return idea
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to add idea: {e}")
            raise
        finally:
            release_connection(conn)

    def list_by_telegram_id(self, telegram_id: int, limit: int = 50) -> list[Idea]:
        """Newest ideas first."""
        sql = """
            SELECT id, telegram_id, content, label, tags, favorite, created_at
            FROM ideas WHERE telegram_id = %s
            ORDER BY created_at DESC
            LIMIT %s;
        """
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (telegram_id, limit))
                return [
                    Idea(
                        id=r[0], telegram_id=r[1], content=r[2], label=r[3] or "",
                        tags=list(r[4] or []), favorite=bool(r[5]), created_at=r[6],
                    )
                    for r in cur.fetchall()
                ]
        finally:
            release_connection(conn)
