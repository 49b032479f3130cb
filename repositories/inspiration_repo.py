"""
repositories/inspiration_repo.py
---------------------------------
Data access layer for inspirations.
All SQL queries related to the `inspirations` table live here.
"""

import uuid
from typing import Optional

from db.connection import get_connection, release_connection
from models.inspiration import Inspiration
from utils.logger import get_logger

logger = get_logger(__name__)

_COLUMNS = "id, telegram_id, content, image_file_id, label, tags, favorite, created_at, updated_at"


class InspirationRepository:
    """Repository for CRUD operations on the inspirations table."""

    # ── CREATE ────────────────────────────────────────────

    def add(self, inspiration: Inspiration) -> Inspiration:
        """
        Insert a new inspiration.

        Returns:
            The same Inspiration with `id` and timestamps populated.
        """
        sql = """
            INSERT INTO inspirations (id, telegram_id, content, image_file_id, label, tags, favorite)
            VALUES (%s, %s, %s, %s, %s, %s, %s)
            RETURNING created_at, updated_at;
        """
        inspiration.id = inspiration.id or uuid.uuid4().hex
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (
                    inspiration.id, inspiration.telegram_id, inspiration.content,
                    inspiration.image_file_id, inspiration.label, inspiration.tags,
                    inspiration.favorite,
                ))
                inspiration.created_at, inspiration.updated_at = cur.fetchone()
            conn.commit()
            logger.info(f"Added inspiration {inspiration.id} for user {inspiration.telegram_id}")
            return inspiration
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to add inspiration: {e}")
            raise
        finally:
            release_connection(conn)

    # ── READ ──────────────────────────────────────────────

    def get_by_id(self, inspiration_id: str) -> Optional[Inspiration]:
        sql = f"SELECT {_COLUMNS} FROM inspirations WHERE id = %s;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (inspiration_id,))
                row = cur.fetchone()
                return self._row_to_inspiration(row) if row else None
        finally:
            release_connection(conn)

    def get_page(self, telegram_id: int, skip: int, take: int) -> tuple[list[Inspiration], int]:
        """
        Fetch one page of a user's inspirations, newest first.

        Returns:
            (items, total_count) where total_count covers all of the user's rows.
        """
        count_sql = "SELECT COUNT(*) FROM inspirations WHERE telegram_id = %s;"
        page_sql = f"""
            SELECT {_COLUMNS} FROM inspirations
            WHERE telegram_id = %s
            ORDER BY created_at DESC, id
            OFFSET %s LIMIT %s;
        """
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(count_sql, (telegram_id,))
                total = int(cur.fetchone()[0])
                cur.execute(page_sql, (telegram_id, skip, take))
                items = [self._row_to_inspiration(r) for r in cur.fetchall()]
            return items, total
        finally:
            release_connection(conn)

    # ── UPDATE ────────────────────────────────────────────

    def _update_field(self, inspiration_id: str, column: str, value) -> bool:
        sql = f"UPDATE inspirations SET {column} = %s, updated_at = NOW() WHERE id = %s;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (value, inspiration_id))
                updated = cur.rowcount > 0
            conn.commit()
            return updated
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to update {column} of inspiration {inspiration_id}: {e}")
            raise
        finally:
            release_connection(conn)

    def update_content(self, inspiration_id: str, content: str) -> bool:
        return self._update_field(inspiration_id, "content", content)

    def update_tags(self, inspiration_id: str, tags: list[str]) -> bool:
        return self._update_field(inspiration_id, "tags", tags)

    def update_label(self, inspiration_id: str, label: str) -> bool:
        return self._update_field(inspiration_id, "label", label)

    def toggle_favorite(self, inspiration_id: str) -> Optional[bool]:
        """
        Flip the favorite flag in one statement.

        Returns:
            The new flag, or None if the inspiration does not exist.
        """
        sql = """
            UPDATE inspirations SET favorite = NOT favorite, updated_at = NOW()
            WHERE id = %s
            RETURNING favorite;
        """
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (inspiration_id,))
                row = cur.fetchone()
            conn.commit()
            return bool(row[0]) if row else None
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to toggle favorite on inspiration {inspiration_id}: {e}")
            raise
        finally:
            release_connection(conn)

    # ── DELETE ────────────────────────────────────────────

    def delete(self, inspiration_id: str) -> bool:
        sql = "DELETE FROM inspirations WHERE id = %s;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (inspiration_id,))
                deleted = cur.rowcount > 0
            conn.commit()
            if deleted:
                logger.info(f"Deleted inspiration {inspiration_id}")
            return deleted
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to delete inspiration {inspiration_id}: {e}")
            raise
        finally:
            release_connection(conn)

    @staticmethod
    def _row_to_inspiration(row: tuple) -> Inspiration:
        return Inspiration(
            id=row[0],
            telegram_id=row[1],
            content=row[2],
            image_file_id=row[3],
            label=row[4] or "",
            tags=list(row[5] or []),
            favorite=bool(row[6]),
            created_at=row[7],
            updated_at=row[8],
        )
