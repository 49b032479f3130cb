"""
repositories/user_repo.py
--------------------------
Data access layer for user records.
"""

from typing import Optional

from db.connection import get_connection, release_connection
from models.user import Location, User
from utils.logger import get_logger

logger = get_logger(__name__)

_COLUMNS = "id, telegram_id, username, first_name, timezone, lat, lon, city, country, created_at, updated_at"


class UserRepository:
    """Repository for CRUD operations on the users table."""

    def add(self, user: User) -> User:
        """
        Insert a user, or return the existing row when the Telegram ID is taken.
        Uses PostgreSQL's ON CONFLICT (upsert) for atomicity.
        """
        sql = f"""
            INSERT INTO users (telegram_id, username, first_name, timezone)
            VALUES (%s, %s, %s, %s)
            ON CONFLICT (telegram_id) DO UPDATE SET updated_at = users.updated_at
            RETURNING {_COLUMNS};
        """
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (user.telegram_id, user.username, user.first_name, user.timezone))
                row = cur.fetchone()
            conn.commit()
            logger.info(f"Stored user {user.telegram_id}")
            return self._row_to_user(row)
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to add user {user.telegram_id}: {e}")
            raise
        finally:
            release_connection(conn)

    def get_by_telegram_id(self, telegram_id: int) -> Optional[User]:
        """Fetch a user by their Telegram ID, or None."""
        sql = f"SELECT {_COLUMNS} FROM users WHERE telegram_id = %s;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (telegram_id,))
                row = cur.fetchone()
                return self._row_to_user(row) if row else None
        finally:
            release_connection(conn)

    def update_location(self, telegram_id: int, location: Location) -> Optional[User]:
        """Save the user's last shared location. Returns None if the user is unknown."""
        sql = f"""
            UPDATE users
            SET lat = %s, lon = %s, city = %s, country = %s, updated_at = NOW()
            WHERE telegram_id = %s
            RETURNING {_COLUMNS};
        """
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (location.lat, location.lon, location.city, location.country, telegram_id))
                row = cur.fetchone()
            conn.commit()
            return self._row_to_user(row) if row else None
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to update location for user {telegram_id}: {e}")
            raise
        finally:
            release_connection(conn)

    @staticmethod
    def _row_to_user(row: tuple) -> User:
        location = None
        if row[5] is not None and row[6] is not None:
            location = Location(lat=float(row[5]), lon=float(row[6]), city=row[7] or "", country=row[8] or "")
        return User(
            id=row[0],
            telegram_id=row[1],
            username=row[2] or "",
            first_name=row[3] or "",
            timezone=row[4] or "UTC",
            location=location,
            created_at=row[9],
            updated_at=row[10],
        )
