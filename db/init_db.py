"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from db.connection import get_connection, release_connection
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Users table: Telegram identity plus last shared location
CREATE TABLE IF NOT EXISTS users (
    id              SERIAL PRIMARY KEY,
    telegram_id     BIGINT UNIQUE NOT NULL,
    username        VARCHAR(64) DEFAULT '',
    first_name      VARCHAR(100) DEFAULT '',
    timezone        VARCHAR(64) DEFAULT 'UTC',
    lat             DOUBLE PRECISION,
    lon             DOUBLE PRECISION,
    city            VARCHAR(100) DEFAULT '',
    country         VARCHAR(100) DEFAULT '',
    created_at      TIMESTAMPTZ DEFAULT NOW(),
    updated_at      TIMESTAMPTZ DEFAULT NOW()
);

-- Inspirations: a photo (Telegram file id) with a caption
CREATE TABLE IF NOT EXISTS inspirations (
    id              VARCHAR(32) PRIMARY KEY,
    telegram_id     BIGINT NOT NULL,
    content         TEXT NOT NULL,
    image_file_id   VARCHAR(255) NOT NULL,
    label           VARCHAR(100) DEFAULT '',
    tags            TEXT[] DEFAULT '{}',
    favorite        BOOLEAN DEFAULT FALSE,
    created_at      TIMESTAMPTZ DEFAULT NOW(),
    updated_at      TIMESTAMPTZ DEFAULT NOW()
);

-- Ideas: short text notes
CREATE TABLE IF NOT EXISTS ideas (
    id              VARCHAR(32) PRIMARY KEY,
    telegram_id     BIGINT NOT NULL,
    content         TEXT NOT NULL,
    label           VARCHAR(100) DEFAULT '',
    tags            TEXT[] DEFAULT '{}',
    favorite        BOOLEAN DEFAULT FALSE,
    created_at      TIMESTAMPTZ DEFAULT NOW()
);

-- Indexes for faster queries
CREATE INDEX IF NOT EXISTS idx_inspirations_owner ON inspirations(telegram_id, created_at DESC);
CREATE INDEX IF NOT EXISTS idx_ideas_owner ON ideas(telegram_id, created_at DESC);
"""


def create_tables() -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    conn = get_connection()
    try:
        with conn.cursor() as cur:
            cur.execute(SCHEMA_SQL)
        conn.commit()
        logger.info("Database schema initialized successfully.")
    except Exception as e:
        conn.rollback()
        logger.error(f"Failed to initialize schema: {e}")
        raise
    finally:
        release_connection(conn)


if __name__ == "__main__":
    from db.connection import init_pool
    init_pool()
    create_tables()
    print("✅ Database schema created successfully.")
