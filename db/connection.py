"""
db/connection.py
----------------
Process-wide PostgreSQL connection pool.

Repositories run inside `asyncio.to_thread` workers, so several threads
borrow connections at once; psycopg2's ThreadedConnectionPool guards the
pool with a lock. Every `get_connection()` must be paired with
`release_connection()` in a `finally` block.
"""

from typing import Optional

import psycopg2
from psycopg2 import pool
from config import DATABASE_URL, DB_HOST, DB_NAME, DB_POOL_MAX, DB_POOL_MIN
from utils.logger import get_logger

logger = get_logger(__name__)

_pool: Optional[pool.ThreadedConnectionPool] = None


def init_pool(min_conn: int = DB_POOL_MIN, max_conn: int = DB_POOL_MAX) -> None:
    """
    Open the pool. Calling it again while a pool is open does nothing.

    Raises:
        psycopg2.OperationalError: If PostgreSQL cannot be reached.
    """
    global _pool
    if _pool is not None:
        return
    try:
        _pool = pool.ThreadedConnectionPool(min_conn, max_conn, DATABASE_URL)
        logger.info(f"Connected to PostgreSQL {DB_HOST}/{DB_NAME} (pool {min_conn}-{max_conn}).")
    except psycopg2.OperationalError as e:
        logger.error(f"Could not connect to PostgreSQL {DB_HOST}/{DB_NAME}: {e}")
        raise


def get_connection():
    """
    Borrow a connection.

    Raises:
        RuntimeError: If init_pool() has not run yet.
        psycopg2.pool.PoolError: If every connection is already borrowed.
    """
    if _pool is None:
        raise RuntimeError("Database pool not initialized. Call init_pool() first.")
    return _pool.getconn()


def release_connection(conn) -> None:
    if _pool is not None:
        _pool.putconn(conn)


def close_pool() -> None:
    global _pool
    if _pool is None:
        return
    _pool.closeall()
    _pool = None
    logger.info("Database connection pool closed.")
