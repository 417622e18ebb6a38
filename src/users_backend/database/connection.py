"""
Database connection and pool management
"""

import asyncpg
import logging
from users_backend.config.settings import (
    DATABASE_URL,
    DB_POOL_MIN_SIZE,
    DB_POOL_MAX_SIZE,
    DB_COMMAND_TIMEOUT,
)

logger = logging.getLogger(__name__)

USERS_TABLE_DDL = """
CREATE TABLE IF NOT EXISTS users (
    id BIGSERIAL PRIMARY KEY,
    name TEXT,
    address TEXT
)
"""

# Global database pool
db_pool = None

async def init_database():
    """Initialize database connection pool and make sure the users table exists"""
    global db_pool
    db_pool = await asyncpg.create_pool(
        DATABASE_URL,
        min_size=DB_POOL_MIN_SIZE,
        max_size=DB_POOL_MAX_SIZE,
        command_timeout=DB_COMMAND_TIMEOUT,
        statement_cache_size=0  # Fix for pgbouncer compatibility
    )

    # Test connection
    async with db_pool.acquire() as conn:
        await conn.fetchval("SELECT 1")
        await conn.execute(USERS_TABLE_DDL)

    logger.info("Database initialized successfully")


async def close_database():
    """Close database connection pool"""
    global db_pool
    if db_pool:
        await db_pool.close()
        db_pool = None
    logger.info("Database connections closed")

def get_db_pool():
    """Get the database pool instance"""
    return db_pool
