"""
PostgreSQL user repository on top of the shared asyncpg pool
"""

import logging
from typing import Callable, List, Optional

import asyncpg

from users_backend.database.connection import get_db_pool
from users_backend.models.user import User
from users_backend.repositories.base import UserRepository

logger = logging.getLogger(__name__)

USER_COLUMNS = "id, name, address"

# Range of the BIGSERIAL id column; asyncpg refuses to encode anything outside it
BIGINT_MIN = -2**63
BIGINT_MAX = 2**63 - 1


def _row_to_user(row) -> User:
    return User(id=row["id"], name=row["name"], address=row["address"])


def _is_storable_id(user_id: int) -> bool:
    return BIGINT_MIN <= user_id <= BIGINT_MAX


class PostgresUserRepository(UserRepository):
    """Repository for the users table"""

    def __init__(self, pool_provider: Callable = get_db_pool):
        self._pool_provider = pool_provider

    def _get_pool(self):
        db_pool = self._pool_provider()
        if not db_pool:
            raise RuntimeError("Database pool not initialized")
        return db_pool

    async def find_all(self) -> List[User]:
        query = f"SELECT {USER_COLUMNS} FROM users ORDER BY id"

        async with self._get_pool().acquire() as conn:
            logger.info(f"Executing READ query: {query}")
            try:
                rows = await conn.fetch(query)
            except asyncpg.PostgresError as e:
                logger.error(f"Database error: {e}")
                raise RuntimeError(f"Database query failed: {str(e)}")

        return [_row_to_user(row) for row in rows]

    async def find_by_id(self, user_id: int) -> Optional[User]:
        if not _is_storable_id(user_id):
            return None

        query = f"SELECT {USER_COLUMNS} FROM users WHERE id = $1"

        async with self._get_pool().acquire() as conn:
            logger.info(f"Executing READ query: {query}")
            logger.info(f"Parameters: [{user_id}]")
            try:
                row = await conn.fetchrow(query, user_id)
            except asyncpg.PostgresError as e:
                logger.error(f"Database error: {e}")
                raise RuntimeError(f"Database query failed: {str(e)}")

        return _row_to_user(row) if row else None

    async def save(self, user: User) -> User:
        update_query = f"UPDATE users SET name = $2, address = $3 WHERE id = $1 RETURNING {USER_COLUMNS}"
        insert_query = f"INSERT INTO users (name, address) VALUES ($1, $2) RETURNING {USER_COLUMNS}"

        async with self._get_pool().acquire() as conn:
            async with conn.transaction():
                try:
                    row = None
                    if user.id is not None and _is_storable_id(user.id):
                        logger.info(f"Executing UPDATE: {update_query}")
                        logger.info(f"Parameters: [{user.id}, {user.name}, {user.address}]")
                        row = await conn.fetchrow(update_query, user.id, user.name, user.address)

                    # No id, or an id that matches no row: insert under a generated id
                    if not row:
                        logger.info(f"Executing INSERT: {insert_query}")
                        logger.info(f"Parameters: [{user.name}, {user.address}]")
                        row = await conn.fetchrow(insert_query, user.name, user.address)

                    if not row:
                        raise RuntimeError("Save operation failed - no data returned")

                except asyncpg.PostgresError as e:
                    logger.error(f"Database error during SAVE: {e}")
                    raise RuntimeError(f"Database SAVE failed: {str(e)}")

        return _row_to_user(row)

    async def delete_by_id(self, user_id: int) -> None:
        if not _is_storable_id(user_id):
            return

        query = "DELETE FROM users WHERE id = $1"

        async with self._get_pool().acquire() as conn:
            async with conn.transaction():
                logger.info(f"Executing DELETE: {query}")
                logger.info(f"Parameters: [{user_id}]")
                try:
                    result = await conn.execute(query, user_id)
                except asyncpg.PostgresError as e:
                    logger.error(f"Database error during DELETE: {e}")
                    raise RuntimeError(f"Database DELETE failed: {str(e)}")

        # asyncpg returns "DELETE N" where N is the number of rows
        deleted_count = int(result.split()[-1]) if result else 0
        logger.info(f"Deleted {deleted_count} row(s) for user {user_id}")

    async def exists_by_id(self, user_id: int) -> bool:
        if not _is_storable_id(user_id):
            return False

        query = "SELECT EXISTS(SELECT 1 FROM users WHERE id = $1)"

        async with self._get_pool().acquire() as conn:
            logger.info(f"Executing READ query: {query}")
            logger.info(f"Parameters: [{user_id}]")
            try:
                return bool(await conn.fetchval(query, user_id))
            except asyncpg.PostgresError as e:
                logger.error(f"Database error: {e}")
                raise RuntimeError(f"Database query failed: {str(e)}")

    async def delete_all(self) -> None:
        query = "DELETE FROM users"

        async with self._get_pool().acquire() as conn:
            async with conn.transaction():
                logger.info(f"Executing DELETE: {query}")
                try:
                    await conn.execute(query)
                except asyncpg.PostgresError as e:
                    logger.error(f"Database error during DELETE: {e}")
                    raise RuntimeError(f"Database DELETE failed: {str(e)}")

    async def count(self) -> int:
        query = "SELECT COUNT(*) FROM users"

        async with self._get_pool().acquire() as conn:
            try:
                return int(await conn.fetchval(query))
            except asyncpg.PostgresError as e:
                logger.error(f"Database error: {e}")
                raise RuntimeError(f"Database query failed: {str(e)}")
