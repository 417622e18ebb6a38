"""
PostgreSQL repository tests against a mocked asyncpg pool
"""

import asyncpg
import pytest
from unittest.mock import AsyncMock, MagicMock

from users_backend.models.user import User
from users_backend.repositories import PostgresUserRepository


@pytest.fixture
def conn():
    connection = MagicMock()
    connection.fetch = AsyncMock()
    connection.fetchrow = AsyncMock()
    connection.fetchval = AsyncMock()
    connection.execute = AsyncMock()
    return connection


@pytest.fixture
def pool(conn, make_pool):
    return make_pool(conn)


@pytest.fixture
def repository(pool):
    return PostgresUserRepository(pool_provider=lambda: pool)


class TestPostgresUserRepository:

    @pytest.mark.asyncio
    async def test_find_all(self, repository, conn):
        conn.fetch.return_value = [
            {"id": 1, "name": "Devi", "address": "Udupi"},
            {"id": 2, "name": "Raani", "address": "Mangalore"},
        ]

        users = await repository.find_all()

        assert users == [
            User(id=1, name="Devi", address="Udupi"),
            User(id=2, name="Raani", address="Mangalore"),
        ]
        assert "ORDER BY id" in conn.fetch.await_args.args[0]

    @pytest.mark.asyncio
    async def test_find_by_id(self, repository, conn):
        conn.fetchrow.return_value = {"id": 1, "name": "Devi", "address": "Udupi"}

        user = await repository.find_by_id(1)

        assert user == User(id=1, name="Devi", address="Udupi")
        assert conn.fetchrow.await_args.args[1] == 1

    @pytest.mark.asyncio
    async def test_find_by_id_missing(self, repository, conn):
        conn.fetchrow.return_value = None

        assert await repository.find_by_id(999) is None

    @pytest.mark.asyncio
    async def test_save_new_user_inserts(self, repository, conn):
        conn.fetchrow.return_value = {"id": 7, "name": "Devi", "address": "Udupi"}

        saved = await repository.save(User(name="Devi", address="Udupi"))

        assert saved.id == 7
        conn.fetchrow.assert_awaited_once()
        query, name, address = conn.fetchrow.await_args.args
        assert query.startswith("INSERT INTO users")
        assert (name, address) == ("Devi", "Udupi")

    @pytest.mark.asyncio
    async def test_save_existing_user_updates(self, repository, conn):
        conn.fetchrow.return_value = {"id": 3, "name": "Devi R", "address": "Manipal"}

        saved = await repository.save(User(id=3, name="Devi R", address="Manipal"))

        assert saved == User(id=3, name="Devi R", address="Manipal")
        conn.fetchrow.assert_awaited_once()
        assert conn.fetchrow.await_args.args[0].startswith("UPDATE users")

    @pytest.mark.asyncio
    async def test_save_unknown_id_falls_back_to_insert(self, repository, conn):
        conn.fetchrow.side_effect = [None, {"id": 8, "name": "Devi", "address": "Udupi"}]

        saved = await repository.save(User(id=50, name="Devi", address="Udupi"))

        assert saved.id == 8
        assert conn.fetchrow.await_count == 2
        assert conn.fetchrow.await_args_list[1].args[0].startswith("INSERT INTO users")

    @pytest.mark.asyncio
    async def test_exists_by_id(self, repository, conn):
        conn.fetchval.return_value = True

        assert await repository.exists_by_id(1) is True

    @pytest.mark.asyncio
    async def test_delete_by_id(self, repository, conn):
        conn.execute.return_value = "DELETE 1"

        await repository.delete_by_id(1)

        conn.execute.assert_awaited_once_with("DELETE FROM users WHERE id = $1", 1)

    @pytest.mark.asyncio
    async def test_delete_all(self, repository, conn):
        conn.execute.return_value = "DELETE 4"

        await repository.delete_all()

        conn.execute.assert_awaited_once_with("DELETE FROM users")

    @pytest.mark.asyncio
    async def test_count(self, repository, conn):
        conn.fetchval.return_value = 4

        assert await repository.count() == 4

    @pytest.mark.asyncio
    async def test_database_errors_become_runtime_errors(self, repository, conn):
        conn.fetch.side_effect = asyncpg.PostgresError("connection lost")

        with pytest.raises(RuntimeError, match="Database query failed"):
            await repository.find_all()

    @pytest.mark.asyncio
    async def test_missing_pool(self):
        repository = PostgresUserRepository(pool_provider=lambda: None)

        with pytest.raises(RuntimeError, match="Database pool not initialized"):
            await repository.find_all()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("user_id", [2**63, -2**63 - 1, 10**22])
    async def test_out_of_range_id_never_reaches_database(self, repository, pool, user_id):
        assert await repository.find_by_id(user_id) is None
        assert await repository.exists_by_id(user_id) is False
        await repository.delete_by_id(user_id)

        pool.acquire.assert_not_called()

    @pytest.mark.asyncio
    async def test_save_out_of_range_id_inserts(self, repository, conn):
        conn.fetchrow.return_value = {"id": 9, "name": "Devi", "address": "Udupi"}

        saved = await repository.save(User(id=10**22, name="Devi", address="Udupi"))

        assert saved.id == 9
        conn.fetchrow.assert_awaited_once()
        assert conn.fetchrow.await_args.args[0].startswith("INSERT INTO users")

    @pytest.mark.asyncio
    async def test_largest_bigint_id_is_queried(self, repository, conn):
        conn.fetchrow.return_value = None

        assert await repository.find_by_id(2**63 - 1) is None
        conn.fetchrow.assert_awaited_once()
