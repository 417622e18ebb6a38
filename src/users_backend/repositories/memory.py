"""
In-process user storage, used when no database is configured and in tests
"""

import itertools
import logging
from typing import Dict, List, Optional

from users_backend.models.user import User
from users_backend.repositories.base import UserRepository

logger = logging.getLogger(__name__)


class InMemoryUserRepository(UserRepository):
    """Dict-backed repository; ids come from a sequence that is never rewound"""

    def __init__(self):
        self._rows: Dict[int, User] = {}
        self._ids = itertools.count(1)

    async def find_all(self) -> List[User]:
        return [row.model_copy() for row in self._rows.values()]

    async def find_by_id(self, user_id: int) -> Optional[User]:
        row = self._rows.get(user_id)
        return row.model_copy() if row is not None else None

    async def save(self, user: User) -> User:
        if user.id is not None and user.id in self._rows:
            row = User(id=user.id, name=user.name, address=user.address)
            logger.debug(f"Updated user {user.id}")
        else:
            row = User(id=next(self._ids), name=user.name, address=user.address)
            logger.debug(f"Inserted user {row.id}")

        self._rows[row.id] = row
        return row.model_copy()

    async def delete_by_id(self, user_id: int) -> None:
        self._rows.pop(user_id, None)

    async def exists_by_id(self, user_id: int) -> bool:
        return user_id in self._rows

    async def delete_all(self) -> None:
        self._rows.clear()

    async def count(self) -> int:
        return len(self._rows)
