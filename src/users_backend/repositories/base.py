"""User repository interface"""
from abc import ABC, abstractmethod
from typing import List, Optional

from users_backend.models.user import User


class UserRepository(ABC):
    """Interface for user data access"""

    @abstractmethod
    async def find_all(self) -> List[User]:
        """Get all users in insertion order"""
        pass

    @abstractmethod
    async def find_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """
        Insert or update a user

        A user without an id is inserted with a freshly generated one. A user
        whose id matches a stored row overwrites that row's name and address.
        A user whose id matches nothing is inserted under a new id.
        """
        pass

    @abstractmethod
    async def delete_by_id(self, user_id: int) -> None:
        """Delete user; no-op when absent"""
        pass

    @abstractmethod
    async def exists_by_id(self, user_id: int) -> bool:
        pass

    @abstractmethod
    async def delete_all(self) -> None:
        pass

    @abstractmethod
    async def count(self) -> int:
        pass
