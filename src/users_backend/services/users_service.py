"""
Users service - business logic for user management
"""

import logging
from typing import List, Optional

from users_backend.models.user import User
from users_backend.repositories import UserRepository, get_user_repository

logger = logging.getLogger(__name__)

class UsersService:
    """Service for user management operations"""

    def __init__(self, repository: UserRepository):
        self.repository = repository

    async def save_user(self, user: User) -> User:
        """
        Persist a user as given

        Args:
            user: User to insert or update

        Returns:
            The stored user, with its id assigned
        """
        saved = await self.repository.save(user)
        logger.info(f"Saved user {saved.id}")
        return saved

    async def get_all_users(self) -> List[User]:
        return await self.repository.find_all()

    async def get_user_by_id(self, user_id: int) -> Optional[User]:
        """
        Get a user by its ID

        Returns:
            The user, or None when no user has this id
        """
        user = await self.repository.find_by_id(user_id)
        if user is None:
            logger.info(f"User {user_id} not found")
        return user

    async def update_user(self, user_id: int, new_details: User) -> Optional[User]:
        """
        Overwrite name and address of an existing user

        Args:
            user_id: ID of the user to update
            new_details: Source of the new name and address; its id is ignored

        Returns:
            The updated user, or None when no user has this id (nothing is written)
        """
        existing = await self.repository.find_by_id(user_id)
        if existing is None:
            logger.info(f"Update skipped - user {user_id} not found")
            return None

        existing.name = new_details.name
        existing.address = new_details.address

        logger.info(f"Updating user {user_id}")
        return await self.repository.save(existing)

    async def delete_user(self, user_id: int) -> bool:
        """Delete a user; returns False without deleting when the id is unknown"""
        if not await self.repository.exists_by_id(user_id):
            logger.info(f"Delete skipped - user {user_id} not found")
            return False

        await self.repository.delete_by_id(user_id)
        logger.info(f"Deleted user {user_id}")
        return True


# Global service instance
_users_service: Optional[UsersService] = None

def get_users_service() -> UsersService:
    """Get the global users service instance"""
    global _users_service
    if _users_service is None:
        _users_service = UsersService(get_user_repository())
    return _users_service