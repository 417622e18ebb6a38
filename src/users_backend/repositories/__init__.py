"""
User repositories and the process-wide repository for the configured backend
"""

import logging
from typing import Optional

from users_backend.config.settings import STORAGE_BACKEND, STORAGE_POSTGRES
from users_backend.repositories.base import UserRepository
from users_backend.repositories.memory import InMemoryUserRepository
from users_backend.repositories.postgres import PostgresUserRepository

logger = logging.getLogger(__name__)

_user_repository: Optional[UserRepository] = None


def get_user_repository() -> UserRepository:
    """Get the global user repository instance"""
    global _user_repository
    if _user_repository is None:
        if STORAGE_BACKEND == STORAGE_POSTGRES:
            _user_repository = PostgresUserRepository()
        else:
            _user_repository = InMemoryUserRepository()
        logger.info(f"User repository initialized: {type(_user_repository).__name__}")
    return _user_repository


__all__ = [
    "UserRepository",
    "InMemoryUserRepository",
    "PostgresUserRepository",
    "get_user_repository",
]
