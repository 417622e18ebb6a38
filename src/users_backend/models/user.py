"""
User Pydantic models
"""

from typing import Optional
from pydantic import BaseModel


class User(BaseModel):
    id: Optional[int] = None
    name: Optional[str] = None
    address: Optional[str] = None


class UserRequest(User):
    """Request body for create and update; a supplied id is accepted but ignored"""

    def to_user(self) -> User:
        """Build a transient user carrying only the writable fields"""
        return User(name=self.name, address=self.address)
