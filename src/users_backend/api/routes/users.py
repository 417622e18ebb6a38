"""
User management API routes
All storage access goes through the users service.
"""

import logging
from typing import List
from fastapi import APIRouter, Depends, Response, status

from users_backend.models.user import User, UserRequest
from users_backend.services.users_service import UsersService, get_users_service

router = APIRouter()
logger = logging.getLogger(__name__)

@router.post("", status_code=status.HTTP_201_CREATED, response_model=User)
async def create_user(
    request: UserRequest,
    users_service: UsersService = Depends(get_users_service)
):
    """Create a new user; any id in the body is ignored"""
    return await users_service.save_user(request.to_user())

@router.get("", response_model=List[User])
async def get_all_users(
    users_service: UsersService = Depends(get_users_service)
):
    """List all users"""
    return await users_service.get_all_users()

@router.get("/{user_id}", response_model=User)
async def get_user(
    user_id: int,
    users_service: UsersService = Depends(get_users_service)
):
    """Get user details"""
    user = await users_service.get_user_by_id(user_id)
    if user is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return user

@router.put("/{user_id}", response_model=User)
async def update_user(
    user_id: int,
    request: UserRequest,
    users_service: UsersService = Depends(get_users_service)
):
    """Replace name and address of a user"""
    user = await users_service.update_user(user_id, request.to_user())
    if user is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return user

@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: int,
    users_service: UsersService = Depends(get_users_service)
):
    """Delete a user"""
    if not await users_service.delete_user(user_id):
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
