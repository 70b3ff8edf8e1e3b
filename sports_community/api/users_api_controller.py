# Standard library imports
from typing import List, Optional

# External package imports
from fastapi import APIRouter

# Local application imports
from ..application.dto.user_dto import UserResponse
from ..application.use_cases.user.list_users import ListUsersUseCase
from ..application.use_cases.user.get_user import GetUserUseCase
from ..di.container import get_container


router = APIRouter(tags=["users-api"])


@router.get("", response_model=List[UserResponse])
async def list_users() -> List[UserResponse]:
    """
    List all users
    
    Returns:
        List of UserResponse objects
    """
    container = get_container()
    list_users_use_case = container.get(ListUsersUseCase)
    
    return await list_users_use_case.execute()


@router.get("/{user_id}", response_model=Optional[UserResponse])
async def get_user(user_id: str) -> Optional[UserResponse]:
    """
    Get a user by ID
    
    Args:
        user_id: ID of the user
        
    Returns:
        UserResponse, or null when no such user exists
    """
    container = get_container()
    get_user_use_case = container.get(GetUserUseCase)
    
    return await get_user_use_case.execute(user_id)
