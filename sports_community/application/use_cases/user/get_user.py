# Standard library imports
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserResponse


class GetUserUseCase:
    """Use case for getting a user by ID"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: str) -> Optional[UserResponse]:
        """
        Get a user by ID
        
        Args:
            user_id: ID of the user
            
        Returns:
            UserResponse, or None if no such user exists
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            return None
        return UserResponse.from_domain(user)
