# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """Use case for deleting a user; the user's posts are left untouched"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: str) -> bool:
        """
        Delete a user by ID
        
        Args:
            user_id: ID of the user
            
        Returns:
            True if a user was removed, False if none matched
        """
        deleted = await self.user_repository.delete(user_id)
        if deleted:
            logger.info(f"Deleted user {user_id}")
        else:
            logger.info(f"Delete requested for unknown user {user_id}")
        return deleted
