# Standard library imports
import dataclasses
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import FieldValidationError, RecordNotFoundError
from ...dto.user_dto import UserUpdateRequest, UserResponse

logger = logging.getLogger(__name__)


class UpdateUserUseCase:
    """Use case for partially updating a user"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: str, request: UserUpdateRequest) -> UserResponse:
        """
        Apply the submitted fields to an existing user
        
        Fields absent from the request keep their stored values; the merged
        record goes through the same validation as creation.
        
        Args:
            user_id: ID of the user to update
            request: Partial update request
            
        Returns:
            UserResponse with the updated user
            
        Raises:
            RecordNotFoundError: If the user does not exist
            FieldValidationError: If the merged record is invalid or the
                new email belongs to another user
        """
        existing_user = await self.user_repository.find_by_id(user_id)
        if existing_user is None:
            raise RecordNotFoundError("User", user_id)
        
        changes = request.model_dump(exclude_unset=True)
        updated_user = dataclasses.replace(existing_user, **changes)
        
        if updated_user.email != existing_user.email:
            owner = await self.user_repository.find_by_email(updated_user.email)
            if owner is not None and owner.id != existing_user.id:
                raise FieldValidationError(["Email already exists"], entity="User")
        
        saved_user = await self.user_repository.save(updated_user)
        logger.info(f"Updated user {saved_user.id} fields: {sorted(changes)}")
        
        return UserResponse.from_domain(saved_user)
