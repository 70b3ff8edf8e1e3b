# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.exceptions import FieldValidationError
from ...dto.user_dto import UserCreateRequest, UserResponse

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """Use case for creating a new user"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, request: UserCreateRequest) -> UserResponse:
        """
        Create a new user
        
        Args:
            request: Creation request with user fields
            
        Returns:
            UserResponse with created user information
            
        Raises:
            FieldValidationError: If any field is invalid or the email is taken
        """
        # Create domain user entity (runs field validation)
        new_user = User(
            id=None,  # Will be set by repository
            first_name=request.first_name,
            last_name=request.last_name,
            age=request.age,
            email=request.email,
            is_admin=request.is_admin,
        )
        
        # Check if email is already registered
        existing_user = await self.user_repository.find_by_email(new_user.email)
        if existing_user is not None:
            raise FieldValidationError(["Email already exists"], entity="User")
        
        saved_user = await self.user_repository.save(new_user)
        logger.info(f"Created user {saved_user.id} ({saved_user.email})")
        
        return UserResponse.from_domain(saved_user)
