# Standard library imports
import dataclasses
import logging

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import RecordNotFoundError
from ...dto.post_dto import PostUpdateRequest, PostResponse

logger = logging.getLogger(__name__)


class UpdatePostUseCase:
    """Use case for partially updating a post"""
    
    def __init__(
        self,
        post_repository: PostRepository,
        user_repository: UserRepository,
    ) -> None:
        self.post_repository = post_repository
        self.user_repository = user_repository
    
    async def execute(self, post_id: str, request: PostUpdateRequest) -> PostResponse:
        """
        Apply the submitted fields to an existing post
        
        Raises:
            RecordNotFoundError: If the post does not exist
            FieldValidationError: If the merged post is missing a field
        """
        existing_post = await self.post_repository.find_by_id(post_id)
        if existing_post is None:
            raise RecordNotFoundError("Post", post_id)
        
        changes = request.model_dump(exclude_unset=True)
        updated_post = dataclasses.replace(existing_post, **changes)
        
        saved_post = await self.post_repository.save(updated_post)
        logger.info(f"Updated post {saved_post.id} fields: {sorted(changes)}")
        
        owner = await self.user_repository.find_by_id(saved_post.user_id)
        return PostResponse.from_domain(saved_post, owner)
