# Standard library imports
import logging

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.post import Post
from ...dto.post_dto import PostCreateRequest, PostResponse

logger = logging.getLogger(__name__)


class CreatePostUseCase:
    """Use case for creating a new post"""
    
    def __init__(
        self,
        post_repository: PostRepository,
        user_repository: UserRepository,
    ) -> None:
        self.post_repository = post_repository
        self.user_repository = user_repository
    
    async def execute(self, request: PostCreateRequest) -> PostResponse:
        """
        Create a new post
        
        The owner id is stored as given; it is not checked for existence.
        
        Args:
            request: Creation request with post fields
            
        Returns:
            PostResponse with the created post and its owner, if resolvable
            
        Raises:
            FieldValidationError: Listing every missing field
        """
        new_post = Post(
            id=None,
            title=request.title,
            content=request.content,
            user_id=request.user_id,
        )
        
        saved_post = await self.post_repository.save(new_post)
        logger.info(f"Created post {saved_post.id} for user {saved_post.user_id}")
        
        owner = await self.user_repository.find_by_id(saved_post.user_id)
        if owner is None:
            logger.warning(f"Post {saved_post.id} references unknown user {saved_post.user_id}")
        
        return PostResponse.from_domain(saved_post, owner)
