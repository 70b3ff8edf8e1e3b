# Standard library imports
from typing import Optional

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.repositories.user_repository import UserRepository
from ...dto.post_dto import PostResponse


class GetPostUseCase:
    """Use case for getting a post by ID with its owner resolved"""
    
    def __init__(
        self,
        post_repository: PostRepository,
        user_repository: UserRepository,
    ) -> None:
        self.post_repository = post_repository
        self.user_repository = user_repository
    
    async def execute(self, post_id: str) -> Optional[PostResponse]:
        """
        Get a post by ID
        
        Args:
            post_id: ID of the post
            
        Returns:
            PostResponse, or None if no such post exists
        """
        post = await self.post_repository.find_by_id(post_id)
        if post is None:
            return None
        
        owner = await self.user_repository.find_by_id(post.user_id)
        return PostResponse.from_domain(post, owner)
