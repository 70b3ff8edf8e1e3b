# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.post_repository import PostRepository
from ....domain.repositories.user_repository import UserRepository
from ...dto.post_dto import PostResponse


class ListPostsUseCase:
    """Use case for listing all posts with their owners resolved"""
    
    def __init__(
        self,
        post_repository: PostRepository,
        user_repository: UserRepository,
    ) -> None:
        self.post_repository = post_repository
        self.user_repository = user_repository
    
    async def execute(self) -> List[PostResponse]:
        """
        List all posts
        
        Owners are fetched in one batch and merged onto each post. Posts
        whose owner no longer exists come back with ``user`` set to None.
        
        Returns:
            List of PostResponse objects
        """
        posts = await self.post_repository.find_all()
        if not posts:
            return []
        
        owners = await self.user_repository.find_by_ids({post.user_id for post in posts})
        owners_by_id = {owner.id: owner for owner in owners}
        
        return [
            PostResponse.from_domain(post, owners_by_id.get(post.user_id))
            for post in posts
        ]
