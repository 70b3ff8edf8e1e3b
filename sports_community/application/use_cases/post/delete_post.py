# Standard library imports
import logging

# Local application imports
from ....domain.repositories.post_repository import PostRepository

logger = logging.getLogger(__name__)


class DeletePostUseCase:
    """Use case for deleting a post"""
    
    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository
    
    async def execute(self, post_id: str) -> bool:
        deleted = await self.post_repository.delete(post_id)
        if deleted:
            logger.info(f"Deleted post {post_id}")
        return deleted
