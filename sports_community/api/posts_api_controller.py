# Standard library imports
from typing import List, Optional

# External package imports
from fastapi import APIRouter

# Local application imports
from ..application.dto.post_dto import PostResponse
from ..application.use_cases.post.list_posts import ListPostsUseCase
from ..application.use_cases.post.get_post import GetPostUseCase
from ..di.container import get_container


router = APIRouter(tags=["posts-api"])


@router.get("", response_model=List[PostResponse])
async def list_posts() -> List[PostResponse]:
    """List all posts with owner first and last name populated"""
    container = get_container()
    list_posts_use_case = container.get(ListPostsUseCase)
    
    return await list_posts_use_case.execute()


@router.get("/{post_id}", response_model=Optional[PostResponse])
async def get_post(post_id: str) -> Optional[PostResponse]:
    """Get a post by ID with its owner populated, or null"""
    container = get_container()
    get_post_use_case = container.get(GetPostUseCase)
    
    return await get_post_use_case.execute(post_id)
