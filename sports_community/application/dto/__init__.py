from .user_dto import UserCreateRequest, UserUpdateRequest, UserResponse
from .post_dto import PostCreateRequest, PostUpdateRequest, PostOwnerResponse, PostResponse

__all__ = [
    "UserCreateRequest",
    "UserUpdateRequest",
    "UserResponse",
    "PostCreateRequest",
    "PostUpdateRequest",
    "PostOwnerResponse",
    "PostResponse",
]
