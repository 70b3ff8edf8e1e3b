from .user import (
    ListUsersUseCase,
    GetUserUseCase,
    CreateUserUseCase,
    UpdateUserUseCase,
    DeleteUserUseCase,
)
from .post import (
    ListPostsUseCase,
    GetPostUseCase,
    CreatePostUseCase,
    UpdatePostUseCase,
    DeletePostUseCase,
)

__all__ = [
    "ListUsersUseCase",
    "GetUserUseCase",
    "CreateUserUseCase",
    "UpdateUserUseCase",
    "DeleteUserUseCase",
    "ListPostsUseCase",
    "GetPostUseCase",
    "CreatePostUseCase",
    "UpdatePostUseCase",
    "DeletePostUseCase",
]
