from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .user_provider import UserProvider
from .post_provider import PostProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "UserProvider",
    "PostProvider",
]
