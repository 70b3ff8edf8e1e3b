"""
Shared pytest fixtures for sports_community tests.
"""
import os
from typing import Dict, Iterable, List, Optional
from unittest.mock import AsyncMock, MagicMock, patch

import dataclasses
import pytest
from bson import ObjectId

from sports_community.di.base_container import BaseContainer
from sports_community.di.providers import PostProvider, UserProvider
from sports_community.domain.exceptions import FieldValidationError
from sports_community.domain.models.post import Post
from sports_community.domain.models.user import User
from sports_community.domain.repositories.post_repository import PostRepository
from sports_community.domain.repositories.user_repository import UserRepository


class InMemoryUserRepository(UserRepository):
    """UserRepository kept in a dict, with the same unique-email rule as the Mongo index"""

    def __init__(self) -> None:
        self.users: Dict[str, User] = {}

    async def find_all(self) -> List[User]:
        return list(self.users.values())

    async def find_by_id(self, user_id: str) -> Optional[User]:
        return self.users.get(user_id)

    async def find_by_ids(self, user_ids: Iterable[str]) -> List[User]:
        return [self.users[user_id] for user_id in user_ids if user_id in self.users]

    async def find_by_email(self, email: str) -> Optional[User]:
        return next((user for user in self.users.values() if user.email == email), None)

    async def save(self, user: User) -> User:
        for other in self.users.values():
            if other.email == user.email and other.id != user.id:
                raise FieldValidationError(["Email already exists"], entity="User")
        if not user.id:
            user = dataclasses.replace(user, id=str(ObjectId()))
        self.users[user.id] = user
        return user

    async def delete(self, user_id: str) -> bool:
        return self.users.pop(user_id, None) is not None


class InMemoryPostRepository(PostRepository):
    """PostRepository kept in a dict"""

    def __init__(self) -> None:
        self.posts: Dict[str, Post] = {}

    async def find_all(self) -> List[Post]:
        return list(self.posts.values())

    async def find_by_id(self, post_id: str) -> Optional[Post]:
        return self.posts.get(post_id)

    async def save(self, post: Post) -> Post:
        if not post.id:
            post = dataclasses.replace(post, id=str(ObjectId()))
        self.posts[post.id] = post
        return post

    async def delete(self, post_id: str) -> bool:
        return self.posts.pop(post_id, None) is not None


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_sports_community",
        "PORT": "3100",
        "LOG_LEVEL": "debug",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository with async methods."""
    return AsyncMock(spec=UserRepository)


@pytest.fixture
def mock_post_repo():
    """Mock PostRepository with async methods."""
    return AsyncMock(spec=PostRepository)


@pytest.fixture
def user_repository():
    return InMemoryUserRepository()


@pytest.fixture
def post_repository():
    return InMemoryPostRepository()


@pytest.fixture
def container(user_repository, post_repository):
    """Container wired like DIContainer but over in-memory repositories."""
    container = BaseContainer()
    container.register_singleton(UserRepository, user_repository)
    container.register_singleton(PostRepository, post_repository)
    UserProvider.register(container)
    PostProvider.register(container)
    return container


@pytest.fixture
def client(container):
    """TestClient over the real app with the database layer swapped out."""
    from fastapi.testclient import TestClient
    from sports_community.main import app

    with patch("sports_community.di.container._container", container), patch(
        "sports_community.main.connect_database", new=AsyncMock(return_value=True)
    ), patch("sports_community.main.close_database", new=MagicMock()):
        with TestClient(app) as c:
            yield c
