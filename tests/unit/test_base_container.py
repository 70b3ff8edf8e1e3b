"""
Unit tests for the dependency container.
"""
import pytest

from sports_community.application.use_cases.user import CreateUserUseCase
from sports_community.di.base_container import BaseContainer
from sports_community.domain.repositories.user_repository import UserRepository


class TestBaseContainer:
    def test_singleton_is_shared(self):
        container = BaseContainer()
        marker = object()
        container.register_singleton("database", marker)
        assert container.get("database") is marker

    def test_factory_builds_each_time(self):
        container = BaseContainer()
        container.register_factory("thing", object)
        assert container.get("thing") is not container.get("thing")

    def test_missing_key_raises(self):
        with pytest.raises(ValueError, match="UserRepository"):
            BaseContainer().get(UserRepository)

    def test_providers_wire_use_cases(self, container, user_repository):
        use_case = container.get(CreateUserUseCase)
        assert isinstance(use_case, CreateUserUseCase)
        assert use_case.user_repository is user_repository
