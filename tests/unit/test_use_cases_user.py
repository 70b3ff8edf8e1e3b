"""
Unit tests for user use cases (List, Get, Create, Update, Delete).
"""
import pytest

from sports_community.application.dto.user_dto import UserCreateRequest, UserUpdateRequest
from sports_community.application.use_cases.user import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
)
from sports_community.domain.exceptions import FieldValidationError, RecordNotFoundError
from sports_community.domain.models.user import User


def _make_user(user_id: str = "usr-1", email: str = "jo@example.com", **overrides) -> User:
    fields = dict(id=user_id, first_name="Jo", last_name="Smith", age=30, email=email)
    fields.update(overrides)
    return User(**fields)


class TestListAndGetUsers:
    """Tests for ListUsersUseCase and GetUserUseCase"""

    @pytest.mark.asyncio
    async def test_list_returns_users(self, mock_user_repo):
        mock_user_repo.find_all.return_value = [_make_user("usr-1"), _make_user("usr-2", "b@example.com")]
        result = await ListUsersUseCase(mock_user_repo).execute()
        assert [user.id for user in result] == ["usr-1", "usr-2"]

    @pytest.mark.asyncio
    async def test_get_missing_returns_none(self, mock_user_repo):
        mock_user_repo.find_by_id.return_value = None
        assert await GetUserUseCase(mock_user_repo).execute("nope") is None

    @pytest.mark.asyncio
    async def test_get_found(self, mock_user_repo):
        mock_user_repo.find_by_id.return_value = _make_user("usr-9")
        result = await GetUserUseCase(mock_user_repo).execute("usr-9")
        assert result.id == "usr-9"
        assert result.first_name == "Jo"


class TestCreateUserUseCase:
    """Tests for CreateUserUseCase"""

    @pytest.mark.asyncio
    async def test_create_success(self, mock_user_repo):
        mock_user_repo.find_by_email.return_value = None
        mock_user_repo.save.return_value = _make_user("usr-new", is_admin=True)

        result = await CreateUserUseCase(mock_user_repo).execute(
            UserCreateRequest(firstName="Jo", lastName="Smith", age="30", email="jo@example.com", is_admin="on")
        )
        assert result.id == "usr-new"
        saved = mock_user_repo.save.call_args.args[0]
        assert saved.id is None
        assert saved.age == 30
        assert saved.is_admin is True

    @pytest.mark.asyncio
    async def test_create_duplicate_email_raises(self, mock_user_repo):
        mock_user_repo.find_by_email.return_value = _make_user("usr-1")

        with pytest.raises(FieldValidationError, match="Email already exists"):
            await CreateUserUseCase(mock_user_repo).execute(
                UserCreateRequest(firstName="Al", lastName="Lee", age=20, email="jo@example.com")
            )
        mock_user_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_create_invalid_fields_never_hit_repository(self, mock_user_repo):
        with pytest.raises(FieldValidationError):
            await CreateUserUseCase(mock_user_repo).execute(
                UserCreateRequest(firstName="Jo3", lastName="Smith", age=0, email="a@b")
            )
        mock_user_repo.find_by_email.assert_not_called()
        mock_user_repo.save.assert_not_called()


class TestUpdateUserUseCase:
    """Tests for UpdateUserUseCase"""

    @pytest.mark.asyncio
    async def test_partial_update_keeps_other_fields(self, mock_user_repo):
        mock_user_repo.find_by_id.return_value = _make_user("usr-1", is_admin=True)
        mock_user_repo.save.side_effect = lambda user: user

        result = await UpdateUserUseCase(mock_user_repo).execute("usr-1", UserUpdateRequest(age="41"))

        assert result.age == 41
        assert result.first_name == "Jo"
        assert result.email == "jo@example.com"
        assert result.is_admin is True
        mock_user_repo.find_by_email.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_unknown_user_raises(self, mock_user_repo):
        mock_user_repo.find_by_id.return_value = None
        with pytest.raises(RecordNotFoundError):
            await UpdateUserUseCase(mock_user_repo).execute("missing", UserUpdateRequest(age=5))

    @pytest.mark.asyncio
    async def test_update_validates_merged_record(self, mock_user_repo):
        mock_user_repo.find_by_id.return_value = _make_user("usr-1")
        with pytest.raises(FieldValidationError, match="Last name cannot contain"):
            await UpdateUserUseCase(mock_user_repo).execute("usr-1", UserUpdateRequest(lastName="Sm!th"))
        mock_user_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_to_taken_email_raises(self, mock_user_repo):
        mock_user_repo.find_by_id.return_value = _make_user("usr-1")
        mock_user_repo.find_by_email.return_value = _make_user("usr-2", email="taken@example.com")
        with pytest.raises(FieldValidationError, match="Email already exists"):
            await UpdateUserUseCase(mock_user_repo).execute(
                "usr-1", UserUpdateRequest(email="taken@example.com")
            )


class TestDeleteUserUseCase:
    """Tests for DeleteUserUseCase"""

    @pytest.mark.asyncio
    async def test_delete_reports_result(self, mock_user_repo):
        mock_user_repo.delete.return_value = True
        assert await DeleteUserUseCase(mock_user_repo).execute("usr-1") is True
        mock_user_repo.delete.assert_awaited_once_with("usr-1")
