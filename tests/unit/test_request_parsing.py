"""
Unit tests for request DTOs and payload validation helpers.
"""
import pytest

from sports_community.api.dependencies import build_request
from sports_community.application.dto.post_dto import PostCreateRequest
from sports_community.application.dto.user_dto import (
    UserCreateRequest,
    UserResponse,
    UserUpdateRequest,
    parse_admin_flag,
)
from sports_community.domain.exceptions import FieldValidationError


class TestAdminFlag:
    @pytest.mark.parametrize("value", ["on", "true", "TRUE", True, "1"])
    def test_truthy(self, value):
        assert parse_admin_flag(value) is True

    @pytest.mark.parametrize("value", ["off", "", None, False, "false"])
    def test_falsy(self, value):
        assert parse_admin_flag(value) is False


class TestUserRequests:
    def test_create_from_form_names(self):
        request = UserCreateRequest.model_validate(
            {"firstName": "Jo", "lastName": "Smith", "age": "30", "email": "jo@example.com", "is_admin": "on"}
        )
        assert request.first_name == "Jo"
        assert request.age == "30"
        assert request.is_admin is True

    def test_create_checkbox_absent_means_not_admin(self):
        assert UserCreateRequest.model_validate({"firstName": "Jo"}).is_admin is False

    def test_age_is_passed_through_untouched(self):
        # a JSON boolean must reach the domain check as a bool, not as 1
        assert UserCreateRequest.model_validate({"age": True}).age is True
        assert UserUpdateRequest.model_validate({"age": 10**20}).age == 10**20

    def test_update_only_reports_submitted_fields(self):
        request = UserUpdateRequest.model_validate({"age": "44"})
        assert request.model_dump(exclude_unset=True) == {"age": "44"}

    def test_response_serializes_with_field_names(self):
        response = UserResponse(id="u1", first_name="Jo", last_name="Smith", age=3, email="a@b.com")
        assert response.model_dump(by_alias=True) == {
            "id": "u1",
            "firstName": "Jo",
            "lastName": "Smith",
            "age": 3,
            "email": "a@b.com",
            "is_admin": False,
        }


class TestBuildRequest:
    def test_valid_payload(self):
        request = build_request(PostCreateRequest, {"title": "t", "content": "c", "user": "u1"})
        assert request.user_id == "u1"

    def test_type_errors_become_field_errors(self):
        with pytest.raises(FieldValidationError) as excinfo:
            build_request(PostCreateRequest, {"title": ["not", "text"]})
        assert excinfo.value.errors[0].startswith("title:")
