from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...domain.models.user import User


ADMIN_CHECKBOX_VALUES = {"on", "true", "1", "yes"}


def parse_admin_flag(value: Any) -> bool:
    """Interpret an HTML checkbox or JSON boolean as the admin flag"""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in ADMIN_CHECKBOX_VALUES


class UserCreateRequest(BaseModel):
    """DTO for user creation request (form or JSON body).

    Fields stay loosely typed so the domain model can report every problem
    with its own messages.
    """
    model_config = ConfigDict(populate_by_name=True)

    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    age: Any = None  # raw value; the domain model validates it
    email: Optional[str] = None
    is_admin: bool = False

    @field_validator("is_admin", mode="before")
    @classmethod
    def coerce_admin_checkbox(cls, value: Any) -> bool:
        return parse_admin_flag(value)


class UserUpdateRequest(BaseModel):
    """DTO for partial user update; only submitted fields are applied"""
    model_config = ConfigDict(populate_by_name=True)

    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    age: Any = None  # raw value; the domain model validates it
    email: Optional[str] = None
    is_admin: Optional[bool] = None

    @field_validator("is_admin", mode="before")
    @classmethod
    def coerce_admin_checkbox(cls, value: Any) -> bool:
        return parse_admin_flag(value)


class UserResponse(BaseModel):
    """DTO for user response"""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    age: int
    email: str
    is_admin: bool = False

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id or "",
            first_name=user.first_name,
            last_name=user.last_name,
            age=user.age,
            email=user.email,
            is_admin=user.is_admin,
        )
