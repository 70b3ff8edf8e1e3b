from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ...domain.models.post import Post
from ...domain.models.user import User


class PostCreateRequest(BaseModel):
    """DTO for post creation request (form or JSON body)"""
    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = None
    content: Optional[str] = None
    user_id: Optional[str] = Field(default=None, alias="user")


class PostUpdateRequest(BaseModel):
    """DTO for partial post update; only submitted fields are applied"""
    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = None
    content: Optional[str] = None
    user_id: Optional[str] = Field(default=None, alias="user")


class PostOwnerResponse(BaseModel):
    """Owning user fields resolved onto a post"""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class PostResponse(BaseModel):
    """DTO for post response; ``user`` is None when the owner does not resolve"""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    content: str
    user_id: str = Field(alias="userId")
    user: Optional[PostOwnerResponse] = None

    @property
    def owner_name(self) -> str:
        return self.user.display_name if self.user else "Unknown"

    @classmethod
    def from_domain(cls, post: Post, owner: Optional[User] = None) -> "PostResponse":
        return cls(
            id=post.id or "",
            title=post.title,
            content=post.content,
            user_id=post.user_id,
            user=PostOwnerResponse(
                id=owner.id or "",
                first_name=owner.first_name,
                last_name=owner.last_name,
            ) if owner else None,
        )
