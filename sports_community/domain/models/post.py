# Standard library imports
from dataclasses import dataclass
from typing import List, Optional

# Local application imports
from ..exceptions import FieldValidationError


@dataclass
class Post:
    """
    Pure domain model for Post entity.
    
    ``user_id`` references the owning User. The reference is not checked
    for existence; a dangling id simply does not resolve when displayed.
    """
    id: Optional[str]
    title: str
    content: str
    user_id: str
    
    def __post_init__(self) -> None:
        """Business validations"""
        errors: List[str] = []
        if not self.title:
            errors.append("Title is required")
        if not self.content:
            errors.append("Content is required")
        if not self.user_id:
            errors.append("User is required")
        if errors:
            raise FieldValidationError(errors, entity="Post")
