# Standard library imports
import re
from dataclasses import dataclass
from typing import Any, List, Optional

# Local application imports
from ..exceptions import FieldValidationError


NAME_PATTERN = re.compile(r"[a-zA-Z\s]+")
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
# Largest integer BSON can store (signed 64-bit)
MAX_AGE = 2**63 - 1


@dataclass
class User:
    """
    Pure domain model for User entity.
    
    Every failing field is collected before raising, so callers get the full
    list of problems in one FieldValidationError. ``age`` accepts form text
    and is normalised to an int.
    """
    id: Optional[str]
    first_name: str
    last_name: str
    age: int
    email: str
    is_admin: bool = False
    
    def __post_init__(self) -> None:
        """Business validations"""
        errors: List[str] = []
        
        self.first_name = _validate_name(self.first_name, "First name", errors)
        self.last_name = _validate_name(self.last_name, "Last name", errors)
        self.age = _validate_age(self.age, errors)
        self.email = _validate_email(self.email, errors)
        self.is_admin = bool(self.is_admin)
        
        if errors:
            raise FieldValidationError(errors, entity="User")
    
    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value == "")


def _validate_name(value: Any, label: str, errors: List[str]) -> Any:
    if _is_blank(value):
        errors.append(f"{label} is required")
        return value
    value = str(value)
    if not NAME_PATTERN.fullmatch(value):
        errors.append(f"{label} cannot contain numbers or special characters")
    return value


def _validate_age(value: Any, errors: List[str]) -> Any:
    if _is_blank(value) or (isinstance(value, str) and not value.strip()):
        errors.append("Age is required")
        return value
    
    if isinstance(value, bool):
        errors.append("Age must be a whole number")
        return value
    
    if isinstance(value, float):
        if not value.is_integer():
            errors.append("Age must be a whole number")
            return value
        value = int(value)
    elif not isinstance(value, int):
        try:
            value = int(str(value).strip())
        except ValueError:
            errors.append("Age must be a whole number")
            return value
    
    if value < 1:
        errors.append("Age must be a positive number")
    elif value > MAX_AGE:
        errors.append("Age is too large")
    return value


def _validate_email(value: Any, errors: List[str]) -> Any:
    if _is_blank(value):
        errors.append("Email is required")
        return value
    value = str(value)
    if not EMAIL_PATTERN.fullmatch(value):
        errors.append("Invalid email format")
    return value
